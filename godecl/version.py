"""
Version Information
"""

__version__ = "1.0.0"
