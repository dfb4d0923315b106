"""
godecl

Converts the top-level declarations of a Go source file into a tagged-variant
JSON document for code generators and cross-language bridges.
"""

from godecl.engine import render_path, render_source, translate_path, translate_source
from godecl.exceptions import ErrorKind, GodeclError, ParseError, TranslationError
from godecl.version import __version__

__all__ = [
    "__version__",
    "render_path",
    "render_source",
    "translate_path",
    "translate_source",
    "ErrorKind",
    "GodeclError",
    "ParseError",
    "TranslationError",
]
