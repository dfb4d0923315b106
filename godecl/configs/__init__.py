"""
godecl Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from godecl.configs.logging import get_logger, setup_logging

# Paths
from godecl.configs.paths import get_data_path

# YAML config
from godecl.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    get_config_path,
    load_yaml_config,
)

# Runtime
from godecl.configs.runtime import DEFAULT_CONFIG, get_full_config

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_path",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "get_config_path",
    "load_yaml_config",
    # Runtime
    "DEFAULT_CONFIG",
    "get_full_config",
]
