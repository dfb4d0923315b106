"""
godecl YAML Configuration

Loading and defaults for ~/.godecl/config.yaml.
"""

import os
from pathlib import Path
from typing import Optional

import yaml

from godecl.configs.paths import get_data_path
from godecl.exceptions import ConfigurationError

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# godecl Configuration

# Enable debug logging
debug: false

# Also write log records to this file (stderr only when unset)
log_file: null
"""


def get_config_path() -> Path:
    """Get the path to config.yaml (GODECL_CONFIG overrides the default)."""
    env_path = os.environ.get("GODECL_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return get_data_path() / "config.yaml"


def load_yaml_config(config_path: Optional[Path] = None) -> dict:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Explicit file to read. Defaults to get_config_path().

    Returns:
        Configuration dictionary (empty if file doesn't exist)

    Raises:
        ConfigurationError: If the file can't be read, isn't valid YAML,
            or doesn't hold a mapping.
    """
    if config_path is None:
        config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(
            "Config file not readable", {"path": str(config_path), "error": str(e)}
        ) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            "Config file is not valid YAML", {"path": str(config_path), "error": str(e)}
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Config file must contain a mapping", {"path": str(config_path)}
        )
    return data
