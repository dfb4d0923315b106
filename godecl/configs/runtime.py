"""
godecl Runtime Configuration

Configuration merging logic.
Combines defaults, YAML config, environment variables and CLI overrides.
"""

import os
from pathlib import Path
from typing import Optional

from godecl.configs.yaml_config import load_yaml_config
from godecl.exceptions import ConfigurationError

DEFAULT_CONFIG = {
    "debug": False,
    "log_file": None,
}


def _env_flag(name: str) -> Optional[bool]:
    value = os.environ.get(name)
    if value is None or value == "":
        return None
    return value.lower() in ("true", "1", "yes")


def get_full_config(
    config_path: Optional[Path] = None,
    overrides: Optional[dict] = None,
) -> dict:
    """
    Build the effective configuration.

    Priority (highest first):
    1. overrides (CLI flags; None values are skipped)
    2. GODECL_DEBUG / GODECL_LOG_FILE env vars
    3. config.yaml
    4. DEFAULT_CONFIG

    Args:
        config_path: Explicit YAML file, or None for the default location
        overrides: Values that win over every other source

    Returns:
        Dict with every DEFAULT_CONFIG key set
    """
    config = dict(DEFAULT_CONFIG)

    yaml_config = load_yaml_config(config_path)
    unknown = sorted(set(yaml_config) - set(DEFAULT_CONFIG))
    if unknown:
        raise ConfigurationError("Unknown config keys", {"keys": unknown})
    config.update(yaml_config)

    env_debug = _env_flag("GODECL_DEBUG")
    if env_debug is not None:
        config["debug"] = env_debug
    env_log_file = os.environ.get("GODECL_LOG_FILE")
    if env_log_file:
        config["log_file"] = env_log_file

    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value

    if not isinstance(config["debug"], bool):
        raise ConfigurationError("'debug' must be a boolean", {"value": config["debug"]})
    if config["log_file"] is not None and not isinstance(config["log_file"], str):
        raise ConfigurationError("'log_file' must be a string", {"value": config["log_file"]})

    return config
