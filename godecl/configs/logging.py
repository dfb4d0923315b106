"""
godecl Logging Configuration

Configures logging based on environment variables:
- GODECL_DEBUG: Enable debug logging (default: false)
- GODECL_LOG_FILE: Optional log file path (default: stderr only)

Diagnostics about ignored constructs are WARNING records, so they always
reach stderr.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    debug: Optional[bool] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for godecl.

    Args:
        debug: Enable debug level. Defaults to GODECL_DEBUG env var.
        log_file: Log file path. Defaults to GODECL_LOG_FILE env var,
                  or no file at all if not set.

    Returns:
        Root logger for godecl
    """
    # Read from env if not provided
    if debug is None:
        debug = os.environ.get("GODECL_DEBUG", "").lower() in ("true", "1", "yes")
    if log_file is None:
        log_file = os.environ.get("GODECL_LOG_FILE") or None

    # Ensure log directory exists
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    level = logging.DEBUG if debug else logging.INFO

    # Create formatter with component tags
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger("godecl")
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    if log_file:
        # If logging to file, only show warnings on stderr
        stderr_handler.setLevel(logging.WARNING)
    else:
        stderr_handler.setLevel(level)
    logger.addHandler(stderr_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)
        logger.debug(f"Logging to file: {log_file}")

    return logger


def get_logger(component: str) -> logging.Logger:
    """
    Get a logger for a specific component.

    Args:
        component: Component name (e.g., "translate", "ast.parser", "cli")

    Returns:
        Logger instance for the component
    """
    return logging.getLogger(f"godecl.{component}")
