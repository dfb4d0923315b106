"""
godecl Paths

Location of the per-user configuration directory.
"""

import os
from pathlib import Path

DEFAULT_DATA_PATH = Path.home() / ".godecl"


def get_data_path() -> Path:
    """Get the godecl data directory path.

    Honours GODECL_DATA_PATH, falling back to ~/.godecl.

    Returns:
        Path to the data directory
    """
    data_path = os.environ.get("GODECL_DATA_PATH")
    if data_path:
        return Path(data_path).expanduser()
    return DEFAULT_DATA_PATH
