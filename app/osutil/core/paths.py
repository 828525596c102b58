"""XDG-compliant path management for osutil.

osutil only keeps a configuration file; it has no state or cache.

XDG default:
- Config: ~/.config/osutil/osutil.conf
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "osutil"

CONFIG_FILE_NAME = "osutil.conf"


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/osutil/ (or XDG_CONFIG_HOME/osutil/).
    """
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/osutil/osutil.conf.
    """
    return get_config_dir() / CONFIG_FILE_NAME

