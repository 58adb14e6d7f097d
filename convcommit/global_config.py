"""Global configuration management for convcommit.

Handles user-level configuration stored in ~/.convcommit/config.yaml.
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from convcommit.exceptions import ConfigError


_CONFIG_DIR = Path.home() / ".convcommit"


def get_global_config_dir() -> Path:
    """Get the global convcommit configuration directory.

    Returns:
        Path to ~/.convcommit/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.convcommit/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.convcommit/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise ConfigError(f"Invalid config in {config_file}: expected a mapping")
    return config


def get_commit_config() -> dict:
    """Get the commit section from global config.

    Returns:
        Dictionary with commit configuration.
    """
    config = load_global_config()
    section = config.get("commit") or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Invalid config in {get_config_file_path()}: 'commit' must be a mapping")
    return section
