"""Repository configuration management for convcommit.

Handles reading the .convcommit/config.yaml file in each repository.
"""

from pathlib import Path

import yaml

from convcommit.exceptions import ConfigError


def get_config_dir(repo_root: Path) -> Path:
    """Get the repository config directory.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .convcommit/
    """
    return repo_root / ".convcommit"


def get_config_file(repo_root: Path) -> Path:
    """Return path to the repository config.yaml file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .convcommit/config.yaml.
    """
    return get_config_dir(repo_root) / "config.yaml"


def load_repo_config(repo_root: Path) -> dict:
    """Load the repository configuration.

    Unlike the global config, a missing repo config is never created.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Configuration dictionary, empty if the file doesn't exist.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed.
    """
    config_file = get_config_file(repo_root)

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


def get_repo_commit_config(repo_root: Path) -> dict:
    """Get the commit section from the repository config.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Dictionary with commit configuration.
    """
    config = load_repo_config(repo_root)
    section = config.get("commit") or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Invalid config in {get_config_file(repo_root)}: 'commit' must be a mapping")
    return section
