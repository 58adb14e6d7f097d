"""Shared utility functions for CLI commands."""

from typing import Optional

import typer

from convcommit import global_config
from convcommit.exceptions import ProcessError
from convcommit.git import get_repo_root
from convcommit.message import FormatConfig, load_format_config_from_dict
from convcommit.user_config import get_repo_commit_config


def get_effective_format_config(
    emoji: Optional[bool] = None,
    max_line_length: Optional[int] = None,
) -> FormatConfig:
    """Get the effective format configuration.

    Precedence: CLI options > repo config > global config > defaults.

    Args:
        emoji: Override for the emoji setting.
        max_line_length: Override for the line length limit.

    Returns:
        The merged FormatConfig.

    Raises:
        ConfigError: If a config file exists but cannot be parsed.
    """
    config_dict: dict = {"commit": {}}

    # Merge global config
    global_commit = global_config.get_commit_config()
    if global_commit:
        config_dict["commit"].update(global_commit)

    # Merge repo config (overrides global)
    try:
        repo_root = get_repo_root()
        repo_commit = get_repo_commit_config(repo_root)
        if repo_commit:
            config_dict["commit"].update(repo_commit)
    except ProcessError:
        pass  # Not in a repo, use global only

    # CLI overrides
    if emoji is not None:
        config_dict["commit"]["emoji"] = emoji
    if max_line_length is not None:
        config_dict["commit"]["max_line_length"] = max_line_length

    return load_format_config_from_dict(config_dict)


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        from convcommit import __version__

        typer.echo(f"convcommit {__version__}")
        raise typer.Exit(0)
