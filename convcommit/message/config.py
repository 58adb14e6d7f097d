"""Configuration utilities for convcommit messages.

Contains functions for:
- Loading FormatConfig from a configuration dictionary
- Converting FormatConfig to a dictionary for saving
"""

from convcommit.exceptions import ConfigError
from convcommit.message.constants import (
    DEFAULT_MAX_LINE_LENGTH,
    DEFAULT_MENU_TYPES,
    MIN_LINE_LENGTH,
    CommitType,
)
from convcommit.message.models import FormatConfig


def _parse_types(names) -> list[CommitType]:
    """Parse type names, dropping unknown ones and duplicates."""
    if not isinstance(names, list):
        return DEFAULT_MENU_TYPES.copy()

    result = []
    for name in names:
        try:
            commit_type = CommitType(str(name).strip().lower())
        except ValueError:
            continue
        if commit_type not in result:
            result.append(commit_type)

    return result or DEFAULT_MENU_TYPES.copy()


def load_format_config_from_dict(config_dict: dict) -> FormatConfig:
    """Load FormatConfig from a configuration dictionary.

    Args:
        config_dict: Dictionary with a "commit" section.

    Returns:
        FormatConfig instance.
    """
    section = config_dict.get("commit") or {}
    if not isinstance(section, dict):
        raise ConfigError("Invalid config: 'commit' must be a mapping")

    try:
        max_line_length = int(section.get("max_line_length", DEFAULT_MAX_LINE_LENGTH))
    except (TypeError, ValueError):
        max_line_length = DEFAULT_MAX_LINE_LENGTH

    return FormatConfig(
        types=_parse_types(section.get("types", None)),
        emoji=bool(section.get("emoji", False)),
        max_line_length=max(max_line_length, MIN_LINE_LENGTH),
        breaking_bang=bool(section.get("breaking_bang", False)),
    )


def format_config_to_dict(config: FormatConfig) -> dict:
    """Convert FormatConfig to a dictionary for saving.

    Args:
        config: FormatConfig instance.

    Returns:
        Dictionary representation.
    """
    return {
        "commit": {
            "types": [t.value for t in config.types],
            "emoji": config.emoji,
            "max_line_length": config.max_line_length,
            "breaking_bang": config.breaking_bang,
        }
    }
