"""Commit message model and rendering for convcommit.

This package provides:
- constants: CommitType enum, COMMIT_TYPE_DETAILS, DEFAULT_MENU_TYPES
- models: CommitMessage, FormatConfig
- renderer: render_message, render_header, render_footers, wrap_text, sanitize_subject
- config: load_format_config_from_dict, format_config_to_dict
"""

# Constants
from convcommit.message.constants import (
    COMMIT_TYPE_DETAILS,
    DEFAULT_BREAKING_TEXT,
    DEFAULT_MAX_LINE_LENGTH,
    DEFAULT_MENU_TYPES,
    CommitType,
)

# Models
from convcommit.message.models import (
    CommitMessage,
    FormatConfig,
)

# Renderer
from convcommit.message.renderer import (
    render_footers,
    render_header,
    render_message,
    sanitize_subject,
    wrap_text,
)

# Configuration utilities
from convcommit.message.config import (
    format_config_to_dict,
    load_format_config_from_dict,
)


__all__ = [
    # Constants
    "CommitType",
    "COMMIT_TYPE_DETAILS",
    "DEFAULT_MENU_TYPES",
    "DEFAULT_MAX_LINE_LENGTH",
    "DEFAULT_BREAKING_TEXT",
    # Models
    "CommitMessage",
    "FormatConfig",
    # Renderer
    "render_message",
    "render_header",
    "render_footers",
    "wrap_text",
    "sanitize_subject",
    # Configuration
    "load_format_config_from_dict",
    "format_config_to_dict",
]
