"""Conventional Commits renderer for convcommit.

Format:
    <type>(<scope>)[!]: [<emoji> ]<subject>

    <body>

    BREAKING CHANGE: <description>
    Refs: <issues>
"""

import textwrap

from convcommit.message.constants import (
    COMMIT_TYPE_DETAILS,
    DEFAULT_BREAKING_TEXT,
    MIN_LINE_LENGTH,
)
from convcommit.message.models import CommitMessage, FormatConfig


def wrap_text(text: str, width: int) -> str:
    """Wrap text to the given width, keeping existing line breaks.

    Each input line is wrapped on its own, so line breaks and blank lines
    already in the text are kept. Words longer than the width are left intact.

    Args:
        text: Text to wrap.
        width: Maximum line width.

    Returns:
        Wrapped text.
    """
    lines = []
    for line in text.splitlines():
        if not line.strip():
            lines.append("")
            continue
        lines.append(
            textwrap.fill(
                line.rstrip(),
                width=width,
                break_long_words=False,
                break_on_hyphens=False,
            )
        )
    return "\n".join(lines)


def sanitize_subject(subject: str, max_length: int) -> str:
    """Sanitize and truncate the subject line.

    Args:
        subject: The raw subject string.
        max_length: Maximum allowed length.

    Returns:
        A sanitized single-line subject, truncated if necessary.
    """
    # Strip whitespace and take only the first line
    subject = subject.strip().split("\n")[0].strip()

    if max_length < 4:
        # No room for an ellipsis
        return subject[: max(max_length, 0)]

    if len(subject) > max_length:
        # Truncate and add ellipsis
        subject = subject[: max_length - 3].rstrip() + "..."

    return subject


def render_header(data: CommitMessage, config: FormatConfig) -> str:
    """Render the `type(scope): subject` header line.

    Args:
        data: The commit message fields.
        config: Format configuration.

    Returns:
        The header, at most config.max_line_length characters.
    """
    prefix = data.type.value
    if data.scope:
        prefix += f"({data.scope})"
    if data.breaking and config.breaking_bang:
        prefix += "!"
    prefix += ": "
    if config.emoji:
        prefix += COMMIT_TYPE_DETAILS[data.type]["emoji"] + " "

    width = max(config.max_line_length, MIN_LINE_LENGTH)
    budget = width - len(prefix)
    if budget < 4:
        # Prefix alone fills the line: crop the whole header
        return (prefix + data.subject)[:width].rstrip()
    return prefix + sanitize_subject(data.subject, budget)


def render_footers(data: CommitMessage) -> list[str]:
    """Collect the footer lines for a message.

    Args:
        data: The commit message fields.

    Returns:
        Footer lines in order: breaking change first, then issue refs.
    """
    footers = []
    if data.breaking:
        footers.append(f"BREAKING CHANGE: {data.breaking_description or DEFAULT_BREAKING_TEXT}")
    if data.issues:
        footers.append(f"Refs: {data.issues}")
    return footers


def render_message(data: CommitMessage, config: FormatConfig | None = None) -> str:
    """Render a CommitMessage into a Conventional Commits message string.

    Args:
        data: The commit message fields.
        config: Format configuration. Defaults to FormatConfig().

    Returns:
        Formatted commit message.

    Example output:
        feat(api): add login

        Accept username and password on /login.

        BREAKING CHANGE: sessions issued before this change are invalid
        Refs: #42
    """
    if config is None:
        config = FormatConfig()
    width = max(config.max_line_length, MIN_LINE_LENGTH)

    parts = [render_header(data, config)]

    if data.body:
        parts.append("")  # Blank line
        parts.append(wrap_text(data.body, width))

    footers = render_footers(data)
    if footers:
        parts.append("")  # Blank line before footers
        parts.extend(wrap_text(footer, width) for footer in footers)

    return "\n".join(parts)
