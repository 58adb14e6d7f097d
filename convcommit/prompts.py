"""Interactive prompt collection for commit messages."""

from typing import Optional

import typer

from convcommit.exceptions import InputError
from convcommit.message import (
    COMMIT_TYPE_DETAILS,
    CommitMessage,
    CommitType,
    FormatConfig,
)

TYPE_PROMPT = "Select the type of change that you're committing"
SCOPE_PROMPT = "What is the scope of this change (e.g. component or file name)? (press enter to skip)"
SUBJECT_PROMPT = "Write a short, imperative tense description of the change"
BODY_PROMPT = "Provide a longer description of the change (\\n for a new line, press enter to skip)"
BREAKING_CONFIRM = "Are there any breaking changes?"
BREAKING_PROMPT = "Describe the breaking changes (press enter to skip)"
ISSUES_PROMPT = "Related issues (press enter to skip)"


def _ask(text: str, **kwargs) -> str:
    """Prompt once, turning an abort into InputError."""
    try:
        return typer.prompt(text, **kwargs)
    except typer.Abort:
        raise InputError("Aborted by user.")


def _ask_optional(text: str) -> str:
    return _ask(text, default="", show_default=False).strip()


def _confirm(text: str, default: bool = False) -> bool:
    try:
        return typer.confirm(text, default=default)
    except typer.Abort:
        raise InputError("Aborted by user.")


def format_type_menu(types: list[CommitType]) -> list[str]:
    """Build the numbered menu lines for the type prompt.

    Args:
        types: Commit types to offer, in menu order.

    Returns:
        One line per type, e.g. "  1) feat: A new feature".
    """
    width = max(len(t.value) for t in types)
    return [
        f"  {i}) {t.value.ljust(width)}: {COMMIT_TYPE_DETAILS[t]['description']}"
        for i, t in enumerate(types, start=1)
    ]


def parse_type_choice(answer: str, types: list[CommitType]) -> Optional[CommitType]:
    """Resolve a menu answer given as a number or a type name.

    Args:
        answer: The user's answer.
        types: The offered types, in menu order.

    Returns:
        The chosen CommitType, or None if the answer matches nothing offered.
    """
    answer = answer.strip().lower()
    if answer.isdigit():
        index = int(answer)
        if 1 <= index <= len(types):
            return types[index - 1]
        return None
    for commit_type in types:
        if commit_type.value == answer:
            return commit_type
    return None


def prompt_type(types: list[CommitType]) -> CommitType:
    """Ask for the commit type until a valid choice is made."""
    typer.echo(f"{TYPE_PROMPT}:")
    for line in format_type_menu(types):
        typer.echo(line)

    while True:
        answer = _ask("Type", default="1")
        choice = parse_type_choice(answer, types)
        if choice is not None:
            return choice
        typer.echo(f"Invalid choice: {answer}. Enter a number from 1 to {len(types)} or a type name.", err=True)


def expand_line_breaks(text: str) -> str:
    """Turn literal "\\n" sequences typed at a prompt into line breaks.

    A prompt answer is a single line, so this is how a multi-paragraph
    body ("first\\n\\nsecond") is entered.
    """
    return "\n".join(line.strip() for line in text.split("\\n")).strip()


def prompt_subject(retries: int = 1) -> str:
    """Ask for the subject, re-asking on empty input.

    Args:
        retries: How many times to re-ask after an empty answer.

    Returns:
        The non-empty subject.

    Raises:
        InputError: If the subject is still empty after the retries.
    """
    for attempt in range(retries + 1):
        subject = _ask(SUBJECT_PROMPT, default="", show_default=False).strip()
        if subject:
            return subject
        if attempt < retries:
            typer.echo("The subject cannot be empty.", err=True)
    raise InputError("The subject cannot be empty.")


def collect_commit_message(
    config: Optional[FormatConfig] = None,
    subject_retries: int = 1,
) -> CommitMessage:
    """Collect commit message fields from the user.

    Asks, in order: type, scope, subject, body, breaking change, related issues.

    Args:
        config: Format configuration (supplies the type menu).
        subject_retries: How many times to re-ask an empty subject.

    Returns:
        The collected CommitMessage.

    Raises:
        InputError: If the user aborts or gives an empty subject.
    """
    if config is None:
        config = FormatConfig()

    commit_type = prompt_type(config.types)

    scope = _ask_optional(SCOPE_PROMPT)
    while "(" in scope or ")" in scope:
        typer.echo("The scope cannot contain parentheses.", err=True)
        scope = _ask_optional(SCOPE_PROMPT)

    subject = prompt_subject(subject_retries)
    body = expand_line_breaks(_ask_optional(BODY_PROMPT))

    breaking = _confirm(BREAKING_CONFIRM, default=False)
    breaking_description = _ask_optional(BREAKING_PROMPT) if breaking else ""

    issues = _ask_optional(ISSUES_PROMPT)

    return CommitMessage(
        type=commit_type,
        scope=scope,
        subject=subject,
        body=body,
        breaking=breaking,
        breaking_description=breaking_description,
        issues=issues,
    )
