"""Data models for the convcommit message module.

Contains:
- FormatConfig: Configuration dataclass for message rendering
- CommitMessage: Pydantic model for the collected commit fields
"""

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from convcommit.message.constants import (
    DEFAULT_MAX_LINE_LENGTH,
    DEFAULT_MENU_TYPES,
    CommitType,
)


@dataclass
class FormatConfig:
    """Configuration for collecting and rendering commit messages."""

    types: list[CommitType] = field(
        default_factory=lambda: DEFAULT_MENU_TYPES.copy())
    emoji: bool = False
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    breaking_bang: bool = False


def _blank_to_none(v):
    if v is None:
        return None
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


class CommitMessage(BaseModel):
    """Pydantic model for a single commit message.

    Attributes:
        type: Conventional commit type (feat, fix, docs, etc.).
        scope: Scope of the change (component or file name).
        subject: Short imperative description of the change.
        body: Longer description of the change.
        breaking: Whether this is a breaking change.
        breaking_description: Description for the BREAKING CHANGE footer.
        issues: Related issue references.
    """

    type: CommitType
    scope: Optional[str] = None
    subject: str
    body: Optional[str] = None
    breaking: bool = False
    breaking_description: Optional[str] = None
    issues: Optional[str] = None

    @field_validator("type", mode="before")
    @classmethod
    def coerce_type(cls, v):
        """Accept type names in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("subject")
    @classmethod
    def subject_must_not_be_empty(cls, v: str) -> str:
        """Ensure subject is not empty and keep only its first line."""
        if not v or not v.strip():
            raise ValueError("Subject cannot be empty")
        return v.strip().split("\n")[0].strip()

    @field_validator("scope", mode="before")
    @classmethod
    def normalize_scope(cls, v):
        """Turn a blank scope into None and reject characters that break the header."""
        v = _blank_to_none(v)
        if v is not None and any(c in v for c in "()\n"):
            raise ValueError("Scope cannot contain parentheses or newlines")
        return v

    @field_validator("body", "breaking_description", "issues", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Turn blank optional text into None."""
        return _blank_to_none(v)

    @model_validator(mode="after")
    def description_implies_breaking(self) -> "CommitMessage":
        """A breaking change description marks the message as breaking."""
        if self.breaking_description:
            self.breaking = True
        return self
