"""Constants for the convcommit message module.

Contains:
- CommitType: The closed set of commit types
- COMMIT_TYPE_DETAILS: Description and emoji for each type
- DEFAULT_MENU_TYPES: Types offered by the type prompt, in menu order
- DEFAULT_MAX_LINE_LENGTH, MIN_LINE_LENGTH: Line limits for rendering
- DEFAULT_BREAKING_TEXT: Footer text for a breaking change without description
"""

from enum import Enum


class CommitType(Enum):
    """Conventional commit types."""

    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    PERF = "perf"
    TEST = "test"
    CHORE = "chore"
    CI = "ci"
    RELEASE = "release"


COMMIT_TYPE_DETAILS = {
    CommitType.FEAT: {
        "description": "A new feature",
        "emoji": "🎸",
    },
    CommitType.FIX: {
        "description": "A bug fix",
        "emoji": "🐛",
    },
    CommitType.DOCS: {
        "description": "Documentation only changes",
        "emoji": "✏️",
    },
    CommitType.STYLE: {
        "description": "Markup, white-space, formatting, missing semi-colons...",
        "emoji": "💄",
    },
    CommitType.REFACTOR: {
        "description": "A code change that neither fixes a bug or adds a feature",
        "emoji": "💡",
    },
    CommitType.PERF: {
        "description": "A code change that improves performance",
        "emoji": "⚡️",
    },
    CommitType.TEST: {
        "description": "Adding missing tests",
        "emoji": "💍",
    },
    CommitType.CHORE: {
        "description": "Build process or auxiliary tool changes",
        "emoji": "🤖",
    },
    CommitType.CI: {
        "description": "CI related changes",
        "emoji": "🎡",
    },
    CommitType.RELEASE: {
        "description": "Create a release commit",
        "emoji": "🏹",
    },
}

# Types shown by the type prompt (in menu order)
DEFAULT_MENU_TYPES = [
    CommitType.FEAT,
    CommitType.FIX,
    CommitType.DOCS,
    CommitType.STYLE,
    CommitType.REFACTOR,
    CommitType.PERF,
    CommitType.TEST,
    CommitType.CHORE,
]

DEFAULT_MAX_LINE_LENGTH = 100
MIN_LINE_LENGTH = 20

DEFAULT_BREAKING_TEXT = "This commit introduces breaking changes"
