"""Exception classes for convcommit.

Contains:
- ConvCommitError: Base exception for all convcommit errors
- InputError: Raised when user input is empty or aborted
- ProcessError: Raised when the git child process fails
- ConfigError: Raised when a configuration file cannot be read
"""


class ConvCommitError(Exception):
    """Base exception for convcommit errors."""

    pass


class InputError(ConvCommitError):
    """Raised when required input is empty or the user aborts a prompt."""

    pass


class ProcessError(ConvCommitError):
    """Raised when the git child process cannot run or exits non-zero.

    Attributes:
        returncode: Exit code to surface to the caller.
    """

    def __init__(self, message: str, returncode: int = 1):
        super().__init__(message)
        self.returncode = returncode


class ConfigError(ConvCommitError):
    """Raised when there's an error reading configuration."""

    pass
