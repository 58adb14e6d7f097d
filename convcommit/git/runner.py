"""Git command runner and repository utilities.

Contains:
- run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
"""

import subprocess
from pathlib import Path

from convcommit.exceptions import ProcessError


def run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command.

    Raises:
        ProcessError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise ProcessError(
            f"Git command failed: git {' '.join(args)}\n{(e.stderr or '').strip()}",
            returncode=e.returncode,
        )
    except FileNotFoundError:
        raise ProcessError("Git is not installed or not in PATH.", returncode=127)


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        ProcessError: If not in a git repository.
    """
    try:
        root = run_git_command(["rev-parse", "--show-toplevel"])
        return Path(root)
    except ProcessError as e:
        raise ProcessError(
            "Not in a git repository. Please run this command from within a git repo.",
            returncode=e.returncode,
        )
