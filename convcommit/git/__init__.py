"""Git process handling for convcommit.

This package provides:
- runner: run_git_command, get_repo_root
- commit: run_commit, build_commit_args, message_supplied
"""

# Runner utilities
from convcommit.git.runner import (
    get_repo_root,
    run_git_command,
)

# Commit invocation
from convcommit.git.commit import (
    build_commit_args,
    message_supplied,
    run_commit,
)


__all__ = [
    # Runner
    "run_git_command",
    "get_repo_root",
    # Commit
    "run_commit",
    "build_commit_args",
    "message_supplied",
]
