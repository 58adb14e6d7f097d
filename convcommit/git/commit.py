"""Commit invocation.

Contains:
- message_supplied: Detect whether forwarded git arguments already carry a message
- build_commit_args: Assemble the git commit argument list
- run_commit: Run git commit and surface its exit code
"""

import subprocess
from typing import Optional, Sequence

from convcommit.exceptions import ProcessError

# Options that take the message (or its source) as their value
_MESSAGE_SHORT_OPTIONS = "mFCc"
_MESSAGE_LONG_OPTIONS = ("--message", "--file", "--reuse-message", "--reedit-message")

# Other short options whose value may be attached to the rest of a cluster
_VALUE_SHORT_OPTIONS = "tuS"

# Exit status reported when git is interrupted without a status of its own
INTERRUPTED_EXIT_CODE = 130
NOT_FOUND_EXIT_CODE = 127


def _short_cluster_has_message(arg: str) -> bool:
    """Check a short option cluster such as -am or -vFmsg.txt for -m/-F/-C/-c."""
    if not arg.startswith("-") or arg.startswith("--") or len(arg) < 2:
        return False
    for char in arg[1:]:
        if char in _MESSAGE_SHORT_OPTIONS:
            return True
        if char in _VALUE_SHORT_OPTIONS:
            # The rest of the cluster is this option's value
            return False
    return False


def message_supplied(args: Sequence[str]) -> bool:
    """Check whether the forwarded arguments already provide a message.

    Recognizes -m/-F/-C/-c (also attached or clustered, as in -mtext or
    -am), --message, --file, --reuse-message and --reedit-message (also in
    --opt=value form), and --amend with --no-edit.
    Arguments after a bare "--" are pathspecs and are not inspected.

    Args:
        args: Arguments that will be forwarded to git commit.

    Returns:
        True if git will not need a message from us.
    """
    amend = False
    no_edit = False
    for arg in args:
        if arg == "--":
            break
        if arg in _MESSAGE_LONG_OPTIONS:
            return True
        if any(arg.startswith(opt + "=") for opt in _MESSAGE_LONG_OPTIONS):
            return True
        if _short_cluster_has_message(arg):
            return True
        if arg == "--amend":
            amend = True
        elif arg == "--no-edit":
            no_edit = True
    return amend and no_edit


def _wait_through_interrupts(proc: subprocess.Popen) -> int:
    """Wait for the child to exit, ignoring further interrupts."""
    while True:
        try:
            return proc.wait()
        except KeyboardInterrupt:
            continue


def build_commit_args(message: Optional[str], extra_args: Sequence[str]) -> list[str]:
    """Assemble the full git command line.

    Args:
        message: Formatted commit message, or None to forward args unchanged.
        extra_args: Arguments forwarded verbatim from the caller.

    Returns:
        Command list starting with "git", "commit".
    """
    cmd = ["git", "commit"]
    if message is not None:
        cmd += ["-m", message]
    cmd += list(extra_args)
    return cmd


def run_commit(message: Optional[str], extra_args: Sequence[str] = ()) -> int:
    """Run git commit with the message and forwarded arguments.

    The child inherits the terminal, so git's own output and any editor it
    opens reach the user directly. An interrupt is delivered to the child
    through the terminal's process group; we only wait for it to finish.

    Args:
        message: Formatted commit message, or None when the caller's
            arguments already supply one.
        extra_args: Arguments forwarded verbatim from the caller.

    Returns:
        The exit code of git commit (always 0; non-zero raises).

    Raises:
        ProcessError: If git cannot be started, is interrupted, or exits
            with a non-zero code. The error carries git's exit code.
    """
    cmd = build_commit_args(message, extra_args)

    try:
        proc = subprocess.Popen(cmd)
    except FileNotFoundError:
        raise ProcessError("Git is not installed or not in PATH.", returncode=NOT_FOUND_EXIT_CODE)
    except OSError as e:
        raise ProcessError(f"Failed to run git commit: {e}")

    try:
        returncode = proc.wait()
    except KeyboardInterrupt:
        returncode = _wait_through_interrupts(proc)
        raise ProcessError(
            "git commit was interrupted.",
            returncode=returncode if returncode > 0 else INTERRUPTED_EXIT_CODE,
        )

    if returncode != 0:
        raise ProcessError(f"git commit exited with code {returncode}.", returncode=returncode)

    return returncode
