"""CLI entry point for convcommit.

The application has a single command. Options it does not know are
collected in the context and forwarded to git commit.
"""

import sys
from typing import Optional

import typer

from convcommit.cli.main import main_command

app = typer.Typer(
    name="convcommit",
    help="convcommit: interactive Conventional Commits for git commit",
    add_completion=False,
)

app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
    },
)(main_command)


def split_pathspecs(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split command-line arguments at the first bare "--".

    Click drops the separator while parsing, so everything from "--" on is
    set aside and forwarded to git commit as-is.

    Args:
        argv: Arguments after the program name.

    Returns:
        (arguments to parse, pathspec arguments including the "--").
    """
    if "--" in argv:
        index = argv.index("--")
        return argv[:index], argv[index:]
    return argv, []


def main(argv: Optional[list[str]] = None) -> None:
    """Console script entry point."""
    if argv is None:
        argv = sys.argv[1:]
    args, pathspecs = split_pathspecs(argv)
    app(args=args, obj={"pathspecs": pathspecs})


__all__ = [
    "app",
    "main",
    "main_command",
    "split_pathspecs",
]
