"""Main CLI command: prompt for a Conventional Commits message and run git commit."""

from typing import Optional

import typer

from convcommit.exceptions import ConfigError, InputError, ProcessError
from convcommit.git import message_supplied, run_commit
from convcommit.message import render_message
from convcommit.prompts import collect_commit_message
from convcommit.cli.utils import get_effective_format_config, version_callback


def main_command(
    ctx: typer.Context,
    emoji: Optional[bool] = typer.Option(
        None,
        "--emoji/--no-emoji",
        help="Put the commit type's emoji in front of the subject",
        show_default=False,
    ),
    max_line_length: Optional[int] = typer.Option(
        None,
        "--max-line-length",
        help="Crop the header and wrap body lines at this many characters",
    ),
    print_only: bool = typer.Option(
        False,
        "--print-only",
        help="Print the formatted message instead of committing",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Write a Conventional Commits message interactively and run git commit.

    Any argument not listed here is passed to git commit unchanged.
    """
    extra_args = list(ctx.args)
    if ctx.obj and ctx.obj.get("pathspecs"):
        extra_args += ctx.obj["pathspecs"]

    try:
        # Message already given on the command line: behave like plain git commit
        if not print_only and message_supplied(extra_args):
            run_commit(None, extra_args)
            return

        config = get_effective_format_config(emoji=emoji, max_line_length=max_line_length)

        typer.echo(
            f"\nAll commit message lines will be cropped at {config.max_line_length} characters.\n",
            err=True,
        )

        data = collect_commit_message(config)
        message = render_message(data, config)

        if print_only:
            typer.echo(message)
            return

        run_commit(message, extra_args)

    except InputError as e:
        typer.echo(f"\nError: {e}", err=True)
        raise typer.Exit(1)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)
    except ProcessError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(e.returncode)
