#!/usr/bin/env python3
"""Entry point for running aigcw as a module."""

import sys
from typing import NoReturn

import click

from .cli import console
from .cli.main import CommitAbortedError, GitWrapper
from .config.settings import ConfigError
from .core.git import GitError, NoStagedChangesError, VCSProcessError
from .services.ai_service import LLMError


class GitPassthroughCommand(click.Command):
    """Command that hands every argument to the callback untouched.

    Regular option parsing would swallow ``--`` and ``--help``.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.args = list(args)
        return ctx.args


def format_cause_chain(error: BaseException) -> str:
    """Render ``error`` followed by every ``__cause__`` below it."""
    parts = [str(error)]
    cause = error.__cause__
    while cause is not None:
        parts.append(f"Caused by: {cause}")
        cause = cause.__cause__
    return "\n".join(parts)


def handle_error(error: BaseException) -> NoReturn:
    """Handle errors in a consistent way."""
    if isinstance(error, NoStagedChangesError):
        console.print_info("No changes to commit.")
        sys.exit(0)
    if isinstance(error, (KeyboardInterrupt, EOFError)):
        console.print_error("\nOperation cancelled by user.")
        sys.exit(1)
    if isinstance(error, VCSProcessError):
        console.print_error(format_cause_chain(error))
        sys.exit(error.exit_code)
    if isinstance(error, (ConfigError, GitError, LLMError, CommitAbortedError)):
        console.print_error(format_cause_chain(error))
        sys.exit(1)
    console.print_error(f"An error occurred: {format_cause_chain(error)}")
    sys.exit(1)


@click.command(cls=GitPassthroughCommand)
@click.pass_context
def main(ctx: click.Context) -> None:
    """AI-powered git commit wrapper. All arguments are passed to git."""
    console.setup_logging()
    try:
        returncode = GitWrapper().run(ctx.args)
    except (KeyboardInterrupt, Exception) as e:
        handle_error(e)
    sys.exit(returncode)


if __name__ == "__main__":
    main()
