"""Console output formatting and user interaction."""

import logging
import os
import sys

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

console = Console()

DEFAULT_LOG_LEVEL = "WARNING"


def setup_logging(level: str | None = None) -> None:
    """Configure logging on stderr so git output stays untouched."""
    level_name = (level or os.getenv("AIGCW_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def select_commit_type(labels: list[str]) -> str:
    """Let the user pick one commit type and return its label."""
    console.print("\n[bold blue]🏷️ Select commit type[/bold blue]")
    for index, label in enumerate(labels, start=1):
        console.print(f"  [cyan]{index:>2}[/cyan]. {label}")

    choice = Prompt.ask(
        "Commit type",
        choices=[str(index) for index in range(1, len(labels) + 1)],
        show_choices=False,
        console=console,
    )
    return labels[int(choice) - 1]


def prompt_message() -> str:
    """Ask the user to type the commit message by hand."""
    return Prompt.ask("Commit message", default="", show_default=False, console=console).strip()


def print_commit_message(message: str) -> None:
    """Print the message about to be committed."""
    console.print(f"\n[dim]Commit message:[/dim] [green]{escape(message)}[/green]", highlight=False)


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"\n[bold red]❌ {escape(message)}[/bold red]")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"\n[bold blue]ℹ️ {message}[/bold blue]")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"\n[bold yellow]⚠️ {escape(message)}[/bold yellow]")
