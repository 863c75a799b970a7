"""Console helpers shared by the CLI commands.

Colour scheme
-------------
- cyan   : info and usage hints
- yellow : warnings
- red    : errors
- green  : completed
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)


def info(message: str) -> None:
    console.print(f"[cyan]{escape(message)}[/cyan]", soft_wrap=True)


def warn(message: str) -> None:
    console.print(f"[yellow]{escape(message)}[/yellow]", soft_wrap=True)


def error(message: str) -> None:
    console.print(f"[red]{escape(message)}[/red]", soft_wrap=True)


def completed(message: str) -> None:
    console.print(f"[green]{escape(message)}[/green]", soft_wrap=True)


def plain(message: str) -> None:
    """Print unstyled text, for output meant to be captured by scripts."""
    console.print(escape(message), soft_wrap=True)


def collect_tags(tags: list[str] | None) -> list[str]:
    """Return tags from the command line, or one per line from stdin.

    Stdin is only read when no tags were passed and it is not a terminal.
    """
    if tags:
        return list(tags)
    stdin = typer.get_text_stream("stdin")
    if stdin.isatty():
        return []
    return [line.strip() for line in stdin.read().splitlines() if line.strip()]
