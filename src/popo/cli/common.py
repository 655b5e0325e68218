"""Shared helpers for popo CLI commands."""

from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

console = Console()


def _handle_error(message: str, exception: Optional[Exception] = None) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]❌ {escape(message)}[/red]")
    if exception:
        raise typer.Exit(1) from exception
    raise typer.Exit(1)


def _print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")
