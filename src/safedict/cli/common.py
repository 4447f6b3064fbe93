"""Shared helpers for the SafeDict CLI."""

from typing import NoReturn, Optional

import typer
from rich.console import Console

console = Console()


def _handle_error(message: str, exception: Optional[Exception] = None) -> NoReturn:
    """Print an error message and exit with status 1."""
    console.print(f"[red]✗ {message}[/red]")
    if exception is not None:
        raise typer.Exit(1) from exception
    raise typer.Exit(1)


def _handle_warn(message: str) -> None:
    console.print(f"[yellow]⚠ {message}[/yellow]")
