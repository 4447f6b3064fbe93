"""SafeDict CLI main module."""

import typer

from ..utils.logging_config import setup_safedict_logging
from .dict.commands import get, has, keys, show

app = typer.Typer(name="safedict", help="SafeDict CLI", add_completion=False)

# Setup centralized logging for CLI
setup_safedict_logging(mode="cli")

app.command("show")(show)
app.command("get")(get)
app.command("has")(has)
app.command("keys")(keys)


def main():
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
