"""Popo CLI main module."""

import typer

from ..utils.logging_config import setup_toolkit_logging
from .commands import call, resolve

app = typer.Typer(name="popo", help="Inspect and exercise popo accessor dispatch", add_completion=False)

# Setup centralized logging for CLI
setup_toolkit_logging(mode="cli")

app.command("resolve")(resolve)
app.command("call")(call)


def main():
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    main()
