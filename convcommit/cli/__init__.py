"""CLI entry point for convcommit.

This module provides the main CLI application that combines the default
commit workflow with the configuration subcommands.
"""

import typer

from convcommit.cli.config import config_app
from convcommit.cli.main import main_command

# Main application
app = typer.Typer(
    name="convcommit",
    help="convcommit: AI-powered Conventional Commit message generator",
    add_completion=False,
)

app.add_typer(config_app, name="config")

# Default behavior when no subcommand is given
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]


if __name__ == "__main__":
    app()
