"""CLI command modules."""

import typer

from typonaut.cli.commands.keymap import register_commands as register_keymap_commands
from typonaut.cli.commands.layout import register_commands as register_layout_commands


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_keymap_commands(app)
    register_layout_commands(app)
