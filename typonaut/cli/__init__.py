"""Command line interface for Typonaut."""

from typonaut.cli.app import app, main
from typonaut.cli.commands import register_all_commands


register_all_commands(app)

__all__ = ["app", "main"]
