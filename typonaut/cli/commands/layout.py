"""Keyboard geometry CLI commands."""

from typing import Annotated

import typer
from rich.markup import escape

from typonaut.adapters import create_source_adapter
from typonaut.cli.app import AppContext
from typonaut.cli.decorators import handle_errors
from typonaut.cli.helpers import get_themed_console
from typonaut.layout import validate_keyboard_layout


layout_app = typer.Typer(
    name="layout",
    help="Keyboard geometry (physical key position) commands",
    no_args_is_help=True,
)


@layout_app.command(name="validate")
@handle_errors
def validate_layout(
    ctx: typer.Context,
    source: Annotated[
        str,
        typer.Argument(help="Geometry JSON file path or http(s) URL", metavar="SOURCE"),
    ],
) -> None:
    """Check the structure of a keyboard geometry JSON file."""
    app_context: AppContext = ctx.obj
    console = get_themed_console(use_emoji=app_context.use_emoji)
    adapter = create_source_adapter(timeout=app_context.user_config.data.request_timeout)

    data = adapter.read_json(source)
    validation = validate_keyboard_layout(data)
    if not validation.valid:
        console.print_error(f"Invalid keyboard geometry: {escape(source)}")
        for error in validation.errors:
            console.print_list_item(escape(error))
        raise typer.Exit(1)

    layouts = data["layouts"]
    console.print_success(
        f"Keyboard geometry is valid: {escape(data['name'])} "
        f"({len(layouts)} layouts)"
    )
    for name, definition in layouts.items():
        console.print_list_item(f"{escape(name)}: {len(definition['layout'])} keys")


def register_commands(app: typer.Typer) -> None:
    """Register layout commands with the main app.

    Args:
        app: The main Typer app
    """
    app.add_typer(layout_app, name="layout")
