"""Keymap CLI commands (parse, validate, show, label)."""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from typonaut.adapters import create_source_adapter
from typonaut.cli.app import AppContext
from typonaut.cli.decorators import handle_errors
from typonaut.cli.helpers import ThemedConsole, get_themed_console
from typonaut.core.errors import LayoutError
from typonaut.core.structlog_logger import get_struct_logger_with_context
from typonaut.keymap import (
    KeymapParseResult,
    ParsedKeymap,
    create_keymap_service,
    interpret_binding,
)
from typonaut.layout import create_layer_display_service, parse_keyboard_layout


keymap_app = typer.Typer(
    name="keymap",
    help="Parse ZMK keymaps into per-layer key labels",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output formats for the parse command."""

    PRETTY = "pretty"
    JSON = "json"


SourceArgument = Annotated[
    str, typer.Argument(help="Keymap file path or http(s) URL", metavar="SOURCE")
]


def _load_keymap(
    ctx: typer.Context, source: str
) -> tuple[KeymapParseResult, ThemedConsole]:
    app_context: AppContext = ctx.obj
    console = get_themed_console(use_emoji=app_context.use_emoji)
    service = create_keymap_service(user_config=app_context.user_config)
    result = service.load(source)

    logger = get_struct_logger_with_context(__name__, source=source)
    logger.debug(
        "keymap_loaded",
        success=result.success,
        layers=len(result.keymap.layers) if result.keymap else 0,
    )
    return result, console


def _require_keymap(
    result: KeymapParseResult, console: ThemedConsole
) -> ParsedKeymap:
    """Return the parsed keymap, or print the errors and exit with status 1."""
    if result.success and result.keymap is not None:
        return result.keymap
    console.print_error(f"Invalid keymap: {escape(result.source)}")
    for error in result.errors:
        console.print_list_item(escape(error))
    raise typer.Exit(1)


@keymap_app.command(name="parse")
@handle_errors
def parse_keymap(
    ctx: typer.Context,
    source: SourceArgument,
    output_format: Annotated[
        OutputFormat,
        typer.Option("-f", "--format", help="Output format"),
    ] = OutputFormat.PRETTY,
    output_file: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Write JSON output to this file"),
    ] = None,
) -> None:
    """Parse a keymap and print the labels of every layer."""
    result, console = _load_keymap(ctx, source)
    keymap = _require_keymap(result, console)

    if output_file or output_format == OutputFormat.JSON:
        payload = json.dumps(keymap.to_dict(), indent=2, ensure_ascii=False)
        if output_file:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(payload + "\n", encoding="utf-8")
            console.print_success(f"Keymap written to {escape(str(output_file))}")
        else:
            typer.echo(payload)
        return

    for index, layer in enumerate(keymap.layers):
        console.console.print(
            f"[header]{index}: {escape(layer.name)}[/header] "
            f"[muted]({len(layer.bindings)} keys)[/muted]"
        )
        console.console.print("  " + " ".join(layer.bindings), markup=False)


@keymap_app.command(name="validate")
@handle_errors
def validate_keymap(ctx: typer.Context, source: SourceArgument) -> None:
    """Check that a keymap has named layers with bindings."""
    result, console = _load_keymap(ctx, source)
    keymap = _require_keymap(result, console)

    for warning in result.warnings:
        console.print_warning(escape(warning))
    console.print_success(
        f"Keymap is valid: {len(keymap.layers)} layers "
        f"({', '.join(escape(name) for name in keymap.layer_names)})"
    )


@keymap_app.command(name="show")
@handle_errors
def show_keymap(
    ctx: typer.Context,
    source: SourceArgument,
    layer: Annotated[
        str, typer.Option("-l", "--layer", help="Layer index or name")
    ] = "0",
    geometry: Annotated[
        str | None,
        typer.Option(
            "-g", "--geometry", help="Keyboard geometry JSON file or URL"
        ),
    ] = None,
    layout_name: Annotated[
        str | None,
        typer.Option("--layout", help="Layout variant inside the geometry file"),
    ] = None,
    columns: Annotated[
        int | None,
        typer.Option(
            "--columns", min=1, help="Keys per row when no geometry is given"
        ),
    ] = None,
) -> None:
    """Show the labels of one layer as a grid."""
    app_context: AppContext = ctx.obj
    result, console = _load_keymap(ctx, source)
    keymap = _require_keymap(result, console)

    positions = None
    if geometry:
        adapter = create_source_adapter(
            timeout=app_context.user_config.data.request_timeout
        )
        keyboard_layout = parse_keyboard_layout(adapter.read_json(geometry))
        if keyboard_layout is None:
            raise LayoutError(f"Invalid keyboard geometry: {geometry}")
        if layout_name and layout_name not in keyboard_layout.layouts:
            raise LayoutError(
                f"Layout {layout_name!r} not found. Available layouts: "
                f"{', '.join(keyboard_layout.layouts)}"
            )
        positions = keyboard_layout.get_positions(layout_name)

    display_service = create_layer_display_service()
    table = display_service.render_layer(
        keymap,
        layer,
        positions=positions,
        columns=columns or app_context.user_config.data.display_columns,
    )
    console.console.print(table)


@keymap_app.command(name="label")
@handle_errors
def label_bindings(
    bindings: Annotated[
        list[str],
        typer.Argument(help="Binding expressions such as '&kp A' or '&mo 1'"),
    ],
) -> None:
    """Show the key label produced by binding expressions."""
    for binding in bindings:
        label = interpret_binding(binding)
        typer.echo(f"{binding} → {label if label else '(none)'}")


def register_commands(app: typer.Typer) -> None:
    """Register keymap commands with the main app.

    Args:
        app: The main Typer app
    """
    app.add_typer(keymap_app, name="keymap")
