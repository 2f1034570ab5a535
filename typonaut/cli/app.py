"""Main CLI application for Typonaut."""

import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Annotated

import typer

from typonaut.cli.decorators.error_handling import print_stack_trace_if_verbose
from typonaut.config import UserConfig, create_user_config
from typonaut.core.errors import ConfigError
from typonaut.core.logging import setup_logging


__all__ = ["AppContext", "app", "main", "__version__"]


try:
    __version__ = version("typonaut")
except PackageNotFoundError:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        user_config: UserConfig,
        verbose: int = 0,
        log_file: str | None = None,
        no_emoji: bool = False,
    ):
        """Initialize AppContext.

        Args:
            user_config: Loaded user configuration
            verbose: Verbosity level
            log_file: Path to log file
            no_emoji: Whether to disable emoji icons
        """
        self.user_config = user_config
        self.verbose = verbose
        self.log_file = log_file
        self.no_emoji = no_emoji

    @property
    def use_emoji(self) -> bool:
        """CLI --no-emoji flag takes precedence over the config file setting."""
        if self.no_emoji:
            return False
        return bool(self.user_config.data.emoji)


app = typer.Typer(
    name="typonaut",
    help=f"""Typonaut keymap tools v{__version__}

Reads ZMK keymaps and shows the label of every key on every layer.

Common workflows:
  • Parse a keymap:     typonaut keymap parse base.keymap
  • Check a keymap:     typonaut keymap validate base.keymap
  • Show a layer:       typonaut keymap show base.keymap --layer 1
  • Check a geometry:   typonaut layout validate corne.json""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    no_emoji: Annotated[
        bool,
        typer.Option("--no-emoji", help="Disable emoji icons in output"),
    ] = False,
    show_version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """Typonaut keymap tools."""
    if show_version:
        print(f"Typonaut v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    try:
        user_config = create_user_config(cli_config_path=config_file)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        raise typer.Exit(1) from e

    ctx.obj = AppContext(
        user_config=user_config,
        verbose=verbose,
        log_file=log_file,
        no_emoji=no_emoji,
    )

    if debug or verbose >= 2:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    else:
        log_level = user_config.get_log_level_int()

    setup_logging(level=log_level, log_file=log_file)


def main() -> int:
    """Main CLI entry point."""
    try:
        app()
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        print_stack_trace_if_verbose()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
