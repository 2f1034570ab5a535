"""Theme for consistent Rich styling across CLI commands."""

from rich.console import Console
from rich.theme import Theme


class Colors:
    """Standardized color palette for CLI output."""

    SUCCESS = "bold green"
    ERROR = "bold red"
    WARNING = "bold yellow"
    INFO = "bold blue"

    PRIMARY = "cyan"
    MUTED = "dim"
    HEADER = "bold cyan"


class Icons:
    """Standardized icons for different message types."""

    SUCCESS = "✅"
    ERROR = "❌"
    WARNING = "⚠️"
    BULLET = "•"

    _TEXT_FALLBACKS = {
        "SUCCESS": "✓",
        "ERROR": "✗",
        "WARNING": "!",
        "BULLET": "•",
    }

    @classmethod
    def get_icon(cls, icon_name: str, use_emoji: bool = True) -> str:
        """Get an icon, falling back to plain text when emoji are disabled."""
        if use_emoji:
            return str(getattr(cls, icon_name, ""))
        return cls._TEXT_FALLBACKS.get(icon_name, f"[{icon_name}]")


TYPONAUT_THEME = Theme(
    {
        "success": Colors.SUCCESS,
        "error": Colors.ERROR,
        "warning": Colors.WARNING,
        "info": Colors.INFO,
        "primary": Colors.PRIMARY,
        "muted": Colors.MUTED,
        "header": Colors.HEADER,
    }
)


class ThemedConsole:
    """Console wrapper with the Typonaut theme applied."""

    def __init__(self, use_emoji: bool = True) -> None:
        self.console = Console(theme=TYPONAUT_THEME)
        self.use_emoji = use_emoji

    def _icon(self, name: str) -> str:
        return Icons.get_icon(name, self.use_emoji)

    def print_success(self, message: str) -> None:
        """Print success message with icon and styling."""
        self.console.print(f"{self._icon('SUCCESS')} {message}", style="success")

    def print_error(self, message: str) -> None:
        """Print error message with icon and styling."""
        self.console.print(f"{self._icon('ERROR')} {message}", style="error")

    def print_warning(self, message: str) -> None:
        """Print warning message with icon and styling."""
        self.console.print(f"{self._icon('WARNING')} {message}", style="warning")

    def print_list_item(self, message: str, indent: int = 1) -> None:
        """Print list item with bullet and styling."""
        spacing = "  " * indent
        self.console.print(f"{spacing}{self._icon('BULLET')} {message}", style="primary")


def get_themed_console(use_emoji: bool = True) -> ThemedConsole:
    """Get a themed console instance."""
    return ThemedConsole(use_emoji=use_emoji)
