"""CLI helper utilities."""

from .theme import Colors, Icons, ThemedConsole, get_themed_console


__all__ = ["Colors", "Icons", "ThemedConsole", "get_themed_console"]
