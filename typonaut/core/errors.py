"""Exception hierarchy for Typonaut.

The keymap parser and validator never raise; these exceptions belong to the
layers around them (loading sources, configuration, display).
"""


class TyponautError(Exception):
    """Base class for all Typonaut errors."""


class KeymapError(TyponautError):
    """Raised when a parsed keymap cannot be used for the requested operation."""


class LayoutError(TyponautError):
    """Raised when keyboard geometry data is invalid."""


class ConfigError(TyponautError):
    """Raised when user configuration cannot be loaded or is invalid."""


class SourceLoadError(TyponautError):
    """Raised when a file or URL cannot be read."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source
