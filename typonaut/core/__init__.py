"""Core infrastructure: errors and logging."""

from .errors import (
    ConfigError,
    KeymapError,
    LayoutError,
    SourceLoadError,
    TyponautError,
)


__all__ = [
    "ConfigError",
    "KeymapError",
    "LayoutError",
    "SourceLoadError",
    "TyponautError",
]
