"""Typonaut - ZMK keymap parsing into per-layer key labels."""

from importlib.metadata import PackageNotFoundError, version

from .keymap import KeymapLayer, ParsedKeymap, map_keycode, parse, validate


try:
    __version__ = version(__package__ or "typonaut")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "KeymapLayer",
    "ParsedKeymap",
    "__version__",
    "map_keycode",
    "parse",
    "validate",
]
