"""ZMK keymap parsing into per-layer key labels."""

from .behaviors import BehaviorTag, interpret_binding
from .keycodes import KEYCODE_MAP, map_keycode
from .models import KeymapLayer, ParsedKeymap
from .scanner import KeymapScanner, parse
from .service import KeymapParseResult, KeymapService, create_keymap_service
from .tokenizer import interpret_bindings, tokenize_bindings
from .validator import validate


__all__ = [
    "KEYCODE_MAP",
    "BehaviorTag",
    "KeymapLayer",
    "KeymapParseResult",
    "KeymapScanner",
    "KeymapService",
    "ParsedKeymap",
    "create_keymap_service",
    "interpret_binding",
    "interpret_bindings",
    "map_keycode",
    "parse",
    "tokenize_bindings",
    "validate",
]
