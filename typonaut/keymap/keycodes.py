"""ZMK keycode to display glyph mapping."""

import re
import string
from types import MappingProxyType


def _build_keycode_map() -> dict[str, str]:
    keycodes: dict[str, str] = {letter: letter for letter in string.ascii_uppercase}

    for digit in string.digits:
        keycodes[f"N{digit}"] = digit
        keycodes[f"NUMBER_{digit}"] = digit

    keycodes.update(
        {
            # Whitespace and editing keys
            "SPACE": "␣",
            "SPC": "␣",
            "ENTER": "⏎",
            "RET": "⏎",
            "TAB": "⇥",
            "BSPC": "⌫",
            "BACKSPACE": "⌫",
            "DEL": "⌦",
            "DELETE": "⌦",
            # Punctuation
            "COMMA": ",",
            "DOT": ".",
            "FSLH": "/",
            "BSLH": "\\",
            "SEMI": ";",
            "APOS": "'",
            "COLON": ":",
            "DBLQU": '"',
            "LBKT": "[",
            "RBKT": "]",
            "LBRC": "{",
            "RBRC": "}",
            "LPAR": "(",
            "RPAR": ")",
            "EQUAL": "=",
            "PLUS": "+",
            "MINUS": "-",
            "UNDER": "_",
            "EXCL": "!",
            "AT": "@",
            "HASH": "#",
            "DLLR": "$",
            "PRCNT": "%",
            "CARET": "^",
            "AMPS": "&",
            "STAR": "*",
            "PIPE": "|",
            "TILDE": "~",
            "GRAVE": "`",
            "QUESTION": "?",
            # Modifiers
            "LEFT_SHIFT": "Shift",
            "LSHIFT": "Shift",
            "LSHFT": "Shift",
            "RIGHT_SHIFT": "Shift",
            "RSHIFT": "Shift",
            "RSHFT": "Shift",
            "LEFT_CONTROL": "Ctrl",
            "LCTRL": "Ctrl",
            "RIGHT_CONTROL": "Ctrl",
            "RCTRL": "Ctrl",
            "LEFT_ALT": "Alt",
            "LALT": "Alt",
            "RIGHT_ALT": "Alt",
            "RALT": "Alt",
            "ALTGR": "AltGr",
            "LEFT_GUI": "Cmd",
            "LGUI": "Cmd",
            "RIGHT_GUI": "Cmd",
            "RGUI": "Cmd",
            # Navigation
            "UP": "↑",
            "DOWN": "↓",
            "LEFT": "←",
            "RIGHT": "→",
            "HOME": "Home",
            "END": "End",
            "PG_UP": "PgUp",
            "PAGE_UP": "PgUp",
            "PG_DN": "PgDn",
            "PAGE_DOWN": "PgDn",
            "INSERT": "Ins",
            "INS": "Ins",
            # System
            "ESC": "Esc",
            "CAPS": "Caps",
            "CAPS_LOCK": "Caps",
            "PSCRN": "PrtSc",
            "SLCK": "Slk",
            "PAUSE_BREAK": "Pause",
        }
    )

    for number in range(1, 13):
        keycodes[f"F{number}"] = f"F{number}"

    return keycodes


KEYCODE_MAP = MappingProxyType(_build_keycode_map())

# Applied in order, each at most once
KEYCODE_PREFIXES = ("KC_", "K_", "C_")

FALLBACK_LABEL_LENGTH = 12

_NUMBERED_PATTERN = re.compile(r"^N(\d)$")


def strip_keycode_prefixes(keycode: str) -> str:
    """Remove the ``KC_``, ``K_`` and ``C_`` prefixes from an upper-case keycode."""
    for prefix in KEYCODE_PREFIXES:
        if keycode.startswith(prefix):
            keycode = keycode[len(prefix) :]
    return keycode


def map_keycode(keycode: str) -> str:
    """Translate a keycode identifier into a short display label.

    Never fails: unknown keycodes are turned into a readable, truncated
    version of themselves.

    Args:
        keycode: Raw keycode token, e.g. ``"LSHFT"`` or ``"kc_a"``

    Returns:
        Display glyph such as ``"Shift"`` or ``"A"``
    """
    normalized = keycode.upper()

    label = KEYCODE_MAP.get(normalized)
    if label:
        return label

    without_prefix = strip_keycode_prefixes(normalized)
    label = KEYCODE_MAP.get(without_prefix)
    if label:
        return label

    numbered = _NUMBERED_PATTERN.match(without_prefix)
    if numbered:
        return numbered.group(1)

    return without_prefix.replace("_", " ")[:FALLBACK_LABEL_LENGTH]
