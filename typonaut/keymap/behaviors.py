"""Interpretation of ZMK binding expressions into key labels.

A binding expression is a behavior reference followed by its parameters,
e.g. ``&kp A`` or ``&mt LSHIFT Z``. Only the part of a binding that is
useful on a key cap is kept.
"""

import logging
from collections.abc import Callable, Sequence
from enum import Enum
from typing import NamedTuple

from .keycodes import map_keycode


logger = logging.getLogger(__name__)

BEHAVIOR_MARKER = "&"
TRANSPARENT_LABEL = "∅"
STICKY_PREFIX = "⏱"
FALLBACK_TAG_LENGTH = 8


class BehaviorTag(str, Enum):
    """Behaviors with a dedicated label rule."""

    NONE = "none"
    TRANS = "trans"
    KEY_PRESS = "kp"
    MOD_TAP = "mt"
    HOME_ROW_MOD = "hm"
    LAYER_TAP = "lt"
    MOMENTARY_LAYER = "mo"
    TO_LAYER = "to"
    TOGGLE_LAYER = "tog"
    STICKY_LAYER = "sl"
    STICKY_KEY = "sk"

    @classmethod
    def from_token(cls, token: str) -> "BehaviorTag | None":
        """Resolve a behavior token such as ``&KP`` to its tag, if known."""
        if not token.startswith(BEHAVIOR_MARKER):
            return None
        try:
            return cls(token[len(BEHAVIOR_MARKER) :].lower())
        except ValueError:
            return None


class BehaviorRule(NamedTuple):
    """Label rule for one behavior: minimum parameter count and handler."""

    min_params: int
    render: Callable[[Sequence[str]], str]


def _layer_label(params: Sequence[str]) -> str:
    return f"L{params[0]}"


BEHAVIOR_RULES: dict[BehaviorTag, BehaviorRule] = {
    BehaviorTag.NONE: BehaviorRule(0, lambda params: ""),
    BehaviorTag.TRANS: BehaviorRule(0, lambda params: TRANSPARENT_LABEL),
    BehaviorTag.KEY_PRESS: BehaviorRule(1, lambda params: map_keycode(" ".join(params))),
    # Hold-taps show the tap keycode, which is what gets typed
    BehaviorTag.MOD_TAP: BehaviorRule(2, lambda params: map_keycode(params[1])),
    BehaviorTag.HOME_ROW_MOD: BehaviorRule(2, lambda params: map_keycode(params[1])),
    BehaviorTag.LAYER_TAP: BehaviorRule(2, lambda params: map_keycode(params[1])),
    BehaviorTag.MOMENTARY_LAYER: BehaviorRule(1, _layer_label),
    BehaviorTag.TO_LAYER: BehaviorRule(1, _layer_label),
    BehaviorTag.TOGGLE_LAYER: BehaviorRule(1, _layer_label),
    BehaviorTag.STICKY_LAYER: BehaviorRule(
        1, lambda params: f"{STICKY_PREFIX}{_layer_label(params)}"
    ),
    BehaviorTag.STICKY_KEY: BehaviorRule(
        1, lambda params: f"{STICKY_PREFIX}{map_keycode(params[0])}"
    ),
}


def fallback_label(behavior: str, params: Sequence[str]) -> str:
    """Label for behaviors without a rule, or with too few parameters."""
    if params:
        return map_keycode(" ".join(params))
    return behavior.upper().removeprefix(BEHAVIOR_MARKER)[:FALLBACK_TAG_LENGTH]


def interpret_binding(binding: str) -> str:
    """Produce the display label for a single binding expression.

    Args:
        binding: Behavior reference plus parameters, e.g. ``"&sk LSHFT"``

    Returns:
        Label for the key; empty string for ``&none``
    """
    parts = binding.split()
    if not parts:
        return ""

    behavior, params = parts[0], parts[1:]
    tag = BehaviorTag.from_token(behavior)
    if tag is not None:
        rule = BEHAVIOR_RULES[tag]
        if len(params) >= rule.min_params:
            return rule.render(params)
        logger.debug(
            "Binding %r has %d parameter(s), %s needs %d; using fallback label",
            binding,
            len(params),
            tag.value,
            rule.min_params,
        )

    return fallback_label(behavior, params)
