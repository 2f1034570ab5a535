"""Line-oriented scanner extracting layers from ZMK keymap text.

Only the ``keymap { ... }`` node is looked at. Inside it every named child
node becomes a layer, its optional ``display-name`` replaces the node name
and its ``bindings = < ... >`` value is turned into one label per binding.

The scanner is total: malformed or truncated input produces a partial
result, never an exception. Use :func:`typonaut.keymap.validator.validate`
to decide whether the result is usable.
"""

import logging
import re
from dataclasses import dataclass, field

from .models import KeymapLayer, ParsedKeymap
from .tokenizer import interpret_bindings


logger = logging.getLogger(__name__)

COMMENT_PREFIXES = ("//", "#")
KEYMAP_CLOSE = "};"

LAYER_OPEN_PATTERN = re.compile(r"^\s*([a-z_]+)\s*{\s*$", re.IGNORECASE)
DISPLAY_NAME_PATTERN = re.compile(r'display-name\s*=\s*"([^"]+)"', re.IGNORECASE)


@dataclass
class ScanState:
    """Mutable state of a single scan; discarded when the scan ends."""

    in_keymap: bool = False
    in_bindings: bool = False
    depth: int = 0
    layer_name: str | None = None
    bindings: list[str] = field(default_factory=list)
    fragments: list[str] = field(default_factory=list)
    layers: list[KeymapLayer] = field(default_factory=list)

    def flush_layer(self) -> None:
        """Store the open layer if it has any bindings."""
        if self.layer_name and self.bindings:
            logger.debug(
                "Layer %r parsed with %d bindings", self.layer_name, len(self.bindings)
            )
            self.layers.append(
                KeymapLayer(name=self.layer_name, bindings=tuple(self.bindings))
            )

    def start_bindings(self, fragment: str) -> None:
        self.in_bindings = True
        self.fragments = [fragment] if fragment else []

    def add_fragment(self, fragment: str) -> None:
        if fragment:
            self.fragments.append(fragment)

    def finish_bindings(self) -> None:
        """Turn the accumulated fragments into labels for the open layer."""
        self.in_bindings = False
        self.bindings.extend(interpret_bindings(self.fragments))
        self.fragments = []


class KeymapScanner:
    """Single pass scanner over keymap text.

    A fresh :class:`ScanState` is created for every call to :meth:`scan`, so
    one scanner may be shared between threads.
    """

    def scan(self, content: str) -> ParsedKeymap:
        """Parse keymap text into layers of key labels.

        Args:
            content: Complete keymap file content

        Returns:
            Parsed keymap, possibly with no layers
        """
        state = ScanState()
        closed = False

        for line in content.split("\n"):
            trimmed = line.strip()

            if not trimmed or trimmed.startswith(COMMENT_PREFIXES):
                continue

            if not state.in_keymap:
                if "keymap" in trimmed and "{" in trimmed:
                    state.in_keymap = True
                    state.depth = 1
                continue

            if self._scan_line(state, trimmed):
                closed = True
                break

        if state.in_keymap and not closed:
            # The layer that was still open is dropped, as documented
            logger.debug(
                "Keymap block not closed; discarding open layer %r", state.layer_name
            )

        return ParsedKeymap(layers=tuple(state.layers), default_layer=0)

    def _scan_line(self, state: ScanState, trimmed: str) -> bool:
        """Process one line inside the keymap block.

        Returns:
            True when the line closes the keymap block
        """
        # Plain character count, braces inside strings are not special
        state.depth += trimmed.count("{") - trimmed.count("}")

        if trimmed == KEYMAP_CLOSE and state.depth == 0:
            state.flush_layer()
            state.in_keymap = False
            logger.debug("Keymap block closed with %d layers", len(state.layers))
            return True

        layer_match = LAYER_OPEN_PATTERN.match(trimmed)
        if layer_match:
            state.flush_layer()
            state.layer_name = layer_match.group(1)
            state.bindings = []
            state.in_bindings = False
            state.fragments = []
            return False

        display_name_match = DISPLAY_NAME_PATTERN.search(trimmed)
        if display_name_match and state.layer_name:
            state.layer_name = display_name_match.group(1)

        if trimmed.startswith("bindings") and "<" in trimmed:
            start = trimmed.index("<")
            end = trimmed.find(">")
            if end != -1:
                state.start_bindings(trimmed[start + 1 : end].strip())
                state.finish_bindings()
            else:
                state.start_bindings(trimmed[start + 1 :].strip())
            return False

        if state.in_bindings:
            end = trimmed.find(">")
            if end != -1:
                state.add_fragment(trimmed[:end].strip())
                state.finish_bindings()
            else:
                state.add_fragment(trimmed)

        return False


_default_scanner = KeymapScanner()


def parse(content: str) -> ParsedKeymap:
    """Parse keymap text into a :class:`ParsedKeymap`. Never raises."""
    return _default_scanner.scan(content)
