"""Structural validation of parsed keymaps."""

from .models import ParsedKeymap


NO_LAYERS_MESSAGE = "No layers found in keymap"


def validate(keymap: ParsedKeymap) -> list[str]:
    """Check that a parsed keymap has usable layers.

    The check is advisory: callers decide whether to reject a keymap that
    produced errors.

    Args:
        keymap: Keymap returned by :func:`typonaut.keymap.parse`

    Returns:
        Human-readable error messages; empty when the keymap is valid
    """
    if not keymap.layers:
        return [NO_LAYERS_MESSAGE]

    errors = []
    for index, layer in enumerate(keymap.layers):
        if not layer.name:
            errors.append(f"Layer {index} has no name")
        if not layer.bindings:
            errors.append(f'Layer "{layer.name}" has no bindings')
    return errors
