"""Parsed keymap models."""

from pydantic import ConfigDict, Field

from typonaut.core.errors import KeymapError
from typonaut.models.base import TyponautBaseModel


class KeymapLayer(TyponautBaseModel):
    """One layer: a name and one label per key position, in source order."""

    model_config = ConfigDict(frozen=True)

    name: str
    bindings: tuple[str, ...] = ()


class ParsedKeymap(TyponautBaseModel):
    """Result of parsing a keymap.

    Layers keep source order and their names need not be unique. There is no
    syntax that selects the default layer, so ``default_layer`` is always 0
    for parsed keymaps.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    layers: tuple[KeymapLayer, ...] = ()
    default_layer: int = Field(default=0, alias="defaultLayer")

    @property
    def layer_names(self) -> list[str]:
        """Names of all layers in order."""
        return [layer.name for layer in self.layers]

    def get_layer(self, layer: int | str) -> KeymapLayer:
        """Look up a layer by index or by name.

        Strings match layer names first, the first matching layer winning.
        A numeric string that names no layer is used as an index.

        Raises:
            KeymapError: If no such layer exists
        """
        if isinstance(layer, str):
            for candidate in self.layers:
                if candidate.name == layer:
                    return candidate
            if not layer.strip().isdigit():
                raise KeymapError(
                    f"Layer {layer!r} not found. "
                    f"Available layers: {', '.join(self.layer_names)}"
                )
            layer = int(layer.strip())

        if 0 <= layer < len(self.layers):
            return self.layers[layer]
        raise KeymapError(
            f"Layer index {layer} out of range (keymap has {len(self.layers)} layers)"
        )
