"""Service for displaying a keymap layer's labels in the terminal."""

import logging
from collections import defaultdict
from collections.abc import Sequence

from rich import box
from rich.table import Table
from rich.text import Text

from typonaut.core.errors import KeymapError
from typonaut.keymap.models import KeymapLayer, ParsedKeymap

from .models import KeyPosition


logger = logging.getLogger(__name__)


class LayerDisplayService:
    """Arranges layer labels into rows for display.

    Label ``i`` belongs to physical key ``i``; placing keys is done here,
    never by the parser.
    """

    def build_rows(
        self,
        keymap: ParsedKeymap,
        layer: int | str,
        positions: Sequence[KeyPosition] | None = None,
        columns: int = 10,
    ) -> list[list[str]]:
        """Group the labels of one layer into display rows.

        Args:
            keymap: Parsed keymap
            layer: Layer index or name
            positions: Optional key geometry; keys are grouped by ``row``
                (or by rounded ``y``) and ordered by ``x``
            columns: Keys per row when no geometry is given

        Returns:
            Rows of labels, top to bottom

        Raises:
            KeymapError: If the layer does not exist or columns is not positive
        """
        selected = keymap.get_layer(layer)

        if positions:
            return self._rows_from_geometry(selected, positions)

        if columns < 1:
            raise KeymapError(f"Columns must be at least 1, got {columns}")
        labels = list(selected.bindings)
        return [labels[i : i + columns] for i in range(0, len(labels), columns)]

    def _rows_from_geometry(
        self, layer: KeymapLayer, positions: Sequence[KeyPosition]
    ) -> list[list[str]]:
        if len(positions) != len(layer.bindings):
            logger.warning(
                "Layer %r has %d labels for %d keys",
                layer.name,
                len(layer.bindings),
                len(positions),
            )

        rows: dict[float, list[tuple[float, str]]] = defaultdict(list)
        for index, position in enumerate(positions):
            row_key = position.row if position.row is not None else round(position.y)
            label = layer.bindings[index] if index < len(layer.bindings) else ""
            rows[row_key].append((position.x, label))

        return [
            [label for _x, label in sorted(keys, key=lambda item: item[0])]
            for _row, keys in sorted(rows.items())
        ]

    def render_layer(
        self,
        keymap: ParsedKeymap,
        layer: int | str,
        positions: Sequence[KeyPosition] | None = None,
        columns: int = 10,
    ) -> Table:
        """Render one layer as a Rich table, one table row per key row."""
        selected = keymap.get_layer(layer)
        rows = self.build_rows(keymap, layer, positions=positions, columns=columns)
        width = max((len(row) for row in rows), default=0)

        table = Table(
            title=f"Layer: {selected.name}",
            show_header=False,
            box=box.SQUARE,
            show_lines=True,
        )
        for _ in range(width):
            table.add_column(justify="center", min_width=3)
        for row in rows:
            padded = [*row, *([""] * (width - len(row)))]
            table.add_row(*(Text(label) for label in padded))
        return table


def create_layer_display_service() -> LayerDisplayService:
    """Create a layer display service."""
    return LayerDisplayService()
