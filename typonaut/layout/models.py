"""Keyboard geometry models: physical key positions per layout variant."""

from typing import Any

from pydantic import ConfigDict, Field

from typonaut.models.base import TyponautBaseModel


class KeyPosition(TyponautBaseModel):
    """Position of one physical key, in key units."""

    model_config = ConfigDict(extra="allow")

    x: float
    y: float
    row: int | float | None = None
    col: int | float | None = None
    r: float | None = None
    rx: float | None = None
    ry: float | None = None


class LayoutDefinition(TyponautBaseModel):
    """One layout variant: key positions in key-index order."""

    model_config = ConfigDict(extra="allow")

    layout: list[KeyPosition]


class KeyboardLayout(TyponautBaseModel):
    """Keyboard geometry file contents."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    layouts: dict[str, LayoutDefinition]
    sensors: list[Any] | None = None

    def get_positions(self, layout_name: str | None = None) -> list[KeyPosition]:
        """Key positions of the named layout variant, or of the first one."""
        if layout_name is None:
            layout_name = next(iter(self.layouts))
        return self.layouts[layout_name].layout


class LayoutValidationResult(TyponautBaseModel):
    """Outcome of validating geometry data."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
