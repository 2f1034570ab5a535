"""Tests for parsed keymap models."""

import pytest
from pydantic import ValidationError

from typonaut.core.errors import KeymapError
from typonaut.keymap import KeymapLayer, ParsedKeymap


@pytest.fixture
def keymap() -> ParsedKeymap:
    """Keymap with three layers, two sharing a name."""
    return ParsedKeymap(
        layers=(
            KeymapLayer(name="base", bindings=("A", "B")),
            KeymapLayer(name="nav", bindings=("↑", "↓")),
            KeymapLayer(name="nav", bindings=("←", "→")),
        )
    )


class TestParsedKeymap:
    """Test ParsedKeymap behavior."""

    def test_defaults(self):
        """Test an empty keymap."""
        keymap = ParsedKeymap()

        assert keymap.layers == ()
        assert keymap.default_layer == 0

    def test_serialized_with_alias(self, keymap):
        """Test JSON output uses the camelCase default layer key."""
        data = keymap.to_dict()

        assert data["defaultLayer"] == 0
        assert data["layers"][0] == {"name": "base", "bindings": ["A", "B"]}

    def test_accepts_alias_and_field_name(self):
        """Test both spellings of the default layer are accepted."""
        assert ParsedKeymap(defaultLayer=0).default_layer == 0
        assert ParsedKeymap(default_layer=0).default_layer == 0

    def test_frozen(self, keymap):
        """Test parsed keymaps are immutable."""
        with pytest.raises(ValidationError):
            keymap.default_layer = 1

    def test_layer_names(self, keymap):
        """Test layer names keep order and duplicates."""
        assert keymap.layer_names == ["base", "nav", "nav"]


class TestGetLayer:
    """Test layer lookup."""

    def test_by_index(self, keymap):
        """Test lookup by integer index."""
        assert keymap.get_layer(1).bindings == ("↑", "↓")

    def test_by_numeric_string(self, keymap):
        """Test numeric strings are treated as indices."""
        assert keymap.get_layer("2").bindings == ("←", "→")

    def test_by_name_first_match(self, keymap):
        """Test the first layer with a matching name is returned."""
        assert keymap.get_layer("nav").bindings == ("↑", "↓")

    def test_index_out_of_range(self, keymap):
        """Test an invalid index raises KeymapError."""
        with pytest.raises(KeymapError, match="out of range"):
            keymap.get_layer(3)

    def test_unknown_name(self, keymap):
        """Test an unknown name lists available layers."""
        with pytest.raises(KeymapError, match="Available layers: base, nav, nav"):
            keymap.get_layer("sym")

    def test_numeric_name_preferred_over_index(self):
        """Test a layer named with digits is found by its name."""
        keymap = ParsedKeymap(
            layers=(
                KeymapLayer(name="base", bindings=("A",)),
                KeymapLayer(name="nav", bindings=("↑",)),
                KeymapLayer(name="1", bindings=("!",)),
            )
        )

        assert keymap.get_layer("1").name == "1"
        assert keymap.get_layer(1).name == "nav"
        assert keymap.get_layer("0").name == "base"
