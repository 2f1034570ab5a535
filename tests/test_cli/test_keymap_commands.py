"""Tests for keymap CLI commands."""

import json

import pytest

from typonaut.cli import app


pytestmark = pytest.mark.usefixtures("isolated_config")


class TestParseCommand:
    """Test the keymap parse command."""

    def test_parse_pretty(self, cli_runner, keymap_file):
        """Test layers are listed with their labels."""
        result = cli_runner.invoke(
            app, ["keymap", "parse", str(keymap_file)], catch_exceptions=False
        )

        assert result.exit_code == 0
        assert "0: default_layer (11 keys)" in result.output
        assert "1: Lower (12 keys)" in result.output
        assert "Q W E R A S D F L1 ␣ ∅" in result.output

    def test_parse_json(self, cli_runner, keymap_file):
        """Test JSON output holds layers and the default layer."""
        result = cli_runner.invoke(
            app, ["keymap", "parse", str(keymap_file), "--format", "json"]
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["defaultLayer"] == 0
        assert [layer["name"] for layer in data["layers"]] == [
            "default_layer",
            "Lower",
        ]
        assert data["layers"][1]["bindings"][4] == "⏱Shift"

    def test_parse_to_file(self, cli_runner, keymap_file, tmp_path):
        """Test --output writes JSON to a file."""
        output = tmp_path / "out" / "keymap.json"

        result = cli_runner.invoke(
            app, ["keymap", "parse", str(keymap_file), "-o", str(output)]
        )

        assert result.exit_code == 0
        assert "Keymap written to" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert len(data["layers"]) == 2

    def test_parse_logs_source_context(self, cli_runner, keymap_file, tmp_path):
        """Test the load event in the log file carries the keymap source."""
        log_file = tmp_path / "typonaut.log"

        result = cli_runner.invoke(
            app,
            ["--debug", "--log-file", str(log_file), "keymap", "parse", str(keymap_file)],
        )

        assert result.exit_code == 0
        records = [
            json.loads(line)
            for line in log_file.read_text(encoding="utf-8").splitlines()
        ]
        loaded = [record for record in records if record["event"] == "keymap_loaded"]
        assert len(loaded) == 1
        assert loaded[0]["source"] == str(keymap_file)
        assert loaded[0]["layers"] == 2

    def test_parse_invalid_keymap(self, cli_runner, tmp_path):
        """Test a keymap without layers exits with code 1."""
        path = tmp_path / "empty.keymap"
        path.write_text("/ { };\n", encoding="utf-8")

        result = cli_runner.invoke(app, ["keymap", "parse", str(path)])

        assert result.exit_code == 1
        assert "Invalid keymap" in result.output
        assert "No layers found in keymap" in result.output

    def test_parse_missing_file(self, cli_runner, tmp_path):
        """Test a missing file exits with code 1."""
        result = cli_runner.invoke(
            app, ["keymap", "parse", str(tmp_path / "missing.keymap")]
        )

        assert result.exit_code == 1
        assert "File not found" in result.output


class TestValidateCommand:
    """Test the keymap validate command."""

    def test_validate_valid(self, cli_runner, keymap_file):
        """Test a valid keymap is reported with its layers."""
        result = cli_runner.invoke(app, ["keymap", "validate", str(keymap_file)])

        assert result.exit_code == 0
        assert "Keymap is valid: 2 layers" in result.output

    def test_validate_shows_warnings(self, cli_runner, keymap_file):
        """Test binding count mismatches are shown without failing."""
        result = cli_runner.invoke(
            app, ["--no-emoji", "keymap", "validate", str(keymap_file)]
        )

        assert result.exit_code == 0
        assert "has 12 bindings, expected 11" in result.output

    def test_validate_invalid(self, cli_runner, tmp_path):
        """Test an invalid keymap exits with code 1."""
        path = tmp_path / "bad.keymap"
        path.write_text("keymap {\n};\n", encoding="utf-8")

        result = cli_runner.invoke(app, ["keymap", "validate", str(path)])

        assert result.exit_code == 1
        assert "No layers found in keymap" in result.output


class TestShowCommand:
    """Test the keymap show command."""

    def test_show_default_layer(self, cli_runner, keymap_file):
        """Test the first layer is shown by default."""
        result = cli_runner.invoke(
            app, ["keymap", "show", str(keymap_file), "--columns", "4"]
        )

        assert result.exit_code == 0
        assert "Layer: default_layer" in result.output

    def test_show_layer_by_name(self, cli_runner, keymap_file):
        """Test a layer can be selected by display name."""
        result = cli_runner.invoke(
            app, ["keymap", "show", str(keymap_file), "-l", "Lower"]
        )

        assert result.exit_code == 0
        assert "Layer: Lower" in result.output

    def test_show_layer_with_numeric_display_name(self, cli_runner, tmp_path):
        """Test a digits-only display name selects that layer, not an index."""
        path = tmp_path / "numbered.keymap"
        path.write_text(
            """
keymap {
    base {
        bindings = <&kp A>;
    };
    numbers {
        display-name = "0";
        bindings = <&kp N1>;
    };
};
""",
            encoding="utf-8",
        )

        result = cli_runner.invoke(app, ["keymap", "show", str(path), "-l", "0"])

        assert result.exit_code == 0
        assert "Layer: 0" in result.output
        assert "Layer: base" not in result.output

    def test_show_unknown_layer(self, cli_runner, keymap_file):
        """Test an unknown layer exits with code 1."""
        result = cli_runner.invoke(
            app, ["keymap", "show", str(keymap_file), "-l", "7"]
        )

        assert result.exit_code == 1

    def test_show_with_geometry(self, cli_runner, keymap_file, tmp_path, geometry_data):
        """Test keys are arranged using a geometry file."""
        geometry = tmp_path / "mini12.json"
        geometry.write_text(json.dumps(geometry_data), encoding="utf-8")

        result = cli_runner.invoke(
            app,
            ["keymap", "show", str(keymap_file), "-l", "1", "-g", str(geometry)],
        )

        assert result.exit_code == 0
        assert "Layer: Lower" in result.output

    def test_show_with_invalid_geometry(self, cli_runner, keymap_file, tmp_path):
        """Test invalid geometry exits with code 1."""
        geometry = tmp_path / "broken.json"
        geometry.write_text('{"id": "x"}', encoding="utf-8")

        result = cli_runner.invoke(
            app, ["keymap", "show", str(keymap_file), "-g", str(geometry)]
        )

        assert result.exit_code == 1

    def test_show_unknown_layout_variant(
        self, cli_runner, keymap_file, tmp_path, geometry_data
    ):
        """Test an unknown layout variant exits with code 1."""
        geometry = tmp_path / "mini12.json"
        geometry.write_text(json.dumps(geometry_data), encoding="utf-8")

        result = cli_runner.invoke(
            app,
            ["keymap", "show", str(keymap_file), "-g", str(geometry), "--layout", "x"],
        )

        assert result.exit_code == 1


class TestLabelCommand:
    """Test the keymap label command."""

    def test_label(self, cli_runner):
        """Test each binding is printed with its label."""
        result = cli_runner.invoke(
            app, ["keymap", "label", "&kp A", "&mo 1", "&none"]
        )

        assert result.exit_code == 0
        assert "&kp A → A" in result.output
        assert "&mo 1 → L1" in result.output
        assert "&none → (none)" in result.output
