"""Core test fixtures for the typonaut project."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from typer.testing import CliRunner

from typonaut.config import UserConfig, create_user_config


SAMPLE_KEYMAP = """
#include <behaviors.dtsi>
#include <dt-bindings/zmk/keys.h>

#define BASE 0
#define LOWER 1

/ {
    keymap {
        compatible = "zmk,keymap";

        default_layer {
            // -----------------------------------------
            // |  Q  |  W  |  E  |  R  |
            bindings = <
                &kp Q    &kp W     &kp E   &kp R
                &mt LSHIFT A  &kp S  &kp D  &kp F
                &mo 1    &kp SPACE &trans  &none
            >;
        };

        lower_layer {
            display-name = "Lower";
            bindings = <
                &kp N1   &kp N2    &kp N3  &kp N4
                &sk LSHFT &kp EXCL &kp AT  &kp HASH
                &trans   &kp BSPC  &sl 2   &tog 0
            >;
        };
    };
};
"""


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_keymap() -> str:
    """Two-layer keymap with multi-line bindings."""
    return SAMPLE_KEYMAP


@pytest.fixture
def keymap_file(tmp_path: Path, sample_keymap: str) -> Path:
    """Sample keymap written to a temporary file."""
    path = tmp_path / "sample.keymap"
    path.write_text(sample_keymap, encoding="utf-8")
    return path


@pytest.fixture
def geometry_data() -> dict:
    """Keyboard geometry for a 12-key, three-row board."""
    return {
        "id": "mini12",
        "name": "Mini 12",
        "layouts": {
            "default": {
                "layout": [
                    {"row": row, "col": col, "x": col, "y": row}
                    for row in range(3)
                    for col in range(4)
                ]
            }
        },
    }


# ---- Test Isolation Fixtures ----


@pytest.fixture
def isolated_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[UserConfig, None, None]:
    """Create an isolated UserConfig instance.

    Runs the test from an empty working directory, points the XDG config
    directory at a temporary location and removes TYPONAUT_* variables so
    no real configuration leaks into tests.
    """
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in [
        "TYPONAUT_LOG_LEVEL",
        "TYPONAUT_REQUEST_TIMEOUT",
        "TYPONAUT_DISPLAY_COLUMNS",
        "TYPONAUT_EMOJI",
    ]:
        monkeypatch.delenv(name, raising=False)

    yield create_user_config()


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Restore root logger handlers and structlog defaults after each test.

    CLI invocations install handlers bound to the runner's temporary streams.
    """
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield

    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
    structlog.reset_defaults()
