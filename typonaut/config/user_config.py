"""
User configuration management for Typonaut.

Configuration sources, highest precedence first:
1. Environment variables (``TYPONAUT_*``)
2. Command-line provided config file
3. Config file in the current directory
4. User's XDG config directory
5. Default values
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from typonaut.config.models import UserConfigData
from typonaut.core.errors import ConfigError


logger = logging.getLogger(__name__)

ENV_PREFIX = "TYPONAUT_"


class UserConfig:
    """Loads and exposes user configuration."""

    def __init__(self, cli_config_path: str | Path | None = None):
        """Initialize the user configuration handler.

        Args:
            cli_config_path: Optional config file path provided via CLI

        Raises:
            ConfigError: If the CLI config file is missing, or a config file
                is not valid YAML or holds invalid values
        """
        self._cli_config_path = (
            Path(cli_config_path).expanduser().resolve() if cli_config_path else None
        )
        self._config_paths = self._generate_config_paths()
        self.config_path: Path | None = None
        self._config = self._load_config()

    def _generate_config_paths(self) -> list[Path]:
        """Generate a list of config paths to search in order of precedence."""
        config_paths = []

        if self._cli_config_path:
            config_paths.append(self._cli_config_path)

        config_paths.extend(
            [Path.cwd() / "typonaut.yaml", Path.cwd() / ".typonaut.yml"]
        )

        xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
        config_dir = (
            Path(xdg_config_home) / "typonaut"
            if xdg_config_home
            else Path.home() / ".config" / "typonaut"
        )
        config_paths.extend([config_dir / "config.yaml", config_dir / "config.yml"])

        return config_paths

    def _load_config(self) -> UserConfigData:
        if self._cli_config_path and not self._cli_config_path.exists():
            raise ConfigError(f"Config file not found: {self._cli_config_path}")

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Config search paths: %s", [str(p) for p in self._config_paths]
            )
            env_vars = [k for k in os.environ if k.startswith(ENV_PREFIX)]
            if env_vars:
                logger.debug("Found Typonaut environment variables: %s", env_vars)

        config_data: dict[str, Any] = {}
        for path in self._config_paths:
            if path.is_file():
                config_data = self._read_config_file(path)
                self.config_path = path
                logger.debug("Loaded user configuration from %s", path)
                break
        else:
            logger.debug("No user configuration file found, using defaults")

        try:
            return UserConfigData(**config_data)
        except ValidationError as e:
            source = self.config_path or "environment"
            raise ConfigError(f"Invalid configuration in {source}: {e}") from e

    @staticmethod
    def _read_config_file(path: Path) -> dict[str, Any]:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return data

    @property
    def data(self) -> UserConfigData:
        """The validated configuration values."""
        return self._config

    def get_log_level_int(self) -> int:
        """Get the configured log level as a ``logging`` module constant."""
        return int(getattr(logging, self._config.log_level, logging.WARNING))


def create_user_config(cli_config_path: str | Path | None = None) -> UserConfig:
    """Create a UserConfig instance.

    Args:
        cli_config_path: Optional config file path provided via CLI

    Returns:
        Configured UserConfig instance
    """
    return UserConfig(cli_config_path=cli_config_path)
