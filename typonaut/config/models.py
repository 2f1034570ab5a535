"""User configuration models."""

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class UserConfigData(BaseSettings):
    """User configuration data model with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables (``TYPONAUT_*``)
    2. Constructor arguments (config file data)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPONAUT_",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Let environment variables override values read from config files."""
        return (env_settings, init_settings)

    log_level: str = Field(
        default="WARNING", description="Log level used when no CLI flag is given"
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds when fetching keymaps or layouts by URL",
    )
    display_columns: int = Field(
        default=10,
        ge=1,
        description="Keys per row when showing a layer without keyboard geometry",
    )
    emoji: bool = Field(default=True, description="Use emoji icons in CLI output")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is recognized."""
        upper_v = v.strip().upper()
        if upper_v not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return upper_v
