"""Base model for all Typonaut Pydantic models.

Keeps serialization consistent between the keymap, geometry and
configuration models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class TyponautBaseModel(BaseModel):
    """Base model class for all Typonaut Pydantic models.

    Serialization always uses aliases and JSON-compatible values so that
    results can be written straight to the terminal or a file.
    """

    model_config = ConfigDict(
        extra="forbid",
        use_enum_values=True,
        validate_assignment=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to a JSON-compatible dictionary.

        Returns:
            Dictionary representation using JSON-compatible serialization
        """
        return self.model_dump(by_alias=True, mode="json")
