"""Validation of keyboard geometry JSON data."""

import logging
from typing import Any

from pydantic import ValidationError

from .models import KeyboardLayout, LayoutValidationResult


logger = logging.getLogger(__name__)

OPTIONAL_NUMERIC_FIELDS = {
    "row": '"row"',
    "col": '"col"',
    "r": '"r" (rotation)',
    "rx": '"rx"',
    "ry": '"ry"',
}


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _validate_keys(layout_name: str, keys: list[Any]) -> list[str]:
    errors = []
    for index, key in enumerate(keys):
        prefix = f'Key [{index}] in layout "{layout_name}"'
        if not isinstance(key, dict):
            errors.append(f"{prefix} is invalid")
            continue

        for axis in ("x", "y"):
            if not _is_number(key.get(axis)):
                errors.append(f'{prefix} missing required "{axis}" coordinate')

        for field_name, description in OPTIONAL_NUMERIC_FIELDS.items():
            if field_name in key and not _is_number(key[field_name]):
                errors.append(f"{prefix} has invalid {description}")
    return errors


def validate_keyboard_layout(data: Any) -> LayoutValidationResult:
    """Check the shape of keyboard geometry data.

    Args:
        data: Decoded JSON

    Returns:
        Validation result listing every problem found
    """
    if not isinstance(data, dict):
        return LayoutValidationResult(
            valid=False, errors=["Layout must be a JSON object"]
        )

    errors = []
    if not isinstance(data.get("id"), str) or not data["id"]:
        errors.append('Layout must have an "id" property (non-empty string)')
    if not isinstance(data.get("name"), str) or not data["name"]:
        errors.append('Layout must have a "name" property (non-empty string)')

    layouts = data.get("layouts")
    if not isinstance(layouts, dict):
        errors.append('Layout must have a "layouts" object')
        return LayoutValidationResult(valid=False, errors=errors)

    if not layouts:
        errors.append("Layout must define at least one layout")
        return LayoutValidationResult(valid=False, errors=errors)

    for layout_name, definition in layouts.items():
        if not isinstance(definition, dict):
            errors.append(f'Layout "{layout_name}" must be an object')
            continue

        keys = definition.get("layout")
        if not isinstance(keys, list):
            errors.append(f'Layout "{layout_name}" must have a "layout" array')
            continue
        if not keys:
            errors.append(f'Layout "{layout_name}" has no keys defined')
            continue

        errors.extend(_validate_keys(layout_name, keys))

    return LayoutValidationResult(valid=not errors, errors=errors)


def parse_keyboard_layout(data: Any) -> KeyboardLayout | None:
    """Build a :class:`KeyboardLayout` from validated data.

    Returns:
        The layout, or None when validation failed
    """
    validation = validate_keyboard_layout(data)
    if not validation.valid:
        logger.error("Keyboard layout validation failed: %s", validation.errors)
        return None

    try:
        return KeyboardLayout.model_validate(data)
    except ValidationError as e:
        logger.error("Keyboard layout could not be loaded: %s", e)
        return None
