"""Keyboard geometry and layer display."""

from .display_service import LayerDisplayService, create_layer_display_service
from .models import KeyboardLayout, KeyPosition, LayoutDefinition, LayoutValidationResult
from .validator import parse_keyboard_layout, validate_keyboard_layout


__all__ = [
    "KeyPosition",
    "KeyboardLayout",
    "LayerDisplayService",
    "LayoutDefinition",
    "LayoutValidationResult",
    "create_layer_display_service",
    "parse_keyboard_layout",
    "validate_keyboard_layout",
]
