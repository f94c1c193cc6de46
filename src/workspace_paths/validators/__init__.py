"""JSON Schema checks for manifest fragments."""

from .manifest_schema import validate_app_settings, validate_declaration

__all__ = [
    "validate_app_settings",
    "validate_declaration",
]
