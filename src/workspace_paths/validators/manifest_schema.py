"""Validate the manifest fragments the resolver depends on.

Only the shapes the resolver reads are checked: the ``workspaces``
declaration of the root manifest and the ``react-scripts.workspaces`` block
of the app manifest. Everything else in ``package.json`` is ignored.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from jsonschema import Draft202012Validator

from ..errors import InvalidDeclarationError, InvalidSettingsError


_PATTERN_LIST = {"type": "array", "items": {"type": "string"}}

DECLARATION_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "anyOf": [
        _PATTERN_LIST,
        {
            "type": "object",
            "properties": {"packages": _PATTERN_LIST},
        },
    ],
}

APP_SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        # colon-delimited key path without empty segments, e.g. "main:src"
        "package-entry": {"type": "string", "pattern": "^[^:]+(:[^:]+)*$"},
    },
}

_DECLARATION_VALIDATOR = Draft202012Validator(DECLARATION_SCHEMA)
_APP_SETTINGS_VALIDATOR = Draft202012Validator(APP_SETTINGS_SCHEMA)


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def _collect(validator: Draft202012Validator, document: Any) -> list:
    return sorted(validator.iter_errors(document), key=lambda e: list(e.path))


def validate_declaration(declaration: Any) -> None:
    """Raise InvalidDeclarationError unless ``declaration`` is a list of
    patterns or an object whose optional ``packages`` is one."""
    errors = _collect(_DECLARATION_VALIDATOR, declaration)
    if errors:
        raise InvalidDeclarationError(
            "Unsupported 'workspaces' declaration:\n" + _format_errors(errors)
        )


def validate_app_settings(settings: Any) -> None:
    """Raise InvalidSettingsError when the ``react-scripts.workspaces`` block is malformed."""
    errors = _collect(_APP_SETTINGS_VALIDATOR, settings)
    if errors:
        raise InvalidSettingsError(
            "Invalid 'react-scripts.workspaces' settings:\n" + _format_errors(errors)
        )
