"""Nested field lookup over manifest documents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


class _Missing:
    """Marker for a key path that is not present in a document."""

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

KEY_PATH_SEPARATOR = ":"


def split_key_path(entry: str) -> tuple[str, ...]:
    """Split a colon-delimited entry such as ``"main:src"`` into segments."""
    return tuple(entry.split(KEY_PATH_SEPARATOR))


def get_deep(doc: Any, key_path: Sequence[str]) -> Any:
    """Return the value at ``key_path`` inside ``doc`` or ``MISSING``.

    Segments are consumed left to right. A segment that is absent, or an
    intermediate value that is not a mapping, stops the walk with
    ``MISSING``. The value stored under the final segment is returned as is,
    falsy values included.
    """
    if not key_path:
        return MISSING

    current = doc
    for key in key_path:
        if not isinstance(current, Mapping) or key not in current:
            return MISSING
        current = current[key]
    return current
