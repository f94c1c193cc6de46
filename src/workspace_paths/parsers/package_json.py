"""Load package.json manifests and read their ``workspaces`` declaration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..errors import ManifestParseError, ManifestReadError, MissingFieldError
from ..validators import validate_declaration


MANIFEST_NAME = "package.json"


def load(path: Path | str) -> dict[str, Any]:
    """Return the JSON object stored in the manifest at ``path``.

    Raises:
        ManifestReadError: the file is missing or unreadable.
        ManifestParseError: the content is not valid JSON or not an object.
    """
    import json

    manifest_path = Path(path)
    try:
        raw = manifest_path.read_bytes()
    except OSError as exc:
        raise ManifestReadError(f"Failed to read manifest {manifest_path}: {exc}") from exc

    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ManifestParseError(f"Invalid JSON in manifest {manifest_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestParseError(f"Manifest {manifest_path} must contain a JSON object")

    return data


def workspace_patterns(declaration: Any) -> list[str]:
    """Normalise a ``workspaces`` value into an ordered list of glob patterns.

    Accepts the plain array form and the object form used with "nohoist"
    (``{"packages": [...], "nohoist": [...]}``).
    """
    validate_declaration(declaration)

    if isinstance(declaration, list):
        return list(declaration)

    if "packages" not in declaration:
        raise MissingFieldError("'workspaces' object is missing required 'packages' array")

    return list(declaration["packages"])
