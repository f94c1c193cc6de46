"""App-level overrides read from the app's own package.json.

The app manifest may carry a block such as::

    "react-scripts": {
      "workspaces": {
        "development": true,
        "production": false,
        "package-entry": "module:lib"
      }
    }

``development`` and ``production`` are coerced with ``bool()``;
``package-entry`` replaces the default ``main:src`` key path. Missing keys
leave the defaults untouched. The block is validated against
``validators.manifest_schema.APP_SETTINGS_SCHEMA``.
"""

from __future__ import annotations

from pathlib import Path

from .fields import get_deep
from .models import AppSettings
from .parsers.package_json import load
from .validators import validate_app_settings


SETTINGS_KEY_PATH = ("react-scripts", "workspaces")


def load_app_settings(app_manifest: Path | str) -> AppSettings:
    """Load the override block from ``app_manifest``.

    Raises:
        ManifestReadError / ManifestParseError: the manifest cannot be loaded.
        InvalidSettingsError: the block is present but malformed.
    """
    app_package_json = load(app_manifest)
    block = get_deep(app_package_json, SETTINGS_KEY_PATH)
    # any falsy block counts as absent
    if not block:
        return AppSettings()

    validate_app_settings(block)
    return AppSettings.from_dict(block)
