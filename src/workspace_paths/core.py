"""Core resolution entrypoint.

This module MUST NOT depend on any particular bundler so it can be used by
both the webpack configuration stage and the local CLI in ``workspace_paths.cli``.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from .discovery import locate_workspace_root
from .errors import InvalidArgumentError
from .models import ResolvedConfig
from .parsers.package_json import workspace_patterns
from .resolver import resolve_source_paths
from .settings import load_app_settings


logger = logging.getLogger(__name__)


def _guard(name: str, value: Any) -> None:
    if not value:
        raise InvalidArgumentError(f"{name} not provided")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} should be a string")


def build_config(app_directory: str, app_manifest: str) -> ResolvedConfig:
    """Resolve the workspace configuration for an app.

    Params:
        app_directory: absolute path of the app being built
        app_manifest: absolute path of the app's own package.json

    Returns: a fresh ResolvedConfig. When the app is not inside a workspace,
    or the workspace declares no members, the defaults are returned with
    ``root`` left as ``None``.

    Raises: InvalidArgumentError for bad inputs; manifest, declaration and
    settings errors propagate unchanged.
    """
    _guard("app_directory", app_directory)
    _guard("app_manifest", app_manifest)

    config = ResolvedConfig()

    workspace_root = locate_workspace_root(app_directory)
    if workspace_root is None:
        return config

    patterns = workspace_patterns(workspace_root.declaration)
    if not patterns:
        return config

    logger.info("Yarn Workspaces paths detected.")
    settings = load_app_settings(app_manifest)
    config = config.with_settings(settings)

    source_paths = resolve_source_paths(workspace_root.root, patterns, config.package_entry)
    logger.info('Found %d path(s) with "%s" entry.', len(source_paths), config.package_entry)

    config = replace(config, root=str(workspace_root.root), paths=source_paths)
    logger.info("Exporting Workspaces config: %s", config.to_dict())
    return config
