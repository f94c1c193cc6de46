"""Workspace root and member package discovery."""

from __future__ import annotations

import logging
import os
import posixpath
from collections.abc import Iterable
from pathlib import Path

from .models import WorkspaceRoot
from .parsers.package_json import MANIFEST_NAME, load


logger = logging.getLogger(__name__)

EXCLUDE_DIR = "node_modules"


def _absolute(path: Path | str) -> Path:
    # normalise ".." lexically without resolving symlinks
    return Path(os.path.abspath(path))


def find_manifest_up(start: Path | str) -> Path | None:
    """Return the nearest package.json at or above ``start``."""
    start = _absolute(start)
    for directory in (start, *start.parents):
        candidate = directory / MANIFEST_NAME
        if candidate.is_file():
            return candidate
    return None


def locate_workspace_root(start: Path | str) -> WorkspaceRoot | None:
    """Find the nearest ancestor manifest that declares ``workspaces``.

    A manifest without ``workspaces`` does not stop the search: it resumes
    from the parent of that manifest's directory. Returns ``None`` once the
    filesystem root has been examined.
    """
    search_from = _absolute(start)
    while True:
        manifest = find_manifest_up(search_from)
        if manifest is None:
            logger.debug("No %s found at or above %s", MANIFEST_NAME, search_from)
            return None

        data = load(manifest)
        if "workspaces" in data:
            logger.debug("Workspace root manifest: %s", manifest)
            return WorkspaceRoot(
                root=manifest.parent,
                manifest=manifest,
                declaration=data["workspaces"],
            )

        logger.debug("Skipping %s: no 'workspaces' field", manifest)
        parent = manifest.parent.parent
        if parent == manifest.parent:
            return None
        search_from = parent


def discover_package_manifests(
    root: Path | str,
    patterns: Iterable[str],
    exclude: str = EXCLUDE_DIR,
) -> list[Path]:
    """Expand workspace patterns into absolute package.json paths.

    Only the directory portion of each pattern is used: every package.json
    at least one level below ``root / dirname(pattern)`` is a member, except
    those reached through ``exclude`` or a dot-directory at any depth.
    Results keep pattern order; matches of one pattern are sorted. Patterns
    that overlap yield duplicates.
    """
    root = _absolute(root)
    found: list[Path] = []
    for pattern in patterns:
        base = _absolute(root / posixpath.dirname(pattern))
        matches = _manifests_below(base, exclude)
        logger.debug("Pattern %r matched %d manifest(s) under %s", pattern, len(matches), base)
        found.extend(matches)
    return found


def _manifests_below(base: Path, exclude: str) -> list[Path]:
    if not base.is_dir():
        return []

    def should_skip(name: str) -> bool:
        return name == exclude or name.startswith(".")

    matches: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(base):
        dirnames[:] = [name for name in dirnames if not should_skip(name)]
        directory = Path(dirpath)
        if directory == base:
            continue
        if MANIFEST_NAME in filenames:
            matches.append(directory / MANIFEST_NAME)

    return sorted(matches, key=lambda p: p.relative_to(base).as_posix())
