"""Resolve each workspace package's entry field to a source directory."""

from __future__ import annotations

import logging
import os
import posixpath
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .discovery import discover_package_manifests
from .fields import MISSING, get_deep, split_key_path
from .parsers.package_json import load


logger = logging.getLogger(__name__)


def lookup_entry(doc: Mapping[str, Any], entry: str) -> str | None:
    """Return the entry file named by ``entry`` in a package manifest.

    ``entry`` is a colon-delimited key path. Lookup order:

    1. a top-level key spelled exactly like ``entry`` (``"main:src"``)
    2. the nested path (``{"main": {"src": ...}}``)
    3. the first segment when it holds a file path (``{"main": "src/index.js"}``)

    Only non-empty strings count; anything else means the package has no entry.
    """
    segments = split_key_path(entry)
    candidates = [doc.get(entry, MISSING), get_deep(doc, segments)]
    if len(segments) > 1:
        candidates.append(get_deep(doc, segments[:1]))

    for value in candidates:
        if isinstance(value, str) and value:
            return value
    return None


def resolve_source_paths(
    root: Path | str,
    patterns: Iterable[str],
    entry: str,
) -> list[str]:
    """Return absolute source directories for every package defining ``entry``.

    The directory is the entry file's parent, taken relative to the package's
    own directory. Output follows discovery order and keeps duplicates.
    """
    source_paths: list[str] = []
    for manifest_path in discover_package_manifests(root, patterns):
        package_json = load(manifest_path)
        entry_file = lookup_entry(package_json, entry)
        if entry_file is None:
            logger.debug("No %r entry in %s", entry, manifest_path)
            continue

        package_dir = manifest_path.parent
        source_dir = os.path.normpath(package_dir / posixpath.dirname(entry_file))
        source_paths.append(source_dir)

    return source_paths
