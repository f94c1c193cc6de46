from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[..., Path]:
    """Write ``package.json`` under ``tmp_path / rel_dir`` and return its path."""

    def _write(rel_dir: str, data: dict[str, Any] | str) -> Path:
        directory = tmp_path / rel_dir
        directory.mkdir(parents=True, exist_ok=True)
        manifest = directory / "package.json"
        content = data if isinstance(data, str) else json.dumps(data)
        manifest.write_text(content, encoding="utf-8")
        return manifest

    return _write


@pytest.fixture
def monorepo(tmp_path: Path, write_manifest: Callable[..., Path]) -> Path:
    """Root declaring ``packages/*`` with ``bar`` and ``foo`` members and an app."""
    write_manifest(".", {"name": "root", "private": True, "workspaces": ["packages/*"]})
    write_manifest("packages/bar", {"name": "bar", "main": "src/index.js"})
    write_manifest("packages/foo", {"name": "foo", "main": "src/index.js"})
    write_manifest("packages/app", {"name": "app", "main": "src/index.js"})
    return tmp_path
