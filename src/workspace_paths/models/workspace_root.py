"""Workspace root model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class WorkspaceRoot:
    """The directory whose manifest declares ``workspaces``."""

    root: Path
    manifest: Path
    declaration: Any

    def __post_init__(self) -> None:
        if self.manifest.parent != self.root:
            raise ValueError("manifest must live directly in the workspace root")
