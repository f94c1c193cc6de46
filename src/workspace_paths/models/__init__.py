"""Data models for workspace resolution."""

from __future__ import annotations

from .app_settings import AppSettings
from .resolved_config import DEFAULT_PACKAGE_ENTRY, ResolvedConfig
from .workspace_root import WorkspaceRoot

__all__ = [
    "AppSettings",
    "DEFAULT_PACKAGE_ENTRY",
    "ResolvedConfig",
    "WorkspaceRoot",
]
