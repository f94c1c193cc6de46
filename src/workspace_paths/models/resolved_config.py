"""Resolved workspace configuration handed to the bundler."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .app_settings import AppSettings


DEFAULT_PACKAGE_ENTRY = "main:src"


@dataclass(frozen=True)
class ResolvedConfig:
    """Final output of a resolution run.

    ``root`` stays ``None`` when the app is not part of a workspace (or the
    workspace declares no members); ``paths`` keeps package discovery order
    and may contain duplicates.
    """

    root: str | None = None
    paths: list[str] = field(default_factory=list)
    package_entry: str = DEFAULT_PACKAGE_ENTRY
    development: bool = True
    production: bool = True

    def with_settings(self, settings: AppSettings) -> ResolvedConfig:
        """Return a copy with the app-level overrides applied."""
        changes: dict[str, object] = {}
        if settings.development is not None:
            changes["development"] = settings.development
        if settings.production is not None:
            changes["production"] = settings.production
        if settings.package_entry is not None:
            changes["package_entry"] = settings.package_entry
        return replace(self, **changes)

    def to_dict(self) -> dict[str, object]:
        return {
            "root": self.root,
            "paths": list(self.paths),
            "packageEntry": self.package_entry,
            "development": self.development,
            "production": self.production,
        }
