"""Per-app overrides read from ``react-scripts.workspaces``."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AppSettings:
    """Optional overrides; ``None`` means the key was absent."""

    development: bool | None = None
    production: bool | None = None
    package_entry: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AppSettings:
        development = bool(data["development"]) if "development" in data else None
        production = bool(data["production"]) if "production" in data else None
        package_entry = data.get("package-entry")
        return cls(
            development=development,
            production=production,
            package_entry=package_entry,
        )
