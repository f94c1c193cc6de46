"""Human-readable rendering of a resolved workspace configuration."""

from __future__ import annotations

from .models import ResolvedConfig


def render_summary(config: ResolvedConfig) -> str:
    """Return a Markdown string with the workspace root, flags and source paths."""
    lines = []
    lines.append("# Workspaces Summary")
    lines.append("")
    lines.append(f"Root: {config.root or '(not in a workspace)'}")
    lines.append(
        f"Entry: {config.package_entry} | Development: {config.development} "
        f"| Production: {config.production}"
    )
    lines.append("")
    lines.append("| # | Source path |")
    lines.append("| --- | --- |")

    for index, path in enumerate(config.paths, start=1):
        lines.append(f"| {index} | {path} |")

    if not config.paths:
        lines.append("| - | (no source paths) |")

    return "\n".join(lines) + "\n"
