"""Local CLI entrypoint to inspect workspace resolution for an app.

Usage:
  workspace-paths --app-dir path/to/app [--manifest path] [--summary] [--verbose]

This calls the same core build_config used by the bundler configuration.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .core import build_config
from .errors import WorkspaceError
from .summary import render_summary


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--app-dir", type=Path, default=Path("."))
    parser.add_argument(
        "--manifest",
        type=Path,
        default=None,
        help="App package.json (default: <app-dir>/package.json)",
    )
    parser.add_argument("--summary", action="store_true", help="Print Markdown instead of JSON")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    app_dir = args.app_dir.resolve()
    manifest = (args.manifest or app_dir / "package.json").resolve()

    try:
        config = build_config(str(app_dir), str(manifest))
    except WorkspaceError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.summary:
        print(render_summary(config), end="")
    else:
        print(json.dumps(config.to_dict(), indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
