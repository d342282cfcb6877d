"""Command-line entrypoint shared by the Action and local runs.

Usage:
  npm-publish-check [--root DIR] [--npm BIN] [--node BIN] [--json]

Exit status is 0 when every stage passes, 1 when a stage fails and 2 when the
configuration or package.json cannot be loaded.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from . import workflow
from .context import ValidationContext
from .core import run_pipeline
from .parsers.package_json import ManifestError, parse as parse_manifest
from .settings import ConfigError, load_settings
from .summary import write_summary

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="npm-publish-check",
        description="Pack an npm package, install it in a scratch project and check what got published.",
    )
    parser.add_argument("--root", type=Path, default=None, help="Directory holding package.json")
    parser.add_argument("--npm", dest="npm_bin", default=None, help="npm executable")
    parser.add_argument("--node", dest="node_bin", default=None, help="node executable")
    parser.add_argument(
        "--json", dest="as_json", action="store_true", help="Print the report as JSON"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings(args.root, npm_bin=args.npm_bin, node_bin=args.node_bin)
        manifest = parse_manifest(settings.project_dir)
    except (ConfigError, ManifestError) as exc:
        workflow.error(str(exc))
        return EXIT_CONFIG

    ctx = ValidationContext.create(
        project_dir=settings.project_dir,
        manifest=manifest,
        npm_bin=settings.npm_bin,
        node_bin=settings.node_bin,
    )
    report = run_pipeline(ctx)

    if settings.step_summary is not None:
        try:
            write_summary(report, settings.step_summary)
        except OSError as exc:
            workflow.warning(f"Could not write step summary: {exc}")

    if args.as_json:
        print(json.dumps(report.to_dict(), indent=2))

    return EXIT_OK if report.ok else EXIT_FAILED


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
