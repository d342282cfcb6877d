"""Look for files that should never be published (tests, stories)."""

from __future__ import annotations

import os
from fnmatch import fnmatchcase
from pathlib import Path

from .. import workflow
from ..context import ValidationContext

FORBIDDEN_PATTERNS = ("**/__tests__", "**/*.test.*", "**/*.stories.*")
EXCLUDES = {"node_modules"}


class ForbiddenFilesError(RuntimeError):
    """Raised when the installed package contains forbidden files."""

    def __init__(self, paths: list[str]) -> None:
        super().__init__(
            "Found forbidden files in the package. This is usually caused by a "
            'missing .npmignore or a wrong "files" package.json field'
        )
        self.paths = paths


def _name_patterns() -> list[str]:
    # Every pattern is "**/<name glob>", so matching is done on entry names.
    return [pattern.rsplit("/", 1)[-1] for pattern in FORBIDDEN_PATTERNS]


def _is_forbidden(name: str, patterns: list[str]) -> bool:
    return any(fnmatchcase(name, pattern) for pattern in patterns)


def find_forbidden_files(root: Path) -> list[str]:
    """Return paths under ``root`` (POSIX, relative) matching a forbidden pattern.

    Hidden entries are included. ``node_modules`` directories are not
    searched, and a matching directory is reported once without its
    children.
    """
    patterns = _name_patterns()
    found: list[str] = []

    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        kept: list[str] = []
        for dirname in sorted(dirnames):
            if dirname in EXCLUDES:
                continue
            if _is_forbidden(dirname, patterns):
                found.append((current / dirname).relative_to(root).as_posix())
                continue
            kept.append(dirname)
        dirnames[:] = kept

        for filename in filenames:
            if _is_forbidden(filename, patterns):
                found.append((current / filename).relative_to(root).as_posix())

    return sorted(found)


def check_published_files(ctx: ValidationContext) -> None:
    workflow.info(
        f"Looking for forbidden files with patterns: {', '.join(FORBIDDEN_PATTERNS)}"
    )
    found = find_forbidden_files(ctx.installed_package_dir)
    workflow.info(f"Found {len(found)} forbidden files")
    if found:
        workflow.info("\n".join(found))
        raise ForbiddenFilesError(found)
