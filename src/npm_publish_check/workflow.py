"""Progress output helpers using GitHub Actions workflow commands.

Inside Actions (``GITHUB_ACTIONS=true``) messages are emitted as
``::group::``/``::error::`` commands so the runner folds and annotates them.
Elsewhere the same calls print plain, readable lines.
"""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from collections.abc import Iterator


def in_actions() -> bool:
    return os.getenv("GITHUB_ACTIONS", "").strip().lower() == "true"


def escape_data(message: str) -> str:
    """Escape a message body the same way the Actions toolkit does."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def info(message: str) -> None:
    print(message, flush=True)


def warning(message: str) -> None:
    if in_actions():
        print(f"::warning::{escape_data(message)}", flush=True)
    else:
        print(f"WARNING: {message}", file=sys.stderr, flush=True)


def error(message: str) -> None:
    if in_actions():
        print(f"::error::{escape_data(message)}", flush=True)
    else:
        print(f"ERROR: {message}", file=sys.stderr, flush=True)


@contextmanager
def group(name: str) -> Iterator[None]:
    """Fold everything printed inside the block under ``name``."""
    if in_actions():
        print(f"::group::{escape_data(name)}", flush=True)
    else:
        print(f"== {name} ==", flush=True)
    try:
        yield
    finally:
        if in_actions():
            print("::endgroup::", flush=True)
