"""Blocking subprocess execution for npm and node.

Commands run to completion with no timeout. Output is echoed so it ends up in
the current group, and a non-zero exit status raises ``CommandError``.
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol
from collections.abc import Sequence

from . import workflow


class CommandError(RuntimeError):
    """Raised when an external command cannot start or exits non-zero."""


@dataclass(slots=True, frozen=True)
class CommandResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


class CommandRunner(Protocol):
    def __call__(self, args: Sequence[str], cwd: Path) -> CommandResult: ...


def _format_failure(args: Sequence[str], returncode: int, stderr: str) -> str:
    message = f"The process '{args[0]}' failed with exit code {returncode}"
    detail = stderr.strip()
    if detail:
        message += f":\n{detail}"
    return message


def run_command(args: Sequence[str], cwd: Path) -> CommandResult:
    """Run ``args`` in ``cwd`` and return its captured output.

    Raises:
        CommandError: If the executable is missing or exits non-zero.
    """
    workflow.info(f"[command]{' '.join(args)}")
    # Resolves npm to npm.cmd on Windows.
    executable = shutil.which(args[0]) or args[0]
    try:
        completed = subprocess.run(
            [executable, *args[1:]],
            cwd=cwd,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise CommandError(f"Unable to run '{args[0]}': {exc}") from exc

    if completed.stdout:
        workflow.info(completed.stdout.rstrip("\n"))
    if completed.stderr:
        workflow.info(completed.stderr.rstrip("\n"))

    if completed.returncode != 0:
        raise CommandError(_format_failure(args, completed.returncode, completed.stderr))

    return CommandResult(
        args=tuple(args),
        returncode=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )
