"""Validation context shared by the pipeline stages."""

from __future__ import annotations

import tempfile
from dataclasses import dataclass
from pathlib import Path

from .models import Manifest
from .runner import CommandRunner, run_command

SCRATCH_PREFIX = "test-pkg-"


@dataclass(frozen=True)
class ValidationContext:
    """Everything a stage needs; passed explicitly to each stage."""

    project_dir: Path
    manifest: Manifest
    scratch_dir: Path
    npm_bin: str = "npm"
    node_bin: str = "node"
    run: CommandRunner = run_command

    @property
    def tarball_path(self) -> Path:
        return (self.project_dir / self.manifest.tarball_name).resolve()

    @property
    def installed_package_dir(self) -> Path:
        return self.scratch_dir / "node_modules" / self.manifest.name

    @classmethod
    def create(
        cls,
        *,
        project_dir: Path,
        manifest: Manifest,
        npm_bin: str = "npm",
        node_bin: str = "node",
        run: CommandRunner = run_command,
    ) -> ValidationContext:
        # The scratch project is left for the OS to clean up with the rest of
        # the temp directory.
        scratch = Path(tempfile.mkdtemp(prefix=SCRATCH_PREFIX))
        return cls(
            project_dir=project_dir.resolve(),
            manifest=manifest,
            scratch_dir=scratch,
            npm_bin=npm_bin,
            node_bin=node_bin,
            run=run,
        )
