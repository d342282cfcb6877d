"""Install the packed tarball into an empty scratch project."""

from __future__ import annotations

from .. import workflow
from ..context import ValidationContext


def install_library(ctx: ValidationContext) -> None:
    """Create the scratch project, then install the tarball by absolute path."""
    workflow.info("Creating a new empty project")
    ctx.run([ctx.npm_bin, "init", "-y"], ctx.scratch_dir)

    workflow.info("Installing the package")
    ctx.run([ctx.npm_bin, "install", str(ctx.tarball_path)], ctx.scratch_dir)
