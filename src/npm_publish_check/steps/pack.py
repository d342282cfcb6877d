"""Pack the library with ``npm pack``."""

from __future__ import annotations

from .. import workflow
from ..context import ValidationContext


def pack_library(ctx: ValidationContext) -> None:
    workflow.info("Running `npm pack`")
    ctx.run([ctx.npm_bin, "pack"], ctx.project_dir)
