"""Core validation entrypoints.

This module MUST NOT contain GitHub API dependencies so the same pipeline runs
from the Action, the CLI and the tests. The step summary is written
by the caller.
"""

from __future__ import annotations

from collections.abc import Sequence

from . import workflow
from .context import ValidationContext
from .models import PipelineReport, StageResult
from .steps import STEPS, Step


def run_step(step: Step, ctx: ValidationContext) -> StageResult:
    """Run one stage inside its own output group and capture the outcome.

    Any exception raised by the stage becomes a failed result; nothing is
    retried.
    """
    with workflow.group(step.name):
        try:
            step.fn(ctx)
        except Exception as exc:  # noqa: BLE001
            message = str(exc) or exc.__class__.__name__
            workflow.error(message)
            return StageResult(name=step.name, ok=False, error=message)
    return StageResult(name=step.name, ok=True)


def run_pipeline(
    ctx: ValidationContext,
    steps: Sequence[Step] = STEPS,
) -> PipelineReport:
    """Run ``steps`` in order, stopping at the first failure."""
    results: list[StageResult] = []
    skipped: list[str] = []

    for index, step in enumerate(steps):
        result = run_step(step, ctx)
        results.append(result)
        if not result.ok:
            skipped = [s.name for s in steps[index + 1 :]]
            break

    return PipelineReport(
        package=ctx.manifest.name,
        version=ctx.manifest.version,
        results=tuple(results),
        skipped=tuple(skipped),
    )
