"""Per-stage results and the aggregated pipeline report."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StageResult:
    """Outcome of one pipeline stage."""

    name: str
    ok: bool
    error: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Stage name must be non-empty")
        if self.ok and self.error is not None:
            raise ValueError("A successful stage cannot carry an error")
        if not self.ok and not self.error:
            raise ValueError("A failed stage must carry an error message")

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "ok": self.ok, "error": self.error}


@dataclass(frozen=True)
class PipelineReport:
    """Ordered results of the stages that ran, plus the skipped ones."""

    package: str
    version: str
    results: tuple[StageResult, ...]
    skipped: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return all(result.ok for result in self.results)

    @property
    def failed_stage(self) -> StageResult | None:
        for result in self.results:
            if not result.ok:
                return result
        return None

    def to_dict(self) -> dict[str, object]:
        failed = self.failed_stage
        return {
            "package": self.package,
            "version": self.version,
            "ok": self.ok,
            "failedStage": failed.name if failed else None,
            "stages": [result.to_dict() for result in self.results],
            "skipped": list(self.skipped),
        }
