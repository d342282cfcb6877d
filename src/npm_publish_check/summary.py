"""Human-readable summary rendering for $GITHUB_STEP_SUMMARY."""

from __future__ import annotations

from pathlib import Path

from .models import PipelineReport


def _cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", "<br>")


def render_summary(report: PipelineReport) -> str:
    """Return a Markdown string with the overall status and a table of stages."""
    status = "passed" if report.ok else "failed"

    lines = []
    lines.append("# npm publish check")
    lines.append("")
    lines.append(f"Package: `{report.package}@{report.version}` | Result: {status}")
    lines.append("")
    lines.append("| Stage | Status | Details |")
    lines.append("| --- | --- | --- |")

    for result in report.results:
        if result.ok:
            lines.append(f"| {result.name} | passed | |")
        else:
            lines.append(f"| {result.name} | failed | {_cell(result.error or '')} |")

    for name in report.skipped:
        lines.append(f"| {name} | skipped | |")

    return "\n".join(lines) + "\n"


def write_summary(report: PipelineReport, path: Path) -> None:
    """Append the rendered summary to ``path``, as the runner expects."""
    with path.open("a", encoding="utf-8") as fh:
        fh.write(render_summary(report))
