from __future__ import annotations

import json
from pathlib import Path

import pytest

from npm_publish_check.context import ValidationContext
from npm_publish_check.models import Manifest
from npm_publish_check.runner import CommandError, CommandResult


class FakeRunner:
    """Records commands instead of running them; optionally fails on a match."""

    def __init__(self, fail_on: str | None = None, stderr: str = "boom") -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.fail_on = fail_on
        self.stderr = stderr

    def __call__(self, args, cwd):
        self.calls.append((list(args), Path(cwd)))
        if self.fail_on is not None and self.fail_on in " ".join(args):
            raise CommandError(f"The process '{args[0]}' failed with exit code 1:\n{self.stderr}")
        return CommandResult(args=tuple(args), returncode=0, stdout="", stderr="")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "GITHUB_ACTIONS",
        "GITHUB_STEP_SUMMARY",
        "GITHUB_TOKEN",
        "GITHUB_REPOSITORY",
        "NPM_VALIDATOR_PROJECT_DIR",
        "NPM_VALIDATOR_NPM",
        "NPM_VALIDATOR_NODE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def make_context(tmp_path):
    def _make(manifest: Manifest, run=None) -> ValidationContext:
        project = tmp_path / "project"
        scratch = tmp_path / "scratch"
        project.mkdir(exist_ok=True)
        scratch.mkdir(exist_ok=True)
        return ValidationContext(
            project_dir=project,
            manifest=manifest,
            scratch_dir=scratch,
            run=run or FakeRunner(),
        )

    return _make


@pytest.fixture
def write_manifest(tmp_path):
    def _write(data: dict, directory: Path | None = None) -> Path:
        target = directory or tmp_path / "project"
        target.mkdir(parents=True, exist_ok=True)
        path = target / "package.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return target

    return _write
