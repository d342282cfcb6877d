from npm_publish_check.core import run_pipeline, run_step
from npm_publish_check.models import Manifest
from npm_publish_check.steps import STEPS, Step, install_library, pack_library

from conftest import FakeRunner


def _manifest() -> Manifest:
    return Manifest(name="@scope/pkg", version="1.2.3", exports={".": "./index.js"})


def test_pack_runs_npm_pack_in_project(make_context, fake_runner):
    ctx = make_context(_manifest(), run=fake_runner)
    pack_library(ctx)
    assert fake_runner.calls == [(["npm", "pack"], ctx.project_dir)]


def test_install_inits_and_installs_tarball_by_absolute_path(make_context, fake_runner):
    ctx = make_context(_manifest(), run=fake_runner)
    install_library(ctx)

    (init_args, init_cwd), (install_args, install_cwd) = fake_runner.calls
    assert init_args == ["npm", "init", "-y"]
    assert install_args == ["npm", "install", str(ctx.project_dir.resolve() / "scope-pkg-1.2.3.tgz")]
    assert init_cwd == install_cwd == ctx.scratch_dir


def test_stage_order():
    assert [step.name for step in STEPS] == [
        "Pack the library",
        "Install the library",
        "Verify exports",
        "Check published files",
    ]


def test_run_step_converts_exception_to_result(make_context, capsys):
    def explode(ctx):
        raise RuntimeError("it broke")

    result = run_step(Step("Explode", explode), make_context(_manifest()))

    assert not result.ok
    assert result.error == "it broke"
    captured = capsys.readouterr()
    assert "== Explode ==" in captured.out
    assert "ERROR: it broke" in captured.err


def test_run_step_uses_workflow_commands_in_actions(make_context, capsys, monkeypatch):
    monkeypatch.setenv("GITHUB_ACTIONS", "true")

    def explode(ctx):
        raise RuntimeError("line one\nline two")

    run_step(Step("Explode", explode), make_context(_manifest()))

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "::group::Explode"
    assert "::error::line one%0Aline two" in out
    assert out[-1] == "::endgroup::"


def test_pipeline_success(make_context):
    ctx = make_context(_manifest())
    ctx.installed_package_dir.mkdir(parents=True)
    (ctx.installed_package_dir / "index.js").write_text("", encoding="utf-8")

    report = run_pipeline(ctx)

    assert report.ok
    assert [r.name for r in report.results] == [s.name for s in STEPS]
    assert report.skipped == ()
    assert report.failed_stage is None


def test_pipeline_stops_at_first_failure(make_context):
    runner = FakeRunner(fail_on="install", stderr="npm ERR! 404")
    ctx = make_context(_manifest(), run=runner)

    report = run_pipeline(ctx)

    assert not report.ok
    assert report.failed_stage.name == "Install the library"
    assert "npm ERR! 404" in report.failed_stage.error
    assert report.skipped == ("Verify exports", "Check published files")
    # init ran, install failed, node never ran
    assert [args[1] for args, _ in runner.calls] == ["pack", "init", "install"]


def test_pipeline_reports_manifest_errors_in_verify_stage(make_context):
    ctx = make_context(Manifest(name="pkg", version="1.0.0", exports="./index.js"))

    report = run_pipeline(ctx)

    assert report.failed_stage.name == "Verify exports"
    assert report.skipped == ("Check published files",)
    assert report.to_dict()["failedStage"] == "Verify exports"
