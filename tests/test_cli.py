import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from actdash.cli import app
from actdash.pipeline import DashboardCollector

from fakes import NOW, FakeGhClient, billable_payload, run_payload

runner = CliRunner()


def responses():
    return {
        "orgs/octo/repos": [
            {"full_name": "octo/app", "private": True},
            {"full_name": "octo/docs", "private": False},
        ],
        "repos/octo/app": {"full_name": "octo/app", "private": True},
        "repos/octo/app/actions/workflows": [
            {"id": 1, "state": "active", "name": "build", "url": "https://api/wf/1"},
        ],
        "https://api/wf/1/runs": [
            run_payload(1, "success", url="https://api/runs/1"),
            run_payload(2, "failure", url="https://api/runs/2"),
        ],
        "https://api/runs/1/timing": billable_payload(ubuntu=30_000),
        "https://api/runs/2/timing": billable_payload(ubuntu=33_500),
        "repos/octo/docs/actions/workflows": [],
    }


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    monkeypatch.setenv("ACTDASH_CONFIG", str(path))
    return path


@pytest.fixture
def fake_gh(config_file):
    client = FakeGhClient(responses())
    with patch("actdash.cli.dashboard.GhClient", return_value=client), \
         patch("pendulum.now", return_value=NOW):
        yield client


def test_dashboard_for_org(fake_gh):
    result = runner.invoke(app, ["octo", "--width", "120"])

    assert result.exit_code == 0, result.output
    assert "GitHub Actions dashboard for octo for the past 30 days" in result.output
    assert "Total billable time: 1m 3s" in result.output
    assert "build" in result.output
    assert "Health: ✓x" in result.output
    assert "octo/docs" not in result.output


def test_explicit_repositories(fake_gh):
    result = runner.invoke(app, ["octo", "-r", "app", "-l", "12h", "-w", "120"])

    assert result.exit_code == 0, result.output
    assert "for the past 12 hours" in result.output
    assert "orgs/octo/repos" not in fake_gh.paths()


def test_missing_selector(fake_gh):
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "need exactly one argument" in result.output


def test_bad_lookback(fake_gh):
    result = runner.invoke(app, ["octo", "--last", "3w"])

    assert result.exit_code == 1
    assert "report duration should be" in result.output
    assert fake_gh.calls == []


def test_unknown_selector(fake_gh):
    result = runner.invoke(app, ["ghost"])

    assert result.exit_code == 1
    assert "could not find a user or org" in result.output
    assert "GitHub Actions dashboard" not in result.output


def test_fetch_failure_prints_no_dashboard(fake_gh):
    del fake_gh.responses["https://api/runs/2/timing"]

    result = runner.invoke(app, ["octo"])

    assert result.exit_code == 1
    assert "GitHub Actions dashboard" not in result.output


def test_invalid_config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("dashboard:\n  max_concurrent: 0\n")
    monkeypatch.setenv("ACTDASH_CONFIG", str(path))

    result = runner.invoke(app, ["octo"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_config_path_is_a_directory(tmp_path, monkeypatch):
    monkeypatch.setenv("ACTDASH_CONFIG", str(tmp_path))

    result = runner.invoke(app, ["octo"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Could not read config file" in result.output


def collector_settings(fake_gh, args):
    with patch("actdash.cli.dashboard.DashboardCollector", side_effect=DashboardCollector) as collector:
        result = runner.invoke(app, args)

    assert result.exit_code == 0, result.output
    _, settings, window = collector.call_args.args
    return settings, window, result.output


def test_config_file_supplies_defaults(fake_gh, config_file):
    config_file.write_text("dashboard:\n  width: 50\n  max_concurrent: 4\n  default_last: 12h\n")

    settings, window, output = collector_settings(fake_gh, ["octo"])

    assert settings.width == 50
    assert settings.max_concurrent == 4
    assert window.total_seconds() == 12 * 3600


def test_flags_override_config_file(fake_gh, config_file):
    config_file.write_text("dashboard:\n  width: 50\n  max_concurrent: 4\n  default_last: 12h\n")

    settings, window, output = collector_settings(fake_gh, ["octo", "-j", "2", "-w", "120", "-l", "3d"])

    assert settings.width == 120
    assert settings.max_concurrent == 2
    assert window.total_seconds() == 3 * 86400
    assert "for the past 3 days" in output


def gh_process(args):
    path = args[4]
    proc = MagicMock()
    proc.communicate = AsyncMock(return_value=(json.dumps(responses()[path]).encode(), b""))
    proc.returncode = 0
    return proc


def test_verbose_echoes_gh_calls(config_file):
    async def fake_exec(*args, **kwargs):
        return gh_process(args)

    with patch("actdash.ingestion.gh_client.shutil.which", return_value="/usr/bin/gh"), \
         patch("asyncio.create_subprocess_exec", side_effect=fake_exec), \
         patch("pendulum.now", return_value=NOW):
        result = runner.invoke(app, ["octo", "--verbose", "-w", "120"])

    assert result.exit_code == 0, result.output
    assert "gh api --cache 60m orgs/octo/repos" in result.output
    assert "gh api --cache 60m repos/octo/app/actions/workflows --jq .workflows" in result.output
    assert "gh api --cache 60m https://api/runs/1/timing --jq .billable" in result.output


def test_quiet_by_default(fake_gh):
    result = runner.invoke(app, ["octo", "-w", "120"])

    assert result.exit_code == 0, result.output
    assert "gh api" not in result.output
