# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from qsd_lib.backend import NothingBackend
from qsd_lib.core.config import CFG
from qsd_lib.core.error import QSDRemoteError
from qsd_lib.submit.cli import submit


@pytest.fixture
def program(tmp_path):
    path = tmp_path / "bell.bc"
    path.write_bytes(b"\x42\x43\xc0\xde")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in (
        CFG.env_vars.target,
        CFG.env_vars.subscription,
        CFG.env_vars.resource_group,
        CFG.env_vars.workspace,
    ):
        monkeypatch.delenv(var, raising=False)


def test_submit_nothing_dry_run(program):
    result = CliRunner().invoke(submit, [str(program), "--target", "nothing", "--dry-run"])

    assert result.exit_code == 0
    assert CFG.reporter.valid_banner in result.output


def test_submit_nothing_prints_id(program):
    result = CliRunner().invoke(
        submit, [str(program), "--target", "nothing", "--output", "id", "--arg", "n=3"]
    )

    assert result.exit_code == 0
    assert result.stdout == f"{NothingBackend.JOB_ID}\n"


def test_submit_target_from_environment(program, monkeypatch):
    monkeypatch.setenv(CFG.env_vars.target, "nothing")

    result = CliRunner().invoke(submit, [str(program), "--output", "ID"])

    assert result.exit_code == 0
    assert NothingBackend.JOB_ID in result.output


def test_submit_unknown_target(program):
    result = CliRunner().invoke(submit, [str(program), "--target", "unregistered-hardware-x"])

    assert result.exit_code == 1
    assert "The target 'unregistered-hardware-x' was not recognized." in result.output


def test_submit_no_target(program):
    result = CliRunner().invoke(submit, [str(program)])

    assert result.exit_code == 1
    assert "No target was specified." in result.output


def test_submit_program_does_not_exist(tmp_path):
    with patch("qsd_lib.submit.cli.logger") as mock_logger:
        result = CliRunner().invoke(
            submit, [str(tmp_path / "missing.bc"), "--target", "nothing"]
        )

    assert result.exit_code == CFG.exit_codes.default
    error_messages = [str(call.args[0]) for call in mock_logger.error.call_args_list]
    assert any("does not exist" in msg for msg in error_messages)


def test_submit_registered_target_missing_workspace(program):
    with patch("qsd_lib.submit.cli.logger") as mock_logger:
        result = CliRunner().invoke(submit, [str(program), "--target", "ionq.qpu"])

    assert result.exit_code == CFG.exit_codes.default
    error_messages = [str(call.args[0]) for call in mock_logger.error.call_args_list]
    assert any("--subscription" in msg for msg in error_messages)


def test_submit_malformed_argument(program):
    with patch("qsd_lib.submit.cli.logger") as mock_logger:
        result = CliRunner().invoke(
            submit, [str(program), "--target", "nothing", "--arg", "oops"]
        )

    assert result.exit_code == CFG.exit_codes.default
    mock_logger.error.assert_called_once()


def test_submit_remote_failure_is_reported_as_error(program):
    with (
        patch(
            "qsd_lib.submit.cli.SubmissionDriver.run",
            new=AsyncMock(side_effect=QSDRemoteError("Authentication failed")),
        ),
        patch("qsd_lib.submit.cli.logger") as mock_logger,
    ):
        result = CliRunner().invoke(submit, [str(program), "--target", "ionq.qpu"])

    assert result.exit_code == CFG.exit_codes.default
    error_messages = [str(call.args[0]) for call in mock_logger.error.call_args_list]
    assert any("Authentication failed" in msg for msg in error_messages)


def test_submit_unexpected_exception_results_in_critical_log(program):
    with (
        patch(
            "qsd_lib.submit.cli.SubmissionDriver.run",
            new=AsyncMock(side_effect=RuntimeError("boom")),
        ),
        patch("qsd_lib.submit.cli.logger") as mock_logger,
    ):
        result = CliRunner().invoke(submit, [str(program), "--target", "nothing"])

    assert result.exit_code == CFG.exit_codes.unexpected_error
    mock_logger.critical.assert_called_once()


def test_submit_passes_settings_to_driver(program):
    with patch(
        "qsd_lib.submit.cli.SubmissionDriver.run", new=AsyncMock(return_value=0)
    ) as mock_run:
        result = CliRunner().invoke(
            submit,
            [
                str(program),
                "--target",
                "ionq.qpu",
                "--subscription",
                "sub",
                "--resource-group",
                "rg",
                "--workspace",
                "ws",
                "--aad-token",
                "token",
                "--base-uri",
                "https://example.com",
                "--storage",
                "AccountName=acc",
                "--shots",
                "42",
                "--output",
                "id",
                "--dry-run",
                "--arg",
                "n=1",
                "--arg",
                "m=2",
            ],
        )

    assert result.exit_code == 0
    entry_point, arguments, settings = mock_run.call_args.args
    assert entry_point.info.name == "bell"
    assert arguments == ("n=1", "m=2")
    assert settings.target == "ionq.qpu"
    assert settings.subscription == "sub"
    assert settings.resource_group == "rg"
    assert settings.workspace == "ws"
    assert settings.aad_token == "token"
    assert settings.base_uri == "https://example.com"
    assert settings.storage == "AccountName=acc"
    assert settings.shots == 42
    assert str(settings.output) == "id"
    assert settings.dry_run is True


def test_submit_default_settings(program):
    with patch(
        "qsd_lib.submit.cli.SubmissionDriver.run", new=AsyncMock(return_value=0)
    ) as mock_run:
        result = CliRunner().invoke(submit, [str(program), "--target", "nothing"])

    assert result.exit_code == 0
    _, arguments, settings = mock_run.call_args.args
    assert arguments == ()
    assert settings.shots == CFG.targets.default_shots
    assert str(settings.output) == "friendly-uri"
    assert settings.dry_run is False
    assert settings.aad_token is None


@pytest.mark.parametrize(
    "options", [["--output", "json"], ["--shots", "-1"], ["--shots", "many"]]
)
def test_submit_invalid_options_are_usage_errors(program, options):
    result = CliRunner().invoke(submit, [str(program), "--target", "nothing", *options])

    assert result.exit_code == 2
