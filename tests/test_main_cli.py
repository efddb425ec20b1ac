"""Tests for the command-line entrypoint."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from skyconfig.main import main

_SERVER_VARIABLES = (
    "APP_NAME",
    "API_KEY",
    "MASTER_KEY",
    "APNS_ENABLE",
    "HOST",
    "LOG_LEVEL",
    "SENTRY_DSN",
    "SENTRY_LEVEL",
    "SKYCONFIG_ENV_FILE",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear server variables and restore the root logger level."""

    for name in _SERVER_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    root_level = logging.getLogger().level
    yield
    logging.getLogger().setLevel(root_level)


def test_main_check_exits_with_error_for_invalid_configuration(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Exit with status 1 and report the first violation.

    Args:
        tmp_path: Pytest temporary directory fixture.
        capsys: Pytest output capture fixture.

    Returns:
        None: Assertions validate failure exit.

    Raises:
        AssertionError: Raised when invalid configuration passes.
    """

    with pytest.raises(SystemExit) as exit_info:
        main(["check", "--env-file", str(tmp_path / "absent.env")])

    assert exit_info.value.code == 1
    assert "API_KEY is not set" in capsys.readouterr().err


def test_main_check_reports_valid_configuration(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Print a confirmation for a valid configuration.

    Args:
        tmp_path: Pytest temporary directory fixture.
        capsys: Pytest output capture fixture.

    Returns:
        None: Assertions validate success output.

    Raises:
        AssertionError: Raised when valid configuration fails.
    """

    declarations_path = tmp_path / ".env"
    declarations_path.write_text("APP_NAME=demo\nAPI_KEY=api\nMASTER_KEY=master\nHOST=:8080\n", encoding="utf-8")

    main(["check", "--env-file", str(declarations_path)])

    output = capsys.readouterr().out
    assert "Configuration valid for app 'demo' on :8080" in output
    assert "Error-reporting hook disabled" in output


def test_main_show_prints_redacted_payload(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Print the public payload with secrets masked.

    Args:
        tmp_path: Pytest temporary directory fixture.
        capsys: Pytest output capture fixture.

    Returns:
        None: Assertions validate JSON output.

    Raises:
        AssertionError: Raised when output is malformed or leaks secrets.
    """

    declarations_path = tmp_path / ".env"
    declarations_path.write_text("APP_NAME=demo\nMASTER_KEY=master\n", encoding="utf-8")

    main(["show", "--env-file", str(declarations_path), "--redact"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["app"]["name"] == "demo"
    assert payload["app"]["master_key"] == "***"
    assert payload["app"]["api_key"] == ""


def test_main_show_with_keys_generates_keys(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Start from generated keys when requested.

    Args:
        tmp_path: Pytest temporary directory fixture.
        capsys: Pytest output capture fixture.

    Returns:
        None: Assertions validate generated keys in output.

    Raises:
        AssertionError: Raised when keys are missing.
    """

    main(["show", "--env-file", str(tmp_path / "absent.env"), "--with-keys"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["app"]["api_key"]
    assert payload["app"]["master_key"]
    assert payload["app"]["api_key"] != payload["app"]["master_key"]


def test_main_check_keeps_cli_root_level_and_reports_hook(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Keep the CLI root log level and report an enabled error-reporting hook.

    Args:
        tmp_path: Pytest temporary directory fixture.
        monkeypatch: Pytest monkeypatch fixture.
        capsys: Pytest output capture fixture.

    Returns:
        None: Assertions validate root level and hook output.

    Raises:
        AssertionError: Raised when resolved LOG_LEVEL overrides the CLI level.
    """

    monkeypatch.setenv("SKYCONFIG_LOG_LEVEL", "WARNING")
    monkeypatch.delenv("SENTRY_DSN", raising=False)
    monkeypatch.delenv("SENTRY_LEVEL", raising=False)
    logging.getLogger().setLevel(logging.WARNING)
    declarations_path = tmp_path / ".env"
    declarations_path.write_text(
        "APP_NAME=demo\nAPI_KEY=api\nMASTER_KEY=master\nLOG_LEVEL=debug\n"
        "SENTRY_DSN=https://key@sentry.example.com/1\nSENTRY_LEVEL=error\n",
        encoding="utf-8",
    )

    main(["check", "--env-file", str(declarations_path)])

    assert logging.getLogger().level == logging.WARNING
    assert "Error-reporting hook enabled" in capsys.readouterr().out
