"""Tests for startup bootstrap wiring."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from skyconfig.bootstrap import bootstrap_configure_logging, bootstrap_load_configuration, bootstrap_resolve_level
from skyconfig.config import ResolverSettings, SettingsLoadError, config_build_default, config_load_resolver_settings
from skyconfig.domain import ConfigurationValidationError


@pytest.fixture
def restore_logger_levels() -> Iterator[None]:
    """Restore logger levels touched by bootstrap tests."""

    names = ["", "db", "plugin", "router"]
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


def test_bootstrap_resolve_level_maps_known_names() -> None:
    """Map configured level strings to logging levels case-insensitively.

    Returns:
        None: Assertions validate level mapping.

    Raises:
        AssertionError: Raised when a level maps incorrectly.
    """

    assert bootstrap_resolve_level("debug") == logging.DEBUG
    assert bootstrap_resolve_level("WARN") == logging.WARNING
    assert bootstrap_resolve_level("panic") == logging.CRITICAL
    assert bootstrap_resolve_level("loud") is None


def test_bootstrap_configure_logging_applies_levels(
    restore_logger_levels: None,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Apply root and per-logger levels and skip unknown level strings.

    Args:
        restore_logger_levels: Fixture restoring logger levels.
        caplog: Pytest log capture fixture.

    Returns:
        None: Assertions validate applied levels.

    Raises:
        AssertionError: Raised when levels are not applied.
    """

    configuration = config_build_default()
    configuration.log.level = "error"
    configuration.log.loggers_level.update({"db": "warn", "router": "loud"})

    with caplog.at_level(logging.WARNING, logger="skyconfig.bootstrap"):
        bootstrap_configure_logging(configuration)

    assert logging.getLogger().level == logging.ERROR
    assert logging.getLogger("plugin").level == logging.INFO
    assert logging.getLogger("db").level == logging.WARNING
    assert "Unknown log level 'loud' for logger 'router'" in caplog.text


def test_bootstrap_load_configuration_validates_resolved_configuration(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    restore_logger_levels: None,
) -> None:
    """Resolve from the configured declarations file and validate the result.

    Args:
        tmp_path: Pytest temporary directory fixture.
        monkeypatch: Pytest monkeypatch fixture.
        restore_logger_levels: Fixture restoring logger levels.

    Returns:
        None: Assertions validate bootstrap resolution.

    Raises:
        AssertionError: Raised when bootstrap resolution is incorrect.
    """

    for name in ("APP_NAME", "API_KEY", "MASTER_KEY", "APNS_ENABLE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    declarations_path = tmp_path / ".env"
    declarations_path.write_text("APP_NAME=demo\nAPI_KEY=api\nMASTER_KEY=master\n", encoding="utf-8")

    configuration = bootstrap_load_configuration(ResolverSettings(env_file=str(declarations_path)))

    assert configuration.app.name == "demo"
    assert configuration.token_store.secret == "master"


def test_bootstrap_load_configuration_raises_first_violation(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Surface the first validation failure to the caller.

    Args:
        tmp_path: Pytest temporary directory fixture.
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate failure propagation.

    Raises:
        AssertionError: Raised when invalid configuration is accepted.
    """

    for name in ("APP_NAME", "API_KEY", "APNS_ENABLE"):
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(ConfigurationValidationError, match="API_KEY is not set"):
        bootstrap_load_configuration(ResolverSettings(env_file=str(tmp_path / "absent.env")))


def test_bootstrap_load_configuration_logs_malformed_values_when_enabled(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
    restore_logger_levels: None,
) -> None:
    """Log malformed flags when parse error reporting is enabled.

    Args:
        tmp_path: Pytest temporary directory fixture.
        monkeypatch: Pytest monkeypatch fixture.
        caplog: Pytest log capture fixture.
        restore_logger_levels: Fixture restoring logger levels.

    Returns:
        None: Assertions validate diagnostics without semantic change.

    Raises:
        AssertionError: Raised when diagnostics are missing.
    """

    monkeypatch.setenv("APP_NAME", "demo")
    monkeypatch.setenv("API_KEY", "api")
    monkeypatch.setenv("MASTER_KEY", "master")
    monkeypatch.setenv("DEV_MODE", "sometimes")
    monkeypatch.delenv("APNS_ENABLE", raising=False)

    with caplog.at_level(logging.WARNING, logger="skyconfig.bootstrap"):
        configuration = bootstrap_load_configuration(
            ResolverSettings(env_file=str(tmp_path / "absent.env"), report_parse_errors=True)
        )

    assert configuration.app.dev_mode is True
    assert "Ignoring DEV_MODE" in caplog.text


def test_config_load_resolver_settings_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read SKYCONFIG_* variables and wrap validation failures.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate resolver settings loading.

    Raises:
        AssertionError: Raised when settings load incorrectly.
    """

    monkeypatch.setenv("SKYCONFIG_ENV_FILE", "/etc/server.env")
    monkeypatch.setenv("SKYCONFIG_LOG_LEVEL", "debug")

    settings = config_load_resolver_settings()
    assert settings.env_file == "/etc/server.env"
    assert settings.log_level == "DEBUG"
    assert settings.report_parse_errors is False

    monkeypatch.setenv("SKYCONFIG_LOG_LEVEL", "verbose")
    with pytest.raises(SettingsLoadError, match="Resolver settings validation failed"):
        config_load_resolver_settings()


def test_bootstrap_configure_logging_can_leave_root_logger_untouched(restore_logger_levels: None) -> None:
    """Apply per-logger levels only when root configuration is disabled.

    Args:
        restore_logger_levels: Fixture restoring logger levels.

    Returns:
        None: Assertions validate root level is preserved.

    Raises:
        AssertionError: Raised when the root level is overwritten.
    """

    logging.getLogger().setLevel(logging.WARNING)
    configuration = config_build_default()
    configuration.log.loggers_level["db"] = "error"

    bootstrap_configure_logging(configuration, configure_root_logger=False)

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("db").level == logging.ERROR
