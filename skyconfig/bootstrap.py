"""Startup wiring: resolve, validate and apply configured log levels."""

from __future__ import annotations

import logging
from typing import Final

from skyconfig.config import (
    ResolverSettings,
    config_load_resolver_settings,
    config_resolve,
    config_validate,
)
from skyconfig.domain import Configuration, ConfigurationParseError

logger = logging.getLogger(__name__)

_BOOTSTRAP_LEVEL_NAMES: Final[dict[str, int]] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "panic": logging.CRITICAL,
}


def bootstrap_log_parse_error(name: str, error: ConfigurationParseError) -> None:
    """Log one malformed environment value that resolution ignored.

    Args:
        name: Environment variable name.
        error: Coercion failure for the variable value.

    Returns:
        None: Logs as side effect.
    """

    logger.warning("Ignoring %s: %s", name, error)


def bootstrap_resolve_level(level_name: str) -> int | None:
    """Map one configured level string to a `logging` level.

    Args:
        level_name: Level string such as `debug` or `WARN`.

    Returns:
        int | None: Logging level, or None for an unknown level string.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return _BOOTSTRAP_LEVEL_NAMES.get(level_name.strip().lower())


def bootstrap_configure_logging(configuration: Configuration, configure_root_logger: bool = True) -> None:
    """Apply the global level and per-logger overrides to `logging`.

    Unknown level strings are logged and skipped.

    Args:
        configuration: Resolved configuration.
        configure_root_logger: Apply the global level to the root logger.

    Returns:
        None: Updates logger levels as side effect.
    """

    if configure_root_logger:
        root_level = bootstrap_resolve_level(configuration.log.level)
        if root_level is None:
            logger.warning("Unknown log level %r for root logger", configuration.log.level)
        else:
            logging.getLogger().setLevel(root_level)

    for logger_name, level_name in configuration.log.loggers_level.items():
        logger_level = bootstrap_resolve_level(level_name)
        if logger_level is None:
            logger.warning("Unknown log level %r for logger %r", level_name, logger_name)
            continue
        logging.getLogger(logger_name).setLevel(logger_level)


def bootstrap_load_configuration(
    settings: ResolverSettings | None = None,
    configure_root_logger: bool = True,
) -> Configuration:
    """Resolve and validate the startup configuration.

    Args:
        settings: Resolver settings; loaded from the environment when omitted.
        configure_root_logger: Apply the resolved global level to the root logger.
            Command-line callers pass False to keep `SKYCONFIG_LOG_LEVEL`.

    Returns:
        Configuration: Validated configuration with log levels applied.

    Raises:
        SettingsLoadError: Raised when resolver settings are invalid.
        ConfigurationValidationError: Raised when the resolved configuration is invalid.
    """

    resolver_settings = settings or config_load_resolver_settings()
    on_parse_error = bootstrap_log_parse_error if resolver_settings.report_parse_errors else None
    configuration = config_resolve(dotenv_path=resolver_settings.env_file, on_parse_error=on_parse_error)
    config_validate(configuration)
    bootstrap_configure_logging(configuration, configure_root_logger=configure_root_logger)
    return configuration
