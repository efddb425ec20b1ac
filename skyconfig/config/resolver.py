"""Resolution orchestrator combining defaults, declarations file and environment."""

from __future__ import annotations

import os

from skyconfig.domain import Configuration

from .defaults import config_build_default
from .environment import DEFAULT_DECLARATIONS_FILE, EnvironmentSource, config_environment_from_process
from .readers import (
    ParseErrorCallback,
    config_read_apns,
    config_read_app,
    config_read_asset_store,
    config_read_database,
    config_read_gcm,
    config_read_host,
    config_read_log,
    config_read_plugins,
    config_read_token_store,
)


def config_resolve_environment(
    environment: EnvironmentSource,
    configuration: Configuration | None = None,
    on_parse_error: ParseErrorCallback | None = None,
) -> Configuration:
    """Resolve a configuration from one environment snapshot.

    Readers run in a fixed order: host, app scalars, database, token store,
    asset store, APNS, GCM, log, plugins. The token store reader depends on the
    app master key, which is final once the app reader has run.

    Args:
        environment: Environment snapshot to read from.
        configuration: Configuration to overlay; defaults to a fresh baseline.
        on_parse_error: Optional diagnostic callback for malformed flags and integers.

    Returns:
        Configuration: Resolved configuration.

    Raises:
        RuntimeError: This function does not raise runtime errors.
    """

    resolved = configuration if configuration is not None else config_build_default()
    config_read_host(resolved, environment)
    config_read_app(resolved, environment, on_parse_error)
    config_read_database(resolved, environment)
    config_read_token_store(resolved, environment, on_parse_error)
    config_read_asset_store(resolved, environment, on_parse_error)
    config_read_apns(resolved, environment, on_parse_error)
    config_read_gcm(resolved, environment, on_parse_error)
    config_read_log(resolved, environment)
    config_read_plugins(resolved, environment)
    return resolved


def config_resolve(
    dotenv_path: str | os.PathLike[str] | None = DEFAULT_DECLARATIONS_FILE,
    configuration: Configuration | None = None,
    on_parse_error: ParseErrorCallback | None = None,
) -> Configuration:
    """Resolve a configuration from the declarations file and process environment.

    A missing or unreadable declarations file is logged and resolution
    continues with the process environment alone.

    Args:
        dotenv_path: Declarations file path, or None to skip file loading.
        configuration: Configuration to overlay; defaults to a fresh baseline.
        on_parse_error: Optional diagnostic callback for malformed flags and integers.

    Returns:
        Configuration: Resolved configuration.

    Raises:
        RuntimeError: This function does not raise runtime errors.
    """

    environment = config_environment_from_process(dotenv_path=dotenv_path)
    return config_resolve_environment(environment, configuration=configuration, on_parse_error=on_parse_error)


__all__ = ["config_resolve", "config_resolve_environment"]
