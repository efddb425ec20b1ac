"""Section readers overlaying environment values onto a configuration.

Every reader mutates and returns the configuration it receives. Shared policy:
an empty or unset variable never overwrites an existing value, and a boolean or
integer that fails to parse keeps the prior value. Parse failures of non-empty
values are reported through the optional `on_parse_error` callback and never
change resolution results.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from skyconfig.domain import (
    Configuration,
    ConfigurationParseError,
    PluginConfig,
    domain_parse_bool,
    domain_parse_int64,
)

from .environment import EnvironmentSource

ParseErrorCallback = Callable[[str, ConfigurationParseError], None]

LOG_LEVEL_PREFIX: Final[str] = "LOG_LEVEL_"
DEFAULT_RELATIONAL_IMPL_NAME: Final[str] = "pq"
PLUGIN_VARIABLE_SUFFIXES: Final[tuple[str, ...]] = ("TRANSPORT", "PATH", "ARGS")


def _config_read_text(environment: EnvironmentSource, name: str, current: str) -> str:
    value = environment.environment_get(name)
    return value if value else current


def _config_read_bool(
    environment: EnvironmentSource,
    name: str,
    current: bool,
    on_parse_error: ParseErrorCallback | None,
) -> bool:
    value = environment.environment_get(name)
    try:
        return domain_parse_bool(value)
    except ConfigurationParseError as error:
        if value and on_parse_error is not None:
            on_parse_error(name, error)
        return current


def _config_read_int(
    environment: EnvironmentSource,
    name: str,
    current: int,
    on_parse_error: ParseErrorCallback | None,
) -> int:
    value = environment.environment_get(name)
    try:
        return domain_parse_int64(value)
    except ConfigurationParseError as error:
        if value and on_parse_error is not None:
            on_parse_error(name, error)
        return current


def config_read_host(configuration: Configuration, environment: EnvironmentSource) -> Configuration:
    """Overlay the HTTP bind spec.

    `HOST` wins. `PORT` composes `:<port>` only when the bind spec is still
    empty after `HOST` is considered, so the built-in `:3000` default is kept
    when neither is set.

    Args:
        configuration: In-progress configuration.
        environment: Environment snapshot.

    Returns:
        Configuration: The same configuration instance.
    """

    configuration.http.host = _config_read_text(environment, "HOST", configuration.http.host)
    if not configuration.http.host:
        port = environment.environment_get("PORT")
        if port:
            configuration.http.host = ":" + port
    return configuration


def config_read_app(
    configuration: Configuration,
    environment: EnvironmentSource,
    on_parse_error: ParseErrorCallback | None = None,
) -> Configuration:
    """Overlay application scalar fields.

    Args:
        configuration: In-progress configuration.
        environment: Environment snapshot.
        on_parse_error: Optional diagnostic callback for malformed flags.

    Returns:
        Configuration: The same configuration instance.
    """

    app = configuration.app
    app.api_key = _config_read_text(environment, "API_KEY", app.api_key)
    app.master_key = _config_read_text(environment, "MASTER_KEY", app.master_key)
    app.name = _config_read_text(environment, "APP_NAME", app.name)
    app.cors_host = _config_read_text(environment, "CORS_HOST", app.cors_host)
    # Variable name is misspelled in deployed environments; keep it.
    app.access_control = _config_read_text(environment, "ACCESS_CONRTOL", app.access_control)
    app.dev_mode = _config_read_bool(environment, "DEV_MODE", app.dev_mode, on_parse_error)
    app.slave = _config_read_bool(environment, "SLAVE", app.slave, on_parse_error)
    return configuration


def config_read_database(configuration: Configuration, environment: EnvironmentSource) -> Configuration:
    """Overlay database implementation and connection option.

    `DATABASE_URL` applies only when the resolved implementation is the
    default relational backend.

    Args:
        configuration: In-progress configuration.
        environment: Environment snapshot.

    Returns:
        Configuration: The same configuration instance.
    """

    database = configuration.database
    database.impl_name = _config_read_text(environment, "DB_IMPL_NAME", database.impl_name)
    if database.impl_name == DEFAULT_RELATIONAL_IMPL_NAME:
        database.option = _config_read_text(environment, "DATABASE_URL", database.option)
    return configuration


def config_read_token_store(
    configuration: Configuration,
    environment: EnvironmentSource,
    on_parse_error: ParseErrorCallback | None = None,
) -> Configuration:
    """Overlay token store settings.

    Precondition: `configuration.app.master_key` is final. When
    `TOKEN_STORE_SECRET` is empty the secret is set to the master key, so this
    reader must run after `config_read_app`.

    Args:
        configuration: In-progress configuration.
        environment: Environment snapshot.
        on_parse_error: Optional diagnostic callback for a malformed expiry.

    Returns:
        Configuration: The same configuration instance.
    """

    token_store = configuration.token_store
    token_store.impl_name = _config_read_text(environment, "TOKEN_STORE", token_store.impl_name)
    token_store.path = _config_read_text(environment, "TOKEN_STORE_PATH", token_store.path)
    token_store.prefix = _config_read_text(environment, "TOKEN_STORE_PREFIX", token_store.prefix)
    token_store.expiry = _config_read_int(environment, "TOKEN_STORE_EXPIRY", token_store.expiry, on_parse_error)

    secret = environment.environment_get("TOKEN_STORE_SECRET")
    token_store.secret = secret if secret else configuration.app.master_key
    return configuration


def config_read_asset_store(
    configuration: Configuration,
    environment: EnvironmentSource,
    on_parse_error: ParseErrorCallback | None = None,
) -> Configuration:
    """Overlay asset store and URL signer settings.

    Fields of all three variants are read regardless of the selected
    implementation.

    Args:
        configuration: In-progress configuration.
        environment: Environment snapshot.
        on_parse_error: Optional diagnostic callback for a malformed public flag.

    Returns:
        Configuration: The same configuration instance.
    """

    asset_store = configuration.asset_store
    signer = configuration.asset_url_signer
    asset_store.impl_name = _config_read_text(environment, "ASSET_STORE", asset_store.impl_name)
    asset_store.public = _config_read_bool(environment, "ASSET_STORE_PUBLIC", asset_store.public, on_parse_error)

    # fs
    asset_store.path = _config_read_text(environment, "ASSET_STORE_PATH", asset_store.path)
    signer.url_prefix = _config_read_text(environment, "ASSET_STORE_URL_PREFIX", signer.url_prefix)
    signer.secret = _config_read_text(environment, "ASSET_STORE_SECRET", signer.secret)

    # s3
    asset_store.access_key = _config_read_text(environment, "ASSET_STORE_ACCESS_KEY", asset_store.access_key)
    asset_store.secret_key = _config_read_text(environment, "ASSET_STORE_SECRET_KEY", asset_store.secret_key)
    asset_store.region = _config_read_text(environment, "ASSET_STORE_REGION", asset_store.region)
    asset_store.bucket = _config_read_text(environment, "ASSET_STORE_BUCKET", asset_store.bucket)

    # cloud
    asset_store.cloud_asset_host = _config_read_text(environment, "CLOUD_ASSET_HOST", asset_store.cloud_asset_host)
    asset_store.cloud_asset_token = _config_read_text(environment, "CLOUD_ASSET_TOKEN", asset_store.cloud_asset_token)
    asset_store.cloud_asset_public_prefix = _config_read_text(
        environment, "CLOUD_ASSET_PUBLIC_PREFIX", asset_store.cloud_asset_public_prefix
    )
    asset_store.cloud_asset_private_prefix = _config_read_text(
        environment, "CLOUD_ASSET_PRIVATE_PREFIX", asset_store.cloud_asset_private_prefix
    )
    return configuration


def config_read_apns(
    configuration: Configuration,
    environment: EnvironmentSource,
    on_parse_error: ParseErrorCallback | None = None,
) -> Configuration:
    """Overlay APNS settings.

    When the enable flag is false after `APNS_ENABLE` is considered, no other
    APNS variable is read.

    Args:
        configuration: In-progress configuration.
        environment: Environment snapshot.
        on_parse_error: Optional diagnostic callback for a malformed enable flag.

    Returns:
        Configuration: The same configuration instance.
    """

    apns = configuration.apns
    apns.enable = _config_read_bool(environment, "APNS_ENABLE", apns.enable, on_parse_error)
    if not apns.enable:
        return configuration

    apns.env = _config_read_text(environment, "APNS_ENV", apns.env)
    apns.cert = _config_read_text(environment, "APNS_CERTIFICATE", apns.cert)
    apns.key = _config_read_text(environment, "APNS_PRIVATE_KEY", apns.key)
    apns.cert_path = _config_read_text(environment, "APNS_CERTIFICATE_PATH", apns.cert_path)
    apns.key_path = _config_read_text(environment, "APNS_PRIVATE_KEY_PATH", apns.key_path)
    return configuration


def config_read_gcm(
    configuration: Configuration,
    environment: EnvironmentSource,
    on_parse_error: ParseErrorCallback | None = None,
) -> Configuration:
    """Overlay GCM settings; the API key is read even while disabled."""

    gcm = configuration.gcm
    gcm.enable = _config_read_bool(environment, "GCM_ENABLE", gcm.enable, on_parse_error)
    gcm.api_key = _config_read_text(environment, "GCM_APIKEY", gcm.api_key)
    return configuration


def config_read_log(configuration: Configuration, environment: EnvironmentSource) -> Configuration:
    """Overlay log levels and the error-reporting hook.

    Every `LOG_LEVEL_<NAME>` entry with a non-empty value sets the level of the
    logger `<name>` (lower-cased). Seeded entries are overwritten, never removed.

    Args:
        configuration: In-progress configuration.
        environment: Environment snapshot.

    Returns:
        Configuration: The same configuration instance.
    """

    log = configuration.log
    log.level = _config_read_text(environment, "LOG_LEVEL", log.level)
    log.loggers_level.update(config_scan_logger_levels(environment))

    log_hook = configuration.log_hook
    log_hook.sentry_dsn = _config_read_text(environment, "SENTRY_DSN", log_hook.sentry_dsn)
    log_hook.sentry_level = _config_read_text(environment, "SENTRY_LEVEL", log_hook.sentry_level)
    return configuration


def config_scan_logger_levels(environment: EnvironmentSource) -> dict[str, str]:
    """Collect per-logger levels from prefixed environment entries.

    Args:
        environment: Environment snapshot.

    Returns:
        dict[str, str]: Level strings keyed by lower-cased logger name.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        logger_name.lower(): level
        for logger_name, level in environment.environment_scan_prefix(LOG_LEVEL_PREFIX)
        if level
    }


def config_read_plugins(configuration: Configuration, environment: EnvironmentSource) -> Configuration:
    """Populate the plugin registry from the `PLUGINS` name list.

    Names are split on commas exactly, without trimming or de-duplication.
    Each listed name gets an entry even when none of its own variables are set.

    Args:
        configuration: In-progress configuration.
        environment: Environment snapshot.

    Returns:
        Configuration: The same configuration instance.
    """

    plugin_names = environment.environment_get("PLUGINS")
    if not plugin_names:
        return configuration

    for plugin_name in plugin_names.split(","):
        configuration.plugins[plugin_name] = config_read_plugin_entry(environment, plugin_name)
    return configuration


def config_read_plugin_entry(environment: EnvironmentSource, plugin_name: str) -> PluginConfig:
    """Build one plugin entry from its name-namespaced variables.

    Args:
        environment: Environment snapshot.
        plugin_name: Plugin name as listed in `PLUGINS`.

    Returns:
        PluginConfig: Entry with empty fields for unset variables.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    transport, path, args = (
        _config_read_plugin_variable(environment, plugin_name, suffix) for suffix in PLUGIN_VARIABLE_SUFFIXES
    )
    return PluginConfig(transport=transport, path=path, args=args.split(",") if args else [])


def _config_read_plugin_variable(environment: EnvironmentSource, plugin_name: str, suffix: str) -> str:
    # Exact spelling first, then the conventional upper-case variable name.
    value = environment.environment_get(f"{plugin_name}_{suffix}")
    if value:
        return value
    return environment.environment_get(f"{plugin_name.upper()}_{suffix}")


__all__ = [
    "LOG_LEVEL_PREFIX",
    "ParseErrorCallback",
    "config_read_apns",
    "config_read_app",
    "config_read_asset_store",
    "config_read_database",
    "config_read_gcm",
    "config_read_host",
    "config_read_log",
    "config_read_plugin_entry",
    "config_read_plugins",
    "config_read_token_store",
    "config_scan_logger_levels",
]
