"""Baseline configuration values applied before any external input."""

from __future__ import annotations

from typing import Final

from skyconfig.domain import Configuration, KeySourcePort, UUIDKeySource

DEFAULT_HTTP_HOST: Final[str] = ":3000"
DEFAULT_APP_NAME: Final[str] = "myapp"
DEFAULT_DATABASE_IMPL_NAME: Final[str] = "pq"
DEFAULT_DATABASE_OPTION: Final[str] = "postgres://postgres:@localhost/postgres?sslmode=disable"
DEFAULT_ASSET_URL_PREFIX: Final[str] = "http://localhost:3000/files"


def config_build_default() -> Configuration:
    """Build a configuration populated with hard-coded baseline values.

    Returns:
        Configuration: Fresh configuration; keys are left empty.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    configuration = Configuration()
    configuration.http.host = DEFAULT_HTTP_HOST
    configuration.app.name = DEFAULT_APP_NAME
    configuration.app.access_control = "role"
    configuration.app.dev_mode = True
    configuration.app.cors_host = "*"
    configuration.app.slave = False
    configuration.database.impl_name = DEFAULT_DATABASE_IMPL_NAME
    configuration.database.option = DEFAULT_DATABASE_OPTION
    configuration.token_store.impl_name = "fs"
    configuration.token_store.path = "data/token"
    configuration.token_store.expiry = 0
    configuration.asset_store.impl_name = "fs"
    configuration.asset_store.path = "data/asset"
    configuration.asset_url_signer.url_prefix = DEFAULT_ASSET_URL_PREFIX
    configuration.apns.enable = False
    configuration.apns.env = "sandbox"
    configuration.gcm.enable = False
    configuration.log.level = "debug"
    configuration.log.loggers_level = {"plugin": "info"}
    configuration.plugins = {}
    return configuration


def config_build_default_with_keys(key_source: KeySourcePort | None = None) -> Configuration:
    """Build a baseline configuration with freshly generated API and master keys.

    Args:
        key_source: Identifier source; defaults to random UUIDs.

    Returns:
        Configuration: Baseline configuration with both keys populated.

    Raises:
        RuntimeError: Raised when the key source cannot produce identifiers.
    """

    source = key_source or UUIDKeySource()
    configuration = config_build_default()
    configuration.app.api_key = source.key_next_identifier()
    configuration.app.master_key = source.key_next_identifier()
    return configuration


__all__ = [
    "DEFAULT_APP_NAME",
    "DEFAULT_ASSET_URL_PREFIX",
    "DEFAULT_DATABASE_IMPL_NAME",
    "DEFAULT_DATABASE_OPTION",
    "DEFAULT_HTTP_HOST",
    "config_build_default",
    "config_build_default_with_keys",
]
