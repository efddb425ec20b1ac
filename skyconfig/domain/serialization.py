"""Public payload rendering for resolved configurations.

The payload carries the blocks a server hands to plugins and operators. Token
store, log hook, filesystem paths and the plugin registry stay internal.
"""

from __future__ import annotations

from typing import Any, Final

from .models import Configuration

REDACTED_VALUE: Final[str] = "***"


def domain_configuration_to_payload(configuration: Configuration, redact: bool = False) -> dict[str, Any]:
    """Render one configuration into its public JSON-compatible payload.

    Args:
        configuration: Resolved configuration.
        redact: Replace non-empty secret values with a fixed marker.

    Returns:
        dict[str, Any]: Nested payload keyed by public block and field names.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    def _secret(value: str) -> str:
        if redact and value:
            return REDACTED_VALUE
        return value

    app = configuration.app
    asset_store = configuration.asset_store
    return {
        "http": {"host": configuration.http.host},
        "app": {
            "name": app.name,
            "api_key": _secret(app.api_key),
            "master_key": _secret(app.master_key),
            "access_control": app.access_control,
            "dev_mode": app.dev_mode,
            "cors_host": app.cors_host,
            "slave": app.slave,
        },
        "database": {
            "implementation": configuration.database.impl_name,
            "option": _secret(configuration.database.option),
        },
        "asset_store": {
            "implementation": asset_store.impl_name,
            "public": asset_store.public,
            "access_key": _secret(asset_store.access_key),
            "secret_key": _secret(asset_store.secret_key),
            "region": asset_store.region,
            "bucket": asset_store.bucket,
            "cloud_asset_host": asset_store.cloud_asset_host,
            "cloud_asset_token": _secret(asset_store.cloud_asset_token),
            "cloud_asset_public_prefix": asset_store.cloud_asset_public_prefix,
            "cloud_asset_private_prefix": asset_store.cloud_asset_private_prefix,
        },
        "asset_signer": {
            "url_prefix": configuration.asset_url_signer.url_prefix,
            "secret": _secret(configuration.asset_url_signer.secret),
        },
        "apns": {
            "enable": configuration.apns.enable,
            "env": configuration.apns.env,
            "cert": _secret(configuration.apns.cert),
            "key": _secret(configuration.apns.key),
        },
        "gcm": {
            "enable": configuration.gcm.enable,
            "api_key": _secret(configuration.gcm.api_key),
        },
        "log": {},
    }


__all__ = ["REDACTED_VALUE", "domain_configuration_to_payload"]
