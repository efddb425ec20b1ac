"""Typed configuration models produced by resolution.

A `Configuration` is built once by the default builder, mutated in place by the
section readers, and treated as read-only once resolution returns. Every
sub-block is owned by exactly one `Configuration`; nothing is shared.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class HTTPConfig:
    """HTTP bind settings.

    Attributes:
        host: Bind address/port spec such as `:3000` or `127.0.0.1:8080`.
    """

    host: str = ""


@dataclass
class AppConfig:
    """Application identity and access settings.

    Attributes:
        name: Application name; alphanumerics and underscores only.
        api_key: Client API key.
        master_key: Administrative master key.
        access_control: Access-control mode label.
        dev_mode: Whether development mode is active.
        cors_host: CORS host pattern.
        slave: Whether the server runs as a slave instance.
    """

    name: str = ""
    api_key: str = ""
    master_key: str = ""
    access_control: str = ""
    dev_mode: bool = False
    cors_host: str = ""
    slave: bool = False


@dataclass
class DatabaseConfig:
    """Database backend selection.

    Attributes:
        impl_name: Backend implementation name; selects the option syntax.
        option: Backend connection option string.
    """

    impl_name: str = ""
    option: str = ""


@dataclass
class TokenStoreConfig:
    """Access token store settings.

    Attributes:
        impl_name: Token store implementation name.
        path: Filesystem path for file-backed stores.
        prefix: Key prefix for keyed stores.
        expiry: Token lifetime in seconds; 0 means tokens never expire.
        secret: Token signing secret; falls back to the master key.
    """

    impl_name: str = ""
    path: str = ""
    prefix: str = ""
    expiry: int = 0
    secret: str = ""


@dataclass
class AssetStoreConfig:
    """Asset store settings for all backend variants.

    Only the fields of the variant named by `impl_name` have runtime effect.

    Attributes:
        impl_name: Asset store variant: `fs`, `s3` or `cloud`.
        public: Whether stored assets are publicly readable.
        path: Filesystem root (`fs`).
        access_key: Object storage access key (`s3`).
        secret_key: Object storage secret key (`s3`).
        region: Object storage region (`s3`).
        bucket: Object storage bucket (`s3`).
        cloud_asset_host: Cloud gateway host (`cloud`).
        cloud_asset_token: Cloud gateway token (`cloud`).
        cloud_asset_public_prefix: Cloud gateway public URL prefix (`cloud`).
        cloud_asset_private_prefix: Cloud gateway private URL prefix (`cloud`).
    """

    impl_name: str = ""
    public: bool = False
    path: str = ""
    access_key: str = ""
    secret_key: str = ""
    region: str = ""
    bucket: str = ""
    cloud_asset_host: str = ""
    cloud_asset_token: str = ""
    cloud_asset_public_prefix: str = ""
    cloud_asset_private_prefix: str = ""


@dataclass
class AssetURLSignerConfig:
    """Asset URL signing settings.

    Attributes:
        url_prefix: Public URL prefix for served assets.
        secret: URL signing secret.
    """

    url_prefix: str = ""
    secret: str = ""


@dataclass
class APNSConfig:
    """Apple push notification settings.

    Certificate and key may each be given inline or as a filesystem path.

    Attributes:
        enable: Whether APNS delivery is enabled.
        env: Gateway environment: `sandbox` or `production`.
        cert: Inline certificate.
        key: Inline private key.
        cert_path: Certificate file path.
        key_path: Private key file path.
    """

    enable: bool = False
    env: str = ""
    cert: str = ""
    key: str = ""
    cert_path: str = ""
    key_path: str = ""


@dataclass
class GCMConfig:
    """Google cloud messaging settings."""

    enable: bool = False
    api_key: str = ""


@dataclass
class LogConfig:
    """Log level settings.

    Attributes:
        level: Global log level string.
        loggers_level: Per-logger level overrides keyed by lower-cased logger name.
    """

    level: str = ""
    loggers_level: dict[str, str] = field(default_factory=dict)


@dataclass
class LogHookConfig:
    """Error-reporting hook settings.

    Attributes:
        sentry_dsn: Error-reporting endpoint.
        sentry_level: Minimum level forwarded to the endpoint.
    """

    sentry_dsn: str = ""
    sentry_level: str = ""

    @property
    def enabled(self) -> bool:
        """Return whether both endpoint and level are supplied.

        Returns:
            bool: True when the hook should be installed.
        """

        return bool(self.sentry_dsn) and bool(self.sentry_level)


@dataclass
class PluginConfig:
    """One plugin registry entry.

    Attributes:
        transport: Plugin transport kind.
        path: Plugin executable path.
        args: Ordered plugin arguments.
    """

    transport: str = ""
    path: str = ""
    args: list[str] = field(default_factory=list)


@dataclass
class Configuration:
    """Root configuration aggregate for one server process."""

    http: HTTPConfig = field(default_factory=HTTPConfig)
    app: AppConfig = field(default_factory=AppConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    token_store: TokenStoreConfig = field(default_factory=TokenStoreConfig)
    asset_store: AssetStoreConfig = field(default_factory=AssetStoreConfig)
    asset_url_signer: AssetURLSignerConfig = field(default_factory=AssetURLSignerConfig)
    apns: APNSConfig = field(default_factory=APNSConfig)
    gcm: GCMConfig = field(default_factory=GCMConfig)
    log: LogConfig = field(default_factory=LogConfig)
    log_hook: LogHookConfig = field(default_factory=LogHookConfig)
    plugins: dict[str, PluginConfig] = field(default_factory=dict)
