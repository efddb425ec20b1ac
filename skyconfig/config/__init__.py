"""Configuration package for layered resolution and startup validation."""

from .defaults import config_build_default, config_build_default_with_keys
from .environment import (
	DEFAULT_DECLARATIONS_FILE,
	EnvironmentSource,
	config_environment_from_process,
	config_load_declarations_file,
)
from .readers import (
	ParseErrorCallback,
	config_read_apns,
	config_read_app,
	config_read_asset_store,
	config_read_database,
	config_read_gcm,
	config_read_host,
	config_read_log,
	config_read_plugin_entry,
	config_read_plugins,
	config_read_token_store,
	config_scan_logger_levels,
)
from .resolver import config_resolve, config_resolve_environment
from .settings import ResolverSettings, SettingsLoadError, config_load_resolver_settings
from .validation import config_find_violation, config_validate

__all__ = [
	"DEFAULT_DECLARATIONS_FILE",
	"EnvironmentSource",
	"ParseErrorCallback",
	"ResolverSettings",
	"SettingsLoadError",
	"config_build_default",
	"config_build_default_with_keys",
	"config_environment_from_process",
	"config_find_violation",
	"config_load_declarations_file",
	"config_load_resolver_settings",
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
	"config_resolve",
	"config_resolve_environment",
	"config_scan_logger_levels",
	"config_validate",
]
