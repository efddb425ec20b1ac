"""Domain models, coercion helpers and errors shared across configuration layers."""

from .coercion import domain_parse_bool, domain_parse_int64
from .errors import (
	BooleanParseError,
	ConfigurationError,
	ConfigurationParseError,
	ConfigurationValidationError,
	DeclarationsFileError,
	IntegerParseError,
	ValidationRule,
)
from .keys import KeySourcePort, SequenceKeySource, UUIDKeySource
from .models import (
	APNSConfig,
	AppConfig,
	AssetStoreConfig,
	AssetURLSignerConfig,
	Configuration,
	DatabaseConfig,
	GCMConfig,
	HTTPConfig,
	LogConfig,
	LogHookConfig,
	PluginConfig,
	TokenStoreConfig,
)
from .serialization import REDACTED_VALUE, domain_configuration_to_payload

__all__ = [
	"APNSConfig",
	"AppConfig",
	"AssetStoreConfig",
	"AssetURLSignerConfig",
	"BooleanParseError",
	"Configuration",
	"ConfigurationError",
	"ConfigurationParseError",
	"ConfigurationValidationError",
	"DatabaseConfig",
	"DeclarationsFileError",
	"GCMConfig",
	"HTTPConfig",
	"IntegerParseError",
	"KeySourcePort",
	"LogConfig",
	"LogHookConfig",
	"PluginConfig",
	"REDACTED_VALUE",
	"SequenceKeySource",
	"TokenStoreConfig",
	"UUIDKeySource",
	"ValidationRule",
	"domain_configuration_to_payload",
	"domain_parse_bool",
	"domain_parse_int64",
]
