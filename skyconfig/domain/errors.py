"""Project-native typed exceptions for configuration resolution failures."""

from __future__ import annotations

from enum import Enum


class ConfigurationError(Exception):
    """Base exception for configuration resolution and validation failures."""


class ConfigurationParseError(ConfigurationError, ValueError):
    """Scalar coercion failure for one environment value.

    Attributes:
        value: Raw text that could not be coerced.
    """

    def __init__(self, message: str, value: str):
        super().__init__(message)
        self.value = value


class BooleanParseError(ConfigurationParseError):
    """Value is outside the extended boolean vocabulary."""


class IntegerParseError(ConfigurationParseError):
    """Value is not a base-10 signed 64-bit integer."""


class DeclarationsFileError(ConfigurationError, OSError):
    """Declarations file could not be read or parsed.

    Attributes:
        path: Declarations file path that failed to load.
    """

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path


class ValidationRule(str, Enum):
    """Validation rules in evaluation order."""

    APP_NAME_MISSING = "app_name_missing"
    API_KEY_MISSING = "api_key_missing"
    MASTER_KEY_MISSING = "master_key_missing"
    APP_NAME_INVALID = "app_name_invalid"
    APNS_ENV_INVALID = "apns_env_invalid"


class ConfigurationValidationError(ConfigurationError, ValueError):
    """Resolved configuration violates a structural rule.

    Attributes:
        rule: First violated validation rule.
        value: Offending value when the rule inspects one, else None.
    """

    def __init__(self, message: str, rule: ValidationRule, value: str | None = None):
        super().__init__(message)
        self.rule = rule
        self.value = value
