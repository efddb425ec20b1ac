"""Fail-fast structural validation of resolved configurations."""

from __future__ import annotations

import re
from typing import Final

from skyconfig.domain import Configuration, ConfigurationValidationError, ValidationRule

_CONFIG_APP_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_]+")
APNS_ENVIRONMENTS: Final[frozenset[str]] = frozenset({"sandbox", "production"})


def config_find_violation(configuration: Configuration) -> ConfigurationValidationError | None:
    """Return the first violated validation rule.

    Rules are evaluated in order: app name set, API key set, master key set,
    app name characters, APNS environment when APNS is enabled. The
    configuration is never modified.

    Args:
        configuration: Resolved configuration.

    Returns:
        ConfigurationValidationError | None: First violation, or None when valid.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    app = configuration.app
    if not app.name:
        return ConfigurationValidationError("APP_NAME is not set", rule=ValidationRule.APP_NAME_MISSING)
    if not app.api_key:
        return ConfigurationValidationError("API_KEY is not set", rule=ValidationRule.API_KEY_MISSING)
    if not app.master_key:
        return ConfigurationValidationError("MASTER_KEY is not set", rule=ValidationRule.MASTER_KEY_MISSING)
    if not _CONFIG_APP_NAME_PATTERN.fullmatch(app.name):
        return ConfigurationValidationError(
            f"APP_NAME '{app.name}' contains invalid characters other than alphanumerics or underscores",
            rule=ValidationRule.APP_NAME_INVALID,
            value=app.name,
        )
    if configuration.apns.enable and configuration.apns.env not in APNS_ENVIRONMENTS:
        return ConfigurationValidationError(
            "APNS_ENV must be sandbox or production",
            rule=ValidationRule.APNS_ENV_INVALID,
            value=configuration.apns.env,
        )
    return None


def config_validate(configuration: Configuration) -> None:
    """Raise the first violated validation rule, if any.

    Args:
        configuration: Resolved configuration.

    Returns:
        None: Returns only when the configuration is valid.

    Raises:
        ConfigurationValidationError: Raised for the first violated rule.
    """

    violation = config_find_violation(configuration)
    if violation is not None:
        raise violation


__all__ = ["APNS_ENVIRONMENTS", "config_find_violation", "config_validate"]
