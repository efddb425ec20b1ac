"""Typed runtime settings for the resolver itself."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when resolver settings cannot be loaded or validated."""


class ResolverSettings(BaseSettings):
    """Settings controlling how configuration is resolved and reported.

    Environment variable names are field names in uppercase with a
    `SKYCONFIG_` prefix. Example: `env_file` reads from `SKYCONFIG_ENV_FILE`.

    Attributes:
        env_file: Declarations file path loaded before the process environment.
        log_level: Logging level used by the command-line entrypoint.
        report_parse_errors: Log malformed boolean and integer values.
    """

    model_config = SettingsConfigDict(
        env_prefix="SKYCONFIG_",
        extra="ignore",
        case_sensitive=False,
    )

    env_file: str = Field(default=".env")
    log_level: str = Field(default="INFO")
    report_parse_errors: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return normalized_value


def config_load_resolver_settings() -> ResolverSettings:
    """Load and validate resolver settings from the environment.

    Returns:
        ResolverSettings: Validated resolver settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return ResolverSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Resolver settings validation failed. Update SKYCONFIG_* environment variables. Details: {error}"
        ) from error
