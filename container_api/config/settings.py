"""Typed runtime settings with dotenv support and startup validation."""

import logging
from typing import Any, Final, Literal

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_APPLICATION_PORT: Final[int] = 3000
SUPPORTED_LOG_LEVELS: Final[tuple[str, ...]] = ("critical", "error", "warning", "info", "debug")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the HTTP service runtime.

    Environment variable names map directly to field names in uppercase,
    except where an alias documents the conventional container variable.
    Example: `application_port` reads from `PORT`.

    Attributes:
        environment_name: Runtime environment label reported verbatim by `/api/info`.
            Read from `NODE_ENV`, then `APP_ENV`, then `ENVIRONMENT_NAME`; an
            empty value falls back to `development`.
        application_host: Host interface for web server binding.
        application_port: Web server port.
        log_level: Root log level name.
        log_format: Log line rendering, `text` or `json`.
        shutdown_grace_seconds: Upper bound for in-flight requests to finish on shutdown.
        request_body_limit_bytes: Maximum accepted JSON request body size.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    environment_name: str = Field(
        default="development",
        validation_alias=AliasChoices("NODE_ENV", "APP_ENV", "ENVIRONMENT_NAME"),
    )
    application_host: str = Field(default="0.0.0.0", min_length=1)
    application_port: int = Field(
        default=DEFAULT_APPLICATION_PORT,
        validation_alias=AliasChoices("PORT", "APPLICATION_PORT"),
    )
    log_level: str = Field(default="info")
    log_format: Literal["text", "json"] = Field(default="text")
    shutdown_grace_seconds: float = Field(default=10.0, ge=0)
    request_body_limit_bytes: int = Field(default=102400, ge=1)

    @field_validator("application_port", mode="before")
    @classmethod
    def _validate_application_port(cls, value: Any) -> int:
        if value is None or isinstance(value, bool):
            return DEFAULT_APPLICATION_PORT
        try:
            port = int(str(value).strip())
        except ValueError:
            logger.warning("Ignoring non-numeric PORT %r, using %d", value, DEFAULT_APPLICATION_PORT)
            return DEFAULT_APPLICATION_PORT
        if port < 1 or port > 65535:
            logger.warning("Ignoring out-of-range PORT %d, using %d", port, DEFAULT_APPLICATION_PORT)
            return DEFAULT_APPLICATION_PORT
        return port

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, value: Any) -> str:
        normalized_value = str(value).strip().lower()
        if normalized_value not in SUPPORTED_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(SUPPORTED_LOG_LEVELS)}")
        return normalized_value

    @field_validator("log_format", mode="before")
    @classmethod
    def _normalize_log_format(cls, value: Any) -> str:
        return str(value).strip().lower()

    @field_validator("environment_name")
    @classmethod
    def _validate_environment_name(cls, value: str) -> str:
        if not value:
            return "development"
        return value


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
