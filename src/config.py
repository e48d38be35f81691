"""Application configuration using Pydantic BaseSettings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.constants import (
    DEFAULT_AUTHORIZATION_CODE,
    DEFAULT_PORT,
    FACEBOOK_API_TIMEOUT_SECONDS,
    FACEBOOK_GRAPH_API_BASE_URL,
    FACEBOOK_GRAPH_API_VERSION,
)


class ConfigurationError(Exception):
    """Raised when configuration cannot be loaded at startup."""

    pass


class ConfigurationMissingError(ConfigurationError):
    """Raised when required configuration values are absent at startup."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing config values: {', '.join(missing)}")


class ConfigurationInvalidError(ConfigurationError):
    """Raised when configuration values are present but cannot be parsed."""

    def __init__(self, invalid: dict[str, str]):
        self.invalid = invalid
        details = ", ".join(f"{name} ({reason})" for name, reason in invalid.items())
        super().__init__(f"Invalid config values: {details}")


# Validation error types that mean "not provided" rather than "malformed"
_MISSING_ERROR_TYPES = frozenset({"missing", "string_too_short"})


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The instance is frozen: configuration is read once at startup and shared
    read-only by every request.
    """

    model_config = SettingsConfigDict(
        # Load .env first, then .env.local (for local/test overrides)
        env_file=[".env", ".env.local"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Messenger channel identity
    messenger_app_secret: str = Field(
        ..., min_length=1, description="App secret used to sign webhook bodies"
    )
    messenger_validation_token: str = Field(
        ..., min_length=1, description="Webhook verification token"
    )
    messenger_page_access_token: str = Field(
        ..., min_length=1, description="Page access token for the Send API"
    )
    server_url: str = Field(
        ...,
        min_length=1,
        description="Externally reachable base URL (with protocol) used for asset links",
    )

    # Environment
    env: Literal["local", "railway", "prod"] = Field(
        default="local", description="Current environment"
    )
    port: int = Field(default=DEFAULT_PORT, description="HTTP port for `serve`")
    log_level: str = Field(default="INFO", description="Python logging level")

    # Sentry Configuration
    sentry_dsn: str | None = Field(
        default=None, description="Sentry DSN for error tracking (optional)"
    )
    sentry_traces_sample_rate: float = Field(
        default=1.0, description="Sentry traces sample rate (0.0 to 1.0)"
    )

    # Logfire Configuration
    logfire_token: str | None = Field(
        default=None, description="Pydantic Logfire token for cloud logging"
    )

    # Send API
    graph_api_base_url: str = Field(
        default=FACEBOOK_GRAPH_API_BASE_URL, description="Graph API host"
    )
    graph_api_version: str = Field(
        default=FACEBOOK_GRAPH_API_VERSION, description="Graph API version"
    )
    facebook_api_timeout_seconds: float = Field(
        default=FACEBOOK_API_TIMEOUT_SECONDS,
        description="Timeout for Facebook Graph API calls (seconds)",
    )

    # Account linking
    authorization_code: str = Field(
        default=DEFAULT_AUTHORIZATION_CODE,
        description="Authorization code appended to the account linking redirect",
    )


def load_settings() -> Settings:
    """Build settings, converting validation failures into a config error.

    Raises:
        ConfigurationMissingError: if any required value is absent or empty
        ConfigurationInvalidError: if every value is present but some
            cannot be parsed
    """
    try:
        return Settings()
    except ValidationError as e:
        missing: set[str] = set()
        invalid: dict[str, str] = {}
        for err in e.errors():
            name = str(err["loc"][0]) if err.get("loc") else "settings"
            if err["type"] in _MISSING_ERROR_TYPES:
                missing.add(name)
            else:
                invalid.setdefault(name, err["msg"])

        if missing:
            raise ConfigurationMissingError(sorted(missing)) from e
        raise ConfigurationInvalidError(dict(sorted(invalid.items()))) from e


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return load_settings()
