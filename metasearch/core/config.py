"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (SECRET_KEY) and the entity service
URL are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from metasearch.core.constants import (
    BROWSE_PATH_DELIMITER,
    DEFAULT_COUNT,
    DEFAULT_START,
    SEARCHABLE_ENTITY_TYPES,
)
from metasearch.domain.enums import EntityType


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except secret_key, which is
    checked in validate_required.
    """

    # App
    app_name: str = "metasearch"
    app_version: str = "1.0.0"
    debug: bool = False

    # Security (bearer JWT; the `sub` claim is the actor)
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"

    # Downstream entity service (rest.li style action API)
    entity_service_url: str = "http://localhost:8080"
    entity_service_timeout_seconds: float = 30.0
    entity_service_actor_header: str = "X-DataHub-Actor"

    # Search defaults
    search_worker_pool_size: int = 8
    search_default_start: int = DEFAULT_START
    search_default_count: int = DEFAULT_COUNT
    searchable_entity_types: list[EntityType] = list(SEARCHABLE_ENTITY_TYPES)
    browse_path_delimiter: str = BROWSE_PATH_DELIMITER

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:9002"

    # Request / middleware
    request_id_header: str = "X-Request-ID"
    search_rate_limit: str = "120/minute"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate required env and the downstream service settings."""
        if not self.secret_key.get_secret_value():
            raise ValueError(
                "SECRET_KEY is required. Generate with: openssl rand -hex 32."
            )
        if not self.entity_service_url.startswith(("http://", "https://")):
            raise ValueError(
                f"ENTITY_SERVICE_URL must be an http(s) URL, got: {self.entity_service_url!r}"
            )
        if self.search_worker_pool_size < 1:
            raise ValueError("SEARCH_WORKER_POOL_SIZE must be at least 1")
        if self.search_default_start < 0 or self.search_default_count < 1:
            raise ValueError(
                "SEARCH_DEFAULT_START must be >= 0 and SEARCH_DEFAULT_COUNT must be >= 1"
            )
        if not self.browse_path_delimiter:
            raise ValueError("BROWSE_PATH_DELIMITER must not be empty")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
