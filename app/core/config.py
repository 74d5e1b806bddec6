"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Firebase credentials are optional at load time so the
app (and its tests) can start without them; store-backed routes then
answer 500 until credentials are provided.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION = "production"


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "unifriend-api"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # CORS: production allow-list; dev origins are added outside production.
    allowed_origins: str = "https://unifriend.in,https://www.unifriend.in"
    dev_allowed_origins: str = (
        "http://localhost:3000,http://localhost:9002,"
        "http://127.0.0.1:3000,http://127.0.0.1:9002"
    )

    # Firebase: service account as JSON string (key) or file (path).
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None
    # Audience for ID tokens; defaults to project_id of the service account.
    firebase_project_id: str | None = None

    # Rate limiting (slowapi): one per-IP ceiling applied to every route.
    rate_limit: str = "100/15minutes"
    rate_limit_enabled: bool = True

    # Request / middleware
    request_id_header: str = "X-Request-ID"
    max_body_size: int = 10 * 1024 * 1024  # 10MB

    # Default page sizes
    university_page_size: int = 50
    lead_page_size: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        """Reject nonsensical sizes early (at first get_settings())."""
        if self.max_body_size <= 0:
            raise ValueError("MAX_BODY_SIZE must be a positive number of bytes.")
        if self.university_page_size <= 0 or self.lead_page_size <= 0:
            raise ValueError("Page sizes must be positive.")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == PRODUCTION

    def cors_origins(self) -> list[str]:
        """Explicit browser-origin allow-list for CORS."""
        origins = [o.strip() for o in self.allowed_origins.split(",") if o.strip()]
        if not self.is_production:
            origins += [
                o.strip() for o in self.dev_allowed_origins.split(",") if o.strip()
            ]
        return origins


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()
