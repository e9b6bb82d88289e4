"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - google_timezone is the one zone every local timestamp is interpreted in

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: a bare checkout runs on SQLite
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Record store
    database_url: str = "sqlite+aiosqlite:///./calendar.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres URLs come as postgresql://; asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # API key guarding write endpoints (empty = auth disabled)
    api_key: str = ""

    # Google Calendar
    google_client_id: str = ""
    google_client_secret: str = ""
    google_redirect_uri: str = ""
    google_scopes: str = "https://www.googleapis.com/auth/calendar.events"
    google_calendar_id: str = "primary"
    google_timezone: str = "Europe/Zurich"
    google_tokens_path: str = "google-tokens.json"

    # Quick add
    quick_add_default_minutes: int = 60
    quick_add_placeholder_title: str = "Termin"

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def auth_enabled(self) -> bool:
        return bool(self.api_key)

    @property
    def google_scope_list(self) -> list[str]:
        return [s for s in self.google_scopes.split(" ") if s]


@lru_cache
def get_settings() -> Settings:
    return Settings()
