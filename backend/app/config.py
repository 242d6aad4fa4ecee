"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden by an environment variable or .env entry
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - Defaults run out-of-the-box on a local SQLite file; PostgreSQL via DATABASE_URL
    - create_schema and seed_demo_data default on: the service creates its table
      and inserts model1/model2 on every boot
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./models.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Startup
    create_schema: bool = True
    seed_demo_data: bool = True

    # API
    cors_origins: list[str] = []
    host: str = "0.0.0.0"
    port: int = 8080

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
