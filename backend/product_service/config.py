"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Connection strings come from environment variables or .env (never hardcoded credentials)
    - get_settings() is cached (lru_cache), one instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - SQLite default: the service starts locally without a database server;
      production sets DATABASE_URL to PostgreSQL
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service
    service_name: str = "product-service"
    version: str = "1.0.0"

    # Database
    database_url: str = "sqlite+aiosqlite:///./products.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_echo: bool = False
    # Alembic owns the schema in production; local runs and demos create it on boot
    create_schema_on_startup: bool = True

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
