"""
Configuration helpers for the blog backend.

Settings are read once from environment variables so that routers, services
and the database layer never fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEV_ORIGINS = (
    "http://localhost:8000",
    "http://127.0.0.1:8000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    sql_echo: bool
    log_level: str
    cors_origins: tuple[str, ...]
    create_tables_on_startup: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _csv(value: str | None) -> list[str]:
        return [item.strip().rstrip("/") for item in (value or "").split(",") if item.strip()]

    app_env = (os.getenv("APP_ENV") or "dev").lower()
    origins = _csv(os.getenv("CORS_ORIGINS"))
    if app_env != "prod":
        origins.extend(o for o in DEV_ORIGINS if o not in origins)

    return Settings(
        app_env=app_env,
        database_url=os.getenv("DATABASE_URL", ""),
        sql_echo=_bool(os.getenv("SQL_ECHO"), False),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=tuple(origins),
        create_tables_on_startup=_bool(os.getenv("CREATE_TABLES_ON_STARTUP"), app_env != "prod"),
    )
