"""
Configuration helpers for the Friendbook backend.

Exposes a frozen Settings object built from environment variables so that
routers/services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    log_level: str
    log_file: str
    seed_count: int
    create_tables: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./friendbook.db").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE", ""),
        seed_count=_int(os.getenv("SEED_COUNT", "50"), 50),
        create_tables=_bool(os.getenv("CREATE_TABLES"), True),
    )
