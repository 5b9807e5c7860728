"""
Configuration helpers for the directory backend.

Settings are read from environment variables once and cached, so that
routers/services/stores do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    log_level: str
    log_file: str
    storage_backend: str
    users_file: str
    purchases_file: str
    database_url: str
    static_dir: str
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _choice(value: str | None, allowed: set[str], default: str) -> str:
        candidate = (value or "").strip().lower()
        return candidate if candidate in allowed else default

    def _csv(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        if value is None:
            return default
        items = tuple(item.strip() for item in value.split(",") if item.strip())
        return items or default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE", ""),
        storage_backend=_choice(os.getenv("STORAGE_BACKEND"), {"json", "memory", "sql"}, "json"),
        users_file=os.getenv("USERS_FILE", os.path.join("data", "users.json")),
        purchases_file=os.getenv("PURCHASES_FILE", os.path.join("data", "buy.json")),
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        static_dir=os.getenv("STATIC_DIR", ""),
        cors_origins=_csv(os.getenv("CORS_ORIGINS"), ("*",)),
    )
