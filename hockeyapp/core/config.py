"""
Configuration helpers for the hockey app storage layer.

Services and storage adapters read a Settings object instead of fetching
os.environ directly, so tests can point them at temporary stores.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    data_file: Path
    database_url: str
    seed_on_start: bool
    log_level: str
    log_json: bool


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    data_file = (os.getenv("HOCKEY_DATA_FILE") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=(os.getenv("HOCKEY_STORAGE_BACKEND") or "json").strip().lower(),
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        database_url=os.getenv("DATABASE_URL", ""),
        seed_on_start=_bool(os.getenv("HOCKEY_SEED_ON_START"), True),
        log_level=(os.getenv("HOCKEY_LOG_LEVEL") or "INFO").strip().upper(),
        log_json=_bool(os.getenv("HOCKEY_LOG_JSON"), False),
    )
