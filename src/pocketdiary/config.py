"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "PocketDiary"
    DB_FILENAME = "pocketdiary.db"
    SQLITE_PRAGMAS = {"foreign_keys": "on"}
    TESTING = False
    DEV_MODE_DEFAULT = False

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("POCKETDIARY_SECRET_KEY", "replace-me")
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("POCKETDIARY_DEV_MODE", default=self.DEV_MODE_DEFAULT)
        self.TIMEZONE = os.getenv("POCKETDIARY_TIMEZONE", "UTC")
        self.LOG_LEVEL = os.getenv("POCKETDIARY_LOG_LEVEL", "INFO").upper()
        self.DATABASE_URL = os.getenv("POCKETDIARY_DATABASE_URL", self._build_sqlite_url())
        if not self.DEV_MODE and not self.TESTING and self.SECRET_KEY == "replace-me":
            raise ValueError("POCKETDIARY_SECRET_KEY must be set in non-dev mode.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("POCKETDIARY_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if not self.DATABASE_URL.startswith("sqlite"):
            return {}
        return {"connect_args": {"check_same_thread": False}}


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True
    DEV_MODE_DEFAULT = True


class TestConfig(BaseConfig):
    """Configuration used by the test-suite and throwaway instances."""

    TESTING = True
    DEBUG = False
