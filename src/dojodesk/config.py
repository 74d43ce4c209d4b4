"""Application configuration objects and helpers."""

from __future__ import annotations

import importlib
import os
from pathlib import Path
from typing import Any
from urllib.parse import quote_plus

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

    APP_NAME = "DojoDesk"
    DB_FILENAME = "dojodesk.db"
    MYSQL_DRIVER_MODULE = "pymysql"
    SQLITE_PRAGMAS = {"foreign_keys": "on"}
    MIN_PASSWORD_LENGTH = 8
    PAYMENT_METHODS = ("cash", "transfer", "card")
    DOCUMENT_STATUSES = ("pending", "delivered", "expired")
    USER_ROLES = ("admin", "staff")

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("DOJODESK_DEV_MODE", default=True)
        self.DB_HOST = os.getenv("DOJODESK_DB_HOST")
        self.DB_PORT = int(os.getenv("DOJODESK_DB_PORT", "3306"))
        self.DB_NAME = os.getenv("DOJODESK_DB_NAME", "dojodesk")
        self.DB_USER = os.getenv("DOJODESK_DB_USER")
        self.DB_PASSWORD = os.getenv("DOJODESK_DB_PASSWORD", "")
        self.DATABASE_URL = os.getenv("DOJODESK_DATABASE_URL") or self._build_database_url()

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the SQLite file and logs live."""

        data_root = os.getenv("DOJODESK_DATA_DIR", "instance")
        base_path = Path(data_root).expanduser()
        try:
            path = base_path.resolve()
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            # Protected install locations fall back to user-local storage.
            local_app_data = os.getenv("LOCALAPPDATA") or (Path.home() / ".local" / "share")
            fallback_path = Path(local_app_data).expanduser() / self.APP_NAME
            fallback_path.mkdir(parents=True, exist_ok=True)
            return fallback_path.resolve()

    def _ensure_mysql_available(self) -> None:
        """Ensure the MySQL driver and credentials are available when a host is set."""

        if not self.DB_USER:
            raise ValueError("DOJODESK_DB_HOST is set but DOJODESK_DB_USER is not.")
        try:
            importlib.import_module(self.MYSQL_DRIVER_MODULE)
        except ImportError as exc:
            raise ImportError(
                "DOJODESK_DB_HOST requires PyMySQL. "
                "Install with: pip install PyMySQL or use the 'mysql' extra."
            ) from exc

    def _build_database_url(self) -> str:
        """Construct the database URL from the server settings or fall back to SQLite."""

        if self.DB_HOST:
            self._ensure_mysql_available()
            user = quote_plus(self.DB_USER or "")
            password = quote_plus(self.DB_PASSWORD or "")
            credentials = f"{user}:{password}" if password else user
            return (
                f"mysql+pymysql://{credentials}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
                "?charset=utf8mb4"
            )
        db_path = self.DATA_DIR / self.DB_FILENAME
        return f"sqlite:///{db_path}"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if self.is_sqlite:
            return {"connect_args": {"check_same_thread": False}}
        return {"pool_pre_ping": True}
