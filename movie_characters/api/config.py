"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path

from movie_characters.database.connection import get_database_url as sqlite_url_for


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def get_database_url() -> str:
    """Get database URL from env or default SQLite file."""
    return os.getenv("DATABASE_URL", "") or sqlite_url_for(
        str(Path(__file__).resolve().parents[2] / "data" / "movie_characters.db")
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_seed_database() -> bool:
    """Whether to load the initial data into an empty database on startup."""
    return _env_flag("SEED_DATABASE", "true")


def get_sql_echo() -> bool:
    """Whether SQLAlchemy should log every statement."""
    return _env_flag("SQL_ECHO", "false")


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))
