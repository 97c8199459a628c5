"""Database settings: PostgreSQL in deployments, SQLite for quick local runs."""

import os
from typing import Any, Dict

from .environment import BASE_DIR, env_int

POSTGRES_ENGINE = "django.db.backends.postgresql"
SQLITE_ENGINE = "django.db.backends.sqlite3"


def build_database(engine: str) -> Dict[str, Any]:
    if engine == SQLITE_ENGINE:
        return {
            "ENGINE": engine,
            "NAME": os.getenv("SQL_DATABASE") or str(BASE_DIR / "catalog.sqlite3"),
        }

    return {
        "ENGINE": engine,
        "NAME": os.getenv("SQL_DATABASE", "catalog"),
        "USER": os.getenv("SQL_USER", "catalog"),
        "PASSWORD": os.getenv("SQL_PASSWORD", "catalog"),
        "HOST": os.getenv("SQL_HOST", "127.0.0.1"),
        "PORT": env_int("SQL_PORT", 5432),
        "CONN_MAX_AGE": env_int("SQL_CONN_MAX_AGE", 60),
    }


DATABASES = {"default": build_database(os.getenv("SQL_ENGINE", POSTGRES_ENGINE))}

__all__ = ["DATABASES"]
