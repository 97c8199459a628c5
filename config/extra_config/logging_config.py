"""Logging configuration for the catalog service."""

import os
from pathlib import Path

from .environment import BASE_DIR, env_bool, env_int


LOG_ENABLED = env_bool("LOG_ENABLED", True)

if not LOG_ENABLED:
    LOGGING_CONFIG = None
    LOGGING = {}
else:
    LOGGING_CONFIG = "logging.config.dictConfig"

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    DJANGO_LOG_LEVEL = os.getenv("DJANGO_LOG_LEVEL", LOG_LEVEL).upper()
    SQL_LOG_LEVEL = os.getenv("SQL_LOG_LEVEL", "WARNING").upper()

    LOG_CONSOLE_ENABLED = env_bool("LOG_CONSOLE_ENABLED", True)
    LOG_FILE_ENABLED = env_bool("LOG_FILE_ENABLED", False)

    LOG_DIR = Path(os.getenv("LOG_DIR", str(Path(BASE_DIR) / "logs")))
    LOG_FILE_PATH = Path(os.getenv("LOG_FILE_PATH", str(LOG_DIR / os.getenv("LOG_FILE_NAME", "catalog.log"))))

    if LOG_FILE_ENABLED:
        LOG_FILE_PATH.parent.mkdir(parents=True, exist_ok=True)

    handlers = {}
    root_handlers = []

    if LOG_CONSOLE_ENABLED:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "level": LOG_LEVEL,
            "formatter": "standard",
        }
        root_handlers.append("console")

    if LOG_FILE_ENABLED:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": LOG_LEVEL,
            "formatter": "standard",
            "filename": str(LOG_FILE_PATH),
            "maxBytes": env_int("LOG_MAX_BYTES", 10 * 1024 * 1024),
            "backupCount": env_int("LOG_BACKUP_COUNT", 5),
            "encoding": "utf-8",
        }
        root_handlers.append("file")

    app_logger = {"level": LOG_LEVEL, "propagate": True}

    LOGGING = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            }
        },
        "handlers": handlers,
        "root": {
            "level": LOG_LEVEL,
            "handlers": root_handlers,
        },
        "loggers": {
            "django": {"level": DJANGO_LOG_LEVEL, "propagate": True},
            "django.db.backends": {"level": SQL_LOG_LEVEL, "propagate": True},
            "catalog_app": dict(app_logger),
            "core": dict(app_logger),
        },
    }


__all__ = ["LOGGING", "LOGGING_CONFIG", "LOG_ENABLED"]
