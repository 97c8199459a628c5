"""Modularized Django settings for the catalog service."""

from .environment import BASE_DIR, ROOT_DIR, env_bool, env_int, env_list  # noqa: F401
from .database_config import DATABASES  # noqa: F401
from .logging_config import LOGGING, LOGGING_CONFIG, LOG_ENABLED  # noqa: F401
from .static_config import STATIC_URL, STATIC_ROOT  # noqa: F401
from .media_config import (  # noqa: F401
    CLOUDINARY,
    DATA_UPLOAD_MAX_MEMORY_SIZE,
    FILE_UPLOAD_MAX_MEMORY_SIZE,
    IMAGE_STORAGE,
    MEDIA_STORE_FOLDER,
)
from .rest_framework_config import REST_FRAMEWORK  # noqa: F401
from .swagger_config import SWAGGER_SETTINGS, SWAGGER_USE_SESSION_AUTH  # noqa: F401
from .cors_config import (  # noqa: F401
    CORS_ALLOW_ALL_ORIGINS,
    CORS_ALLOWED_ORIGINS,
    CORS_ALLOW_CREDENTIALS,
    CORS_ALLOW_HEADERS,
    CSRF_TRUSTED_ORIGINS,
)

__all__ = [
    "BASE_DIR",
    "ROOT_DIR",
    "env_bool",
    "env_int",
    "env_list",
    "DATABASES",
    "LOGGING",
    "LOGGING_CONFIG",
    "LOG_ENABLED",
    "STATIC_URL",
    "STATIC_ROOT",
    "CLOUDINARY",
    "DATA_UPLOAD_MAX_MEMORY_SIZE",
    "FILE_UPLOAD_MAX_MEMORY_SIZE",
    "IMAGE_STORAGE",
    "MEDIA_STORE_FOLDER",
    "REST_FRAMEWORK",
    "SWAGGER_SETTINGS",
    "SWAGGER_USE_SESSION_AUTH",
    "CORS_ALLOW_ALL_ORIGINS",
    "CORS_ALLOWED_ORIGINS",
    "CORS_ALLOW_CREDENTIALS",
    "CORS_ALLOW_HEADERS",
    "CSRF_TRUSTED_ORIGINS",
]
