"""Static files configuration for the catalog service."""

import os

from .environment import BASE_DIR

STATIC_URL = "static/"
STATIC_ROOT = os.getenv("STATIC_ROOT", os.path.join(BASE_DIR, "static"))

__all__ = [
    "STATIC_URL",
    "STATIC_ROOT",
]
