from .base import BaseMediaStore
from .factory import get_media_store

__all__ = ["BaseMediaStore", "get_media_store"]
