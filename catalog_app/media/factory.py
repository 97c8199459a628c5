from importlib import import_module
from typing import Dict, Optional, Union

from django.conf import settings

from core.enums import ImageStorageType
from core.exceptions import MediaStoreConfigurationError
from .base import BaseMediaStore


_MEDIA_STORE_REGISTRY: Dict[ImageStorageType, str] = {
    ImageStorageType.INLINE: "catalog_app.media.inline.InlineMediaStore",
    ImageStorageType.CLOUDINARY: "catalog_app.media.cloudinary_store.CloudinaryMediaStore",
}


def get_media_store(storage_type: Optional[Union[ImageStorageType, str]] = None) -> BaseMediaStore:
    """Return the media store registered for ``storage_type`` (defaults to settings)."""
    if storage_type is None:
        storage_type = getattr(settings, "IMAGE_STORAGE", ImageStorageType.INLINE.value)

    if not isinstance(storage_type, ImageStorageType):
        try:
            storage_type = ImageStorageType.from_string(str(storage_type))
        except ValueError as exc:
            raise MediaStoreConfigurationError(str(exc)) from exc

    store_path = _MEDIA_STORE_REGISTRY.get(storage_type)
    if not store_path:
        supported = ", ".join(t.value for t in _MEDIA_STORE_REGISTRY)
        raise MediaStoreConfigurationError(
            f"Unsupported image storage: {storage_type}. Supported types: {supported}"
        )

    module_path, _, class_name = store_path.rpartition(".")
    store_class = getattr(import_module(module_path), class_name)
    return store_class()
