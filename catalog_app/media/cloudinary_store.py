from typing import Any, Dict, Optional

import cloudinary
import cloudinary.uploader
from django.conf import settings

from core.exceptions import MediaDeleteFailed, MediaStoreConfigurationError, MediaUploadFailed
from core.schemas import ImagePayload, UploadResult
from catalog_app.models import Product
from .base import BaseMediaStore

DEFAULT_FOLDER = "products"

# Cloudinary answers "not found" for ids that are already gone.
_DESTROY_OK_RESULTS = {"ok", "not found"}


class CloudinaryMediaStore(BaseMediaStore):
    """Delegates image content to Cloudinary and keeps url + public id on the row."""

    def __init__(self, *, folder: Optional[str] = None, uploader: Any = None) -> None:
        super().__init__()
        self.folder = folder or getattr(settings, "MEDIA_STORE_FOLDER", DEFAULT_FOLDER)
        if uploader is None:
            configure_cloudinary()
            uploader = cloudinary.uploader
        self.uploader = uploader

    def upload(self, content: bytes, folder: str) -> UploadResult:
        try:
            result: Dict[str, Any] = self.uploader.upload(content, folder=folder)
        except Exception as exc:
            self.logger.exception("Cloudinary upload failed")
            raise MediaUploadFailed(f"Image upload failed: {exc}") from exc

        url = (result or {}).get("secure_url")
        public_id = (result or {}).get("public_id")
        if not url or not public_id:
            raise MediaUploadFailed("Image upload failed: media host returned no locator")

        self.logger.info("Uploaded image to Cloudinary public_id=%s", public_id)
        return UploadResult(url=url, public_id=public_id)

    def delete(self, public_id: str) -> None:
        try:
            result: Dict[str, Any] = self.uploader.destroy(public_id)
        except Exception as exc:
            self.logger.exception("Cloudinary delete failed for public_id=%s", public_id)
            raise MediaDeleteFailed(f"Failed to delete image: {exc}") from exc

        outcome = (result or {}).get("result")
        if outcome not in _DESTROY_OK_RESULTS:
            raise MediaDeleteFailed(f"Failed to delete image: media host answered '{outcome}'")

        self.logger.info("Deleted Cloudinary image public_id=%s (%s)", public_id, outcome)

    def attach(self, product: Product, image: ImagePayload) -> None:
        uploaded = self.upload(image.content, self.folder)
        product.image_url = uploaded.url
        product.image_public_id = uploaded.public_id
        product.image_name = image.filename
        product.image_type = image.content_type
        product.image_data = None

    def detach(self, product: Product) -> None:
        if product.image_public_id:
            self.delete(product.image_public_id)


def configure_cloudinary() -> None:
    options = getattr(settings, "CLOUDINARY", {}) or {}
    credentials = {key: value for key, value in options.items() if value}

    if credentials:
        cloudinary.config(secure=True, **credentials)

    config = cloudinary.config()
    if not getattr(config, "cloud_name", None):
        raise MediaStoreConfigurationError(
            "Cloudinary is selected as image storage but no cloud name is configured. "
            "Set CLOUDINARY_CLOUD_NAME/CLOUDINARY_API_KEY/CLOUDINARY_API_SECRET or CLOUDINARY_URL."
        )
