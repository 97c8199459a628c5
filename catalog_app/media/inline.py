from core.schemas import ImagePayload
from catalog_app.models import Product
from .base import BaseMediaStore


class InlineMediaStore(BaseMediaStore):
    """Keeps image bytes in the product row itself."""

    def attach(self, product: Product, image: ImagePayload) -> None:
        product.image_data = image.content
        product.image_name = image.filename
        product.image_type = image.content_type
        product.image_url = None
        product.image_public_id = None
        self.logger.debug("Stored %d bytes inline for product %s", image.size, product.pk)

    def detach(self, product: Product) -> None:
        # Bytes are overwritten by attach or removed with the row.
        return None
