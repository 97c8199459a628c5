from typing import Optional

from catalog_app.mappers import ProductMapper
from catalog_app.media import BaseMediaStore, get_media_store
from catalog_app.repositories import ProductRepository
from .product_service import ProductService


def get_product_service(media_store: Optional[BaseMediaStore] = None) -> ProductService:
    """Build a service wired to the configured media store."""
    return ProductService(
        repository=ProductRepository(),
        mapper=ProductMapper(),
        media_store=media_store or get_media_store(),
    )
