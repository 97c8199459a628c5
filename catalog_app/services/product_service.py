import logging
from typing import Any, Dict, List, Mapping, Optional

from django.db import DatabaseError, transaction

from core.exceptions import MediaStoreError, ProductImageNotFound, ProductNotFound
from core.schemas import ImagePayload
from catalog_app.mappers import ProductMapper
from catalog_app.media.base import BaseMediaStore
from catalog_app.models import Product
from catalog_app.repositories import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Product workflows over the repository and the injected media store.

    Each mutating workflow is one atomic unit: a failed media call raises before
    the row is written, and the surrounding transaction rolls back.
    """

    def __init__(
        self,
        *,
        repository: ProductRepository,
        mapper: ProductMapper,
        media_store: BaseMediaStore,
    ) -> None:
        self.repository = repository
        self.mapper = mapper
        self.media_store = media_store

    def get_all_products(self) -> List[Dict[str, Any]]:
        return [self.mapper.to_response(product) for product in self.repository.find_all()]

    def get_product(self, product_id: int) -> Dict[str, Any]:
        return self.mapper.to_response(self._get_existing(product_id))

    def get_product_image(self, product_id: int) -> Product:
        product = self._get_existing(product_id)
        if not product.has_image:
            raise ProductImageNotFound(product_id)
        return product

    def add_product(self, data: Mapping[str, Any], image: ImagePayload) -> Product:
        product = self.mapper.to_entity(data)

        with transaction.atomic():
            self.media_store.attach(product, image)
            try:
                product = self.repository.save(product)
            except DatabaseError:
                self._release_orphan(product)
                raise

        logger.info("Created product %s '%s'", product.pk, product.name)
        return product

    def update_product(
        self,
        product_id: int,
        data: Mapping[str, Any],
        image: Optional[ImagePayload] = None,
    ) -> Product:
        with transaction.atomic():
            product = self._get_existing(product_id, for_update=True)
            self.mapper.apply_update(data, product)

            if image is not None:
                self.media_store.replace(product, image)

            try:
                product = self.repository.save(product)
            except DatabaseError:
                if image is not None:
                    self._release_orphan(product)
                raise

        logger.info(
            "Updated product %s (image %s)",
            product.pk,
            "replaced" if image is not None else "unchanged",
        )
        return product

    def delete_product(self, product_id: int) -> None:
        with transaction.atomic():
            product = self._get_existing(product_id, for_update=True)
            self.media_store.detach(product)
            self.repository.delete_by_id(product.pk)

        logger.info("Deleted product %s", product_id)

    def search_products(self, keyword: str) -> List[Dict[str, Any]]:
        products = self.repository.search(keyword)
        logger.debug("Search '%s' matched %d products", keyword, len(products))
        return [self.mapper.to_response(product) for product in products]

    def _get_existing(self, product_id: int, *, for_update: bool = False) -> Product:
        product = self.repository.find_by_id(product_id, for_update=for_update)
        if product is None:
            raise ProductNotFound(product_id)
        return product

    def _release_orphan(self, product: Product) -> None:
        logger.warning("Saving product '%s' failed, releasing its uploaded image", product.name)
        try:
            self.media_store.detach(product)
        except MediaStoreError:
            logger.exception("Could not release image for unsaved product '%s'", product.name)
