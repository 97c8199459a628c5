import logging
from abc import ABC, abstractmethod

from core.schemas import ImagePayload
from catalog_app.models import Product


class BaseMediaStore(ABC):
    """Strategy deciding where a product's image lives.

    The service calls the same three operations whatever the backend is;
    only the injected store differs between deployments.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(f"catalog_app.media.{self.__class__.__name__}")

    @abstractmethod
    def attach(self, product: Product, image: ImagePayload) -> None:
        """Store ``image`` and record its locator on ``product`` (unsaved)."""

    @abstractmethod
    def detach(self, product: Product) -> None:
        """Release whatever ``product`` currently references."""

    def replace(self, product: Product, image: ImagePayload) -> None:
        self.detach(product)
        self.attach(product, image)
