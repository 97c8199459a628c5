class CatalogError(RuntimeError):
    """Base exception for all catalog errors surfaced to API clients."""


class ProductNotFound(CatalogError):
    """Raised when no product row exists for the requested id."""

    def __init__(self, product_id=None, message: str = "") -> None:
        if not message:
            message = "Product not found" if product_id is None else f"Product {product_id} not found"
        super().__init__(message)
        self.product_id = product_id


class ProductImageNotFound(ProductNotFound):
    """Raised when the product exists but carries no image."""

    def __init__(self, product_id=None) -> None:
        super().__init__(product_id, message=f"Product {product_id} has no image")


class InvalidProductInput(CatalogError):
    """Raised when the request body cannot be turned into a product."""


class ImageReadError(CatalogError):
    """Raised when the uploaded image payload cannot be read."""


class MediaStoreError(CatalogError):
    """Base exception for media store failures."""


class MediaStoreConfigurationError(MediaStoreError):
    """Raised when the media store is misconfigured."""


class MediaUploadFailed(MediaStoreError):
    """Raised when the media store rejects or fails an upload."""


class MediaDeleteFailed(MediaStoreError):
    """Raised when the media store fails to delete an object."""
