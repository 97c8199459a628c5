from .factory import get_product_service
from .product_service import ProductService

__all__ = ["ProductService", "get_product_service"]
