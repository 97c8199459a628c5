from typing import Any, Dict, Mapping

from .models import Product
from .serializers import ProductResponseSerializer

# Scalar columns copied from a request onto the entity. Image columns and id are
# never touched here; the service and the media store own them.
SCALAR_FIELD_DEFAULTS: Dict[str, Any] = {
    "name": None,
    "description": None,
    "brand": None,
    "category": None,
    "price": None,
    "release_date": None,
    "product_available": False,
    "stock_quantity": 0,
}


class ProductMapper:
    """Pure conversions between request data, ``Product`` and response data."""

    def to_response(self, product: Product) -> Dict[str, Any]:
        return dict(ProductResponseSerializer(product).data)

    def to_entity(self, data: Mapping[str, Any]) -> Product:
        return Product(**self._scalar_values(data))

    def apply_update(self, data: Mapping[str, Any], product: Product) -> Product:
        for field_name, value in self._scalar_values(data).items():
            setattr(product, field_name, value)
        return product

    @staticmethod
    def _scalar_values(data: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            field_name: data.get(field_name, default)
            for field_name, default in SCALAR_FIELD_DEFAULTS.items()
        }
