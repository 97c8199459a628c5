from typing import List, Optional

from .filters import ProductSearchFilter
from .models import Product


class ProductRepository:
    """Persistence gateway for ``Product`` rows."""

    model = Product

    def find_all(self) -> List[Product]:
        return list(self.model.objects.all())

    def find_by_id(self, product_id: int, *, for_update: bool = False) -> Optional[Product]:
        queryset = self.model.objects.all()
        if for_update:
            queryset = queryset.select_for_update()
        return queryset.filter(pk=product_id).first()

    def save(self, product: Product) -> Product:
        product.save()
        return product

    def delete_by_id(self, product_id: int) -> None:
        self.model.objects.filter(pk=product_id).delete()

    def search(self, keyword: str) -> List[Product]:
        filterset = ProductSearchFilter({"keyword": keyword}, queryset=self.model.objects.all())
        return list(filterset.qs)
