import django_filters
from django.db.models import Q

from .models import Product


class ProductSearchFilter(django_filters.FilterSet):
    keyword = django_filters.CharFilter(method="filter_keyword")

    class Meta:
        model = Product
        fields = []

    def filter_keyword(self, queryset, name, value):
        """Case-insensitive substring match on name, description or category."""
        return queryset.filter(
            Q(name__icontains=value) |
            Q(description__icontains=value) |
            Q(category__icontains=value)
        )
