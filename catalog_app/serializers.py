from decimal import Decimal

from rest_framework import serializers

from core.serializers import ReadOnlyModelSerializer
from .models import Product

# Upper bound of the positive integer column on every supported backend.
MAX_STOCK_QUANTITY = 2147483647


class ProductRequestSerializer(serializers.Serializer):
    """Fields accepted on create and update.

    Every optional field carries a default, so validated data always holds the
    full field set and an update overwrites every scalar column.
    """

    name = serializers.CharField(max_length=255)
    description = serializers.CharField(allow_null=True, allow_blank=True, default=None)
    brand = serializers.CharField(max_length=255, allow_null=True, allow_blank=True, default=None)
    category = serializers.CharField(max_length=255, allow_null=True, allow_blank=True, default=None)
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0"),
        allow_null=True,
        default=None,
    )
    release_date = serializers.DateField(allow_null=True, default=None)
    product_available = serializers.BooleanField(default=False)
    stock_quantity = serializers.IntegerField(min_value=0, max_value=MAX_STOCK_QUANTITY, default=0)


class ProductResponseSerializer(ReadOnlyModelSerializer):
    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "brand",
            "price",
            "category",
            "release_date",
            "product_available",
            "stock_quantity",
            "image_name",
            "image_type",
            "image_url",
            "image_public_id",
            "created_at",
            "updated_at",
        ]
