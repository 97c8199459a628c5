from django.db import models

from core.models import TimeStampedModel


class Product(TimeStampedModel):
    name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    brand = models.CharField(max_length=255, null=True, blank=True)
    category = models.CharField(max_length=255, null=True, blank=True)

    price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    release_date = models.DateField(null=True, blank=True)
    product_available = models.BooleanField(default=False)
    stock_quantity = models.PositiveIntegerField(default=0)

    # Filename and content type of the last uploaded image, kept for both storage variants.
    image_name = models.CharField(max_length=255, null=True, blank=True)
    image_type = models.CharField(max_length=100, null=True, blank=True)

    # Inline variant.
    image_data = models.BinaryField(null=True, blank=True)

    # Remote media store variant.
    image_url = models.URLField(max_length=1000, null=True, blank=True)
    image_public_id = models.CharField(max_length=255, null=True, blank=True)

    class Meta(TimeStampedModel.Meta):
        db_table = "products"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} (#{self.pk})"

    @property
    def has_image(self) -> bool:
        return bool(self.image_data) or bool(self.image_url)
