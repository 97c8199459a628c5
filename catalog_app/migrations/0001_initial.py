from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, null=True)),
                ("brand", models.CharField(blank=True, max_length=255, null=True)),
                ("category", models.CharField(blank=True, max_length=255, null=True)),
                ("price", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ("release_date", models.DateField(blank=True, null=True)),
                ("product_available", models.BooleanField(default=False)),
                ("stock_quantity", models.PositiveIntegerField(default=0)),
                ("image_name", models.CharField(blank=True, max_length=255, null=True)),
                ("image_type", models.CharField(blank=True, max_length=100, null=True)),
                ("image_data", models.BinaryField(blank=True, null=True)),
                ("image_url", models.URLField(blank=True, max_length=1000, null=True)),
                ("image_public_id", models.CharField(blank=True, max_length=255, null=True)),
            ],
            options={
                "db_table": "products",
                "ordering": ["id"],
                "abstract": False,
            },
        ),
    ]
