from datetime import date
from decimal import Decimal

import pytest

from catalog_app.mappers import SCALAR_FIELD_DEFAULTS, ProductMapper
from catalog_app.models import Product


@pytest.fixture()
def mapper():
    return ProductMapper()


def test_to_entity_copies_fields_and_leaves_image_unset(mapper, product_data):
    product = mapper.to_entity(dict(product_data, release_date=date(2024, 5, 1)))

    assert product.pk is None
    assert product.name == "Widget"
    assert product.price == Decimal("9.99")
    assert product.release_date == date(2024, 5, 1)
    assert product.image_data is None
    assert product.image_url is None
    assert product.image_public_id is None


def test_apply_update_overwrites_scalars_only(mapper):
    product = Product(
        pk=7,
        name="Old",
        brand="Acme",
        price=Decimal("1.00"),
        stock_quantity=3,
        product_available=True,
        image_name="old.jpg",
        image_type="image/jpeg",
        image_data=b"bytes",
    )

    mapper.apply_update({"name": "New", "price": Decimal("2.50")}, product)

    assert product.pk == 7
    assert product.name == "New"
    assert product.price == Decimal("2.50")
    assert product.brand is None
    assert product.stock_quantity == 0
    assert product.product_available is False
    assert product.image_name == "old.jpg"
    assert product.image_data == b"bytes"


def test_apply_update_ignores_unknown_and_image_keys(mapper):
    product = Product(name="Keep", image_url="https://example.com/a.jpg")

    mapper.apply_update({"name": "Keep", "image_url": None, "id": 99, "colour": "red"}, product)

    assert product.image_url == "https://example.com/a.jpg"
    assert product.pk is None
    assert not hasattr(product, "colour")


def test_to_response_omits_raw_bytes(mapper):
    product = Product(
        pk=1,
        name="Widget",
        price=Decimal("9.99"),
        image_name="w.jpg",
        image_type="image/jpeg",
        image_data=b"\xff\xd8",
        image_public_id="products/a",
    )

    data = mapper.to_response(product)

    assert data["id"] == 1
    assert data["price"] == "9.99"
    assert data["image_type"] == "image/jpeg"
    assert "image_data" not in data
    assert data["image_public_id"] == "products/a"
    assert set(SCALAR_FIELD_DEFAULTS) <= set(data)
