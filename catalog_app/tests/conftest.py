import json
from decimal import Decimal

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.test import APIClient

from core.schemas import ImagePayload
from catalog_app.media.cloudinary_store import CloudinaryMediaStore
from catalog_app.media.inline import InlineMediaStore
from catalog_app.services import get_product_service

from .fakes import JPEG_BYTES, PNG_BYTES, FakeUploader


@pytest.fixture()
def api_client():
    return APIClient()


@pytest.fixture()
def product_payload():
    return {
        "name": "Widget",
        "description": "A small widget for everyday use",
        "brand": "Acme",
        "price": "9.99",
        "category": "Gadgets",
        "release_date": "2024-05-01",
        "product_available": True,
        "stock_quantity": 5,
    }


@pytest.fixture()
def product_data():
    return {
        "name": "Widget",
        "description": "A small widget for everyday use",
        "brand": "Acme",
        "price": Decimal("9.99"),
        "category": "Gadgets",
        "release_date": None,
        "product_available": True,
        "stock_quantity": 5,
    }


@pytest.fixture()
def jpeg_image():
    return ImagePayload(content=JPEG_BYTES, filename="widget.jpg", content_type="image/jpeg")


@pytest.fixture()
def png_image():
    return ImagePayload(content=PNG_BYTES, filename="widget-xl.png", content_type="image/png")


@pytest.fixture()
def image_file():
    def _create(name="widget.jpg", content=JPEG_BYTES, content_type="image/jpeg"):
        return SimpleUploadedFile(name, content, content_type=content_type)

    return _create


@pytest.fixture()
def multipart_body(image_file):
    def _build(payload, *, with_image=True, **image_kwargs):
        body = {"product": json.dumps(payload)}
        if with_image:
            body["imageFile"] = image_file(**image_kwargs)
        return body

    return _build


@pytest.fixture()
def fake_uploader():
    return FakeUploader()


@pytest.fixture()
def cloudinary_store(fake_uploader):
    return CloudinaryMediaStore(folder="products", uploader=fake_uploader)


@pytest.fixture()
def inline_service():
    return get_product_service(media_store=InlineMediaStore())


@pytest.fixture()
def cloudinary_service(cloudinary_store):
    return get_product_service(media_store=cloudinary_store)


@pytest.fixture()
def use_cloudinary(mocker, cloudinary_store):
    """Route the API views through the Cloudinary store backed by the fake uploader."""
    service = get_product_service(media_store=cloudinary_store)
    mocker.patch("catalog_app.views.get_product_service", return_value=service)
    return service
