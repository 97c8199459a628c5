"""Decoding of product create/update requests."""

import json
from decimal import Decimal
from typing import Any, Dict, Optional

from core.exceptions import ImageReadError, InvalidProductInput
from core.schemas import ImagePayload
from .serializers import ProductRequestSerializer

PRODUCT_PART = "product"
IMAGE_PART = "imageFile"

# Shared by every request; JSONDecoder holds no per-call state.
PRODUCT_JSON_DECODER = json.JSONDecoder(parse_float=Decimal)

_FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


def decode_product_json(raw: Any) -> Dict[str, Any]:
    if hasattr(raw, "read"):
        try:
            raw = raw.read()
        except OSError as exc:
            raise ImageReadError(f"Error processing request: {exc}") from exc
    try:
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8")
        decoded = PRODUCT_JSON_DECODER.decode(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidProductInput(f"Error parsing product JSON: {exc}") from exc

    if not isinstance(decoded, dict):
        raise InvalidProductInput("Product JSON must be an object.")
    return decoded


def read_product_data(request) -> Dict[str, Any]:
    """Return validated product fields from a multipart part or a JSON body."""
    content_type = (request.content_type or "").split(";")[0].strip().lower()

    if content_type in _FORM_CONTENT_TYPES:
        raw = request.data.get(PRODUCT_PART)
        if raw in (None, ""):
            raise InvalidProductInput(f"Missing '{PRODUCT_PART}' part.")
        data = decode_product_json(raw)
    else:
        data = request.data
        if not isinstance(data, dict):
            raise InvalidProductInput("Product JSON must be an object.")

    serializer = ProductRequestSerializer(data=data)
    serializer.is_valid(raise_exception=True)
    return dict(serializer.validated_data)


def read_image(request) -> Optional[ImagePayload]:
    return ImagePayload.from_upload(request.FILES.get(IMAGE_PART))
