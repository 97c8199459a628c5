"""Centralized mapping of exceptions to structured API error responses."""

import logging
from http import HTTPStatus
from typing import Any, Dict, Tuple, Type

from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from core.exceptions import (
    CatalogError,
    ImageReadError,
    InvalidProductInput,
    MediaStoreError,
    ProductNotFound,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"

# Checked in order, so subclasses must precede their bases.
_STATUS_BY_ERROR: Tuple[Tuple[Type[CatalogError], int], ...] = (
    (ProductNotFound, status.HTTP_404_NOT_FOUND),
    (InvalidProductInput, status.HTTP_400_BAD_REQUEST),
    (ImageReadError, status.HTTP_400_BAD_REQUEST),
    (MediaStoreError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(exc: CatalogError) -> int:
    for error_class, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def build_error_body(message: str, status_code: int) -> Dict[str, Any]:
    return {
        "timestamp": timezone.now().isoformat(),
        "message": message,
        "status": status_code,
        "error": HTTPStatus(status_code).phrase,
    }


def catalog_exception_handler(exc, context):
    """DRF ``EXCEPTION_HANDLER`` rendering every failure with the same shape."""

    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown view"

    if isinstance(exc, CatalogError):
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error("%s failed in %s: %s", exc.__class__.__name__, view_name, exc)
        else:
            logger.info("%s in %s: %s", exc.__class__.__name__, view_name, exc)
        set_rollback()
        return Response(build_error_body(str(exc), status_code), status=status_code)

    response = exception_handler(exc, context)
    if response is not None:
        detail = response.data
        if isinstance(exc, ValidationError):
            body = build_error_body("Invalid request data", response.status_code)
            body["details"] = detail
        else:
            message = detail.get("detail", str(exc)) if isinstance(detail, dict) else str(exc)
            body = build_error_body(str(message), response.status_code)
        response.data = body
        return response

    logger.exception("Unexpected error in %s", view_name)
    set_rollback()
    return Response(
        build_error_body(GENERIC_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
