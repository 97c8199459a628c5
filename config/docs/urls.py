"""Swagger and ReDoc documentation endpoints."""

import os

from django.urls import path, re_path
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions

schema_view = get_schema_view(
    openapi.Info(
        title="Catalog API",
        default_version="v1",
        description="""
        # Catalog API Documentation

        CRUD and keyword search over store products, each with one image.

        ### Products
        - **Products** - List, create, retrieve, update, delete and search products.
          Create and update take a multipart body: a `product` JSON part and an `imageFile` part.

        ### Images
        - **Images** - Serve a product's image, inline bytes or a redirect to the media host.
        """,
        license=openapi.License(name="BSD License"),
    ),
    url=os.getenv("SWAGGER_DEFAULT_API_URL") or None,
    public=True,
    permission_classes=[permissions.AllowAny],
)

urlpatterns = [
    path("api/doc/", schema_view.with_ui("swagger", cache_timeout=0), name="schema-swagger-ui"),
    path("api/redoc/", schema_view.with_ui("redoc", cache_timeout=0), name="schema-redoc"),
    re_path(r"^api/doc(?P<format>\.json|\.yaml)$", schema_view.without_ui(cache_timeout=0), name="schema-json"),
]
