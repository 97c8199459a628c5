from django.urls import path

from .views import (
    ProductDetailView,
    ProductImageView,
    ProductListCreateView,
    ProductSearchView,
)

urlpatterns = [
    path("products/", ProductListCreateView.as_view(), name="product-list"),
    path("products/search/", ProductSearchView.as_view(), name="product-search"),
    path("products/<int:pk>/", ProductDetailView.as_view(), name="product-detail"),
    path("products/<int:pk>/image/", ProductImageView.as_view(), name="product-image"),
]
