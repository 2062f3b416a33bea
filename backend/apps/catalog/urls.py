from django.urls import path, register_converter
from .views import (
    CategoryCreateView,
    CategoryDetailView,
    CategoryListView,
    CategoryProductListView,
    ProductCreateView,
    ProductDetailView,
    ProductListView,
    ProductSearchView,
)


class SignedIntConverter:
    """Like ``int`` but also matches ``-5`` so the service can reject it as invalid."""

    regex = r"-?\d+"

    def to_python(self, value):
        return int(value)

    def to_url(self, value):
        return str(value)


register_converter(SignedIntConverter, "sint")

urlpatterns = [
    path("categories", CategoryListView.as_view(), name="api-categories-list"),
    path("category", CategoryCreateView.as_view(), name="api-categories-create"),
    path(
        "category/<sint:category_id>",
        CategoryDetailView.as_view(),
        name="api-categories-detail",
    ),
    path(
        "category/<sint:category_id>/products",
        CategoryProductListView.as_view(),
        name="api-categories-products",
    ),
    path("products", ProductListView.as_view(), name="api-products-list"),
    path("products/search", ProductSearchView.as_view(), name="api-products-search"),
    path("product", ProductCreateView.as_view(), name="api-products-create"),
    path(
        "product/<sint:product_id>",
        ProductDetailView.as_view(),
        name="api-products-detail",
    ),
]
