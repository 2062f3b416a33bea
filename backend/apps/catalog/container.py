from __future__ import annotations

from django.conf import settings

from .repositories import ProductRepository, CategoryRepository
from .services import ProductService, CategoryService


def _max_page_size():
    return getattr(settings, "CATALOG_MAX_PAGE_SIZE", None)


def build_product_service() -> ProductService:
    return ProductService(
        products=ProductRepository(),
        categories=CategoryRepository(),
        max_page_size=_max_page_size(),
    )


def build_category_service() -> CategoryService:
    return CategoryService(
        categories=CategoryRepository(),
        max_page_size=_max_page_size(),
    )
