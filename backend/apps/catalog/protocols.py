from __future__ import annotations

from typing import Optional, Protocol, TYPE_CHECKING

from apps.common.repository import Page

if TYPE_CHECKING:
    from .models import Category, Product


class CategoryRepositoryProtocol(Protocol):
    def find_by_id(self, pk: int) -> Optional["Category"]:
        ...

    def find_all(self, page: int, size: int) -> Page["Category"]:
        ...

    def find_by_name_containing(
        self, name: str, page: int, size: int
    ) -> Page["Category"]:
        ...

    def exists_by_id(self, pk: int) -> bool:
        ...

    def save(self, category: "Category") -> "Category":
        ...

    def delete_by_id(self, pk: int) -> int:
        ...


class ProductRepositoryProtocol(Protocol):
    def find_by_id(self, pk: int) -> Optional["Product"]:
        ...

    def find_all(self, page: int, size: int) -> Page["Product"]:
        ...

    def find_by_name_containing(
        self, name: str, page: int, size: int
    ) -> Page["Product"]:
        ...

    def find_by_category_id(
        self, category_id: int, page: int, size: int
    ) -> Page["Product"]:
        ...

    def exists_by_id(self, pk: int) -> bool:
        ...

    def save(self, product: "Product") -> "Product":
        ...

    def delete_by_id(self, pk: int) -> int:
        ...
