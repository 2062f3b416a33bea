from typing import Optional

from apps.common.repository import GenericRepository, Page
from .models import Category, Product


class CategoryRepository(GenericRepository[Category]):
    def __init__(self):
        super().__init__(Category)

    def find_all(self, page: int, size: int) -> Page[Category]:
        return self.paginate(self.model.objects.order_by("id"), page, size)

    def find_by_name_containing(self, name: str, page: int, size: int) -> Page[Category]:
        qs = self.model.objects.filter(name__icontains=name).order_by("id")
        return self.paginate(qs, page, size)


class ProductRepository(GenericRepository[Product]):
    def __init__(self):
        super().__init__(Product)

    def _base_queryset(self):
        """Products with their category joined so DTO mapping stays a single query."""
        return self.model.objects.select_related("category").order_by("id")

    def find_by_id(self, pk: int) -> Optional[Product]:
        return self._base_queryset().filter(pk=pk).first()

    def find_all(self, page: int, size: int) -> Page[Product]:
        return self.paginate(self._base_queryset(), page, size)

    def find_by_name_containing(self, name: str, page: int, size: int) -> Page[Product]:
        return self.paginate(
            self._base_queryset().filter(name__icontains=name), page, size
        )

    def find_by_category_id(self, category_id: int, page: int, size: int) -> Page[Product]:
        return self.paginate(
            self._base_queryset().filter(category_id=category_id), page, size
        )
