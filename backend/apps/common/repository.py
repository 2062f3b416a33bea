import math
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, Type, TypeVar

from django.db import models

T = TypeVar('T', bound=models.Model)
U = TypeVar('U')
R = TypeVar('R')


@dataclass
class Page(Generic[U]):
    """A zero-based slice of an ordered result set plus total-count metadata."""

    items: List[U] = field(default_factory=list)
    page: int = 0
    size: int = 10
    total: int = 0

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    def map(self, fn: Callable[[U], R]) -> "Page[R]":
        return Page(
            items=[fn(item) for item in self.items],
            page=self.page,
            size=self.size,
            total=self.total,
        )


class GenericRepository(Generic[T]):
    def __init__(self, model: Type[T]):
        self.model = model

    def get(self, **filters) -> Optional[T]:
        return self.model.objects.filter(**filters).first()

    def find_by_id(self, pk: int) -> Optional[T]:
        return self.get(pk=pk)

    def exists_by_id(self, pk: int) -> bool:
        return self.model.objects.filter(pk=pk).exists()

    def save(self, obj: T) -> T:
        # Django's save() inserts when pk is unset and updates otherwise.
        obj.save()
        return obj

    def delete_by_id(self, pk: int) -> int:
        deleted, _ = self.model.objects.filter(pk=pk).delete()
        return deleted

    def paginate(self, queryset, page: int, size: int) -> Page[T]:
        total = queryset.count()
        offset = page * size
        items = list(queryset[offset:offset + size]) if offset < total else []
        return Page(items=items, page=page, size=size, total=total)
