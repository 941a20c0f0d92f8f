"""Application pagination – Page."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Sequence, TypeVar

from catalog_query.application.pagination.page_request import PageRequest

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Page(Generic[T]):
    """One window of a listing plus the size of the whole result set.

    ``total`` counts every matching item, not just ``items``; a page past
    the end has no items but still reports the real total.
    """

    items: tuple[T, ...]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        if self.total <= 0 or self.size <= 0:
            return 0
        return -(-self.total // self.size)

    @property
    def has_next(self) -> bool:
        return self.page * self.size < self.total

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        return dataclasses.replace(self, items=tuple(map(fn, self.items)))

    @classmethod
    def of(cls, items: Sequence[T], request: PageRequest) -> "Page[T]":
        """Cut the *request* window out of the full, already ordered *items*."""
        window = items[request.offset:request.offset + request.size]
        return cls(tuple(window), len(items), request.page, request.size)


__all__ = ["Page"]
