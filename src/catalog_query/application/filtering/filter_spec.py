"""Application filtering – FilterSpec and its enumerations."""
from __future__ import annotations

import dataclasses
from decimal import Decimal
from enum import Enum

from catalog_query.application.pagination import PageRequest
from catalog_query.kernel.ddd import ValueObject
from catalog_query.query import NormalizedQuery

DEFAULT_LIMIT = 12
MAX_LIMIT = 60
# Largest page whose offset stays an exact double and fits a 64-bit SQL integer.
MAX_PAGE = (2**53 - 1) // MAX_LIMIT


class Gender(str, Enum):
    MEN = "men"
    WOMEN = "women"
    UNISEX = "unisex"
    KIDS = "kids"


class SortOption(str, Enum):
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    LATEST = "latest"


@dataclasses.dataclass(frozen=True)
class FilterSpec(ValueObject):
    """Typed listing criteria.

    ``None`` and empty tuples mean "no constraint".  ``page`` and ``limit``
    always hold valid values: URL input is clamped by the resolver, while a
    spec built directly by code is validated strictly, like :class:`PageRequest`.
    """

    search: str | None = None
    gender: Gender | None = None
    category_ids: tuple[str, ...] = ()
    brand_ids: tuple[str, ...] = ()
    color_ids: tuple[str, ...] = ()
    price_min: Decimal | None = None
    price_max: Decimal | None = None
    sort_by: SortOption | None = None
    page: int = 1
    limit: int = DEFAULT_LIMIT

    def __post_init__(self) -> None:
        if not 1 <= self.page <= MAX_PAGE:
            raise ValueError(f"page must be between 1 and {MAX_PAGE}")
        if not 1 <= self.limit <= MAX_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_LIMIT}")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def page_request(self) -> PageRequest:
        return PageRequest(page=self.page, size=self.limit)

    def to_query(self) -> NormalizedQuery:
        """Canonical query for these criteria (synonym keys folded, defaults left out)."""
        data: dict[str, str | tuple[str, ...]] = {}
        if self.search:
            data["search"] = self.search
        if self.gender:
            data["gender"] = self.gender.value
        if self.category_ids:
            data["category"] = self.category_ids
        if self.brand_ids:
            data["brand"] = self.brand_ids
        if self.color_ids:
            data["color"] = self.color_ids
        if self.price_min is not None:
            data["priceMin"] = str(self.price_min)
        if self.price_max is not None:
            data["priceMax"] = str(self.price_max)
        if self.sort_by:
            data["sort"] = self.sort_by.value
        if self.page > 1:
            data["page"] = str(self.page)
        if self.limit != DEFAULT_LIMIT:
            data["limit"] = str(self.limit)
        return NormalizedQuery(data)


__all__ = ["DEFAULT_LIMIT", "FilterSpec", "Gender", "MAX_LIMIT", "MAX_PAGE", "SortOption"]
