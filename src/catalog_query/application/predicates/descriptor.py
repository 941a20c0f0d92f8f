"""Application predicates – backend-agnostic query descriptor.

A :class:`PredicateDescriptor` says *what* to fetch without saying *how*:
a conjunction of predicates over product fields (or over related variant
rows), an ordering, and an offset/limit window.  Executors translate it for
a concrete backend (SQL, an in-memory list, a search index).
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Union

from catalog_query.application.pagination import PageRequest, SortDirection
from catalog_query.kernel.ddd import ValueObject


class ComparisonOp(str, Enum):
    GTE = "gte"
    LTE = "lte"


class Aggregate(str, Enum):
    MIN = "min"
    MAX = "max"


@dataclasses.dataclass(frozen=True)
class FieldEquals:
    field: str
    value: Any


@dataclasses.dataclass(frozen=True)
class FieldIn:
    field: str
    values: tuple[Any, ...]


@dataclasses.dataclass(frozen=True)
class FieldCompare:
    """Inclusive comparison of a field against a value."""

    field: str
    op: ComparisonOp
    value: Any


@dataclasses.dataclass(frozen=True)
class TextMatch:
    """Case-insensitive LIKE pattern matched against any of ``fields``.

    ``%`` matches any run of characters, ``_`` a single character; a
    character preceded by ``escape`` matches itself.  Missing field values
    match as the empty string.
    """

    fields: tuple[str, ...]
    pattern: str
    escape: str = "\\"


@dataclasses.dataclass(frozen=True)
class RelatedExists:
    """At least one row of ``relation`` satisfies ``predicate``."""

    relation: str
    predicate: "Predicate"


Predicate = Union[FieldEquals, FieldIn, FieldCompare, TextMatch, RelatedExists]


@dataclasses.dataclass(frozen=True)
class OrderTerm:
    """One ordering key.

    With ``aggregate`` set, the key is the aggregate of ``field`` over the
    rows of ``relation`` (for example the lowest variant price).
    """

    field: str
    direction: SortDirection = SortDirection.ASC
    aggregate: Aggregate | None = None
    relation: str | None = None


@dataclasses.dataclass(frozen=True)
class PredicateDescriptor(ValueObject):
    where: tuple[Predicate, ...]
    order_by: tuple[OrderTerm, ...]
    offset: int
    limit: int
    color_filter_ids: tuple[str, ...] = ()

    @property
    def page_request(self) -> PageRequest:
        return PageRequest.from_offset(self.offset, self.limit)


__all__ = [
    "Aggregate",
    "ComparisonOp",
    "FieldCompare",
    "FieldEquals",
    "FieldIn",
    "OrderTerm",
    "Predicate",
    "PredicateDescriptor",
    "RelatedExists",
    "TextMatch",
]
