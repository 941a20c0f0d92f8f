"""In-memory adapter – predicates and ordering evaluated on Python objects."""
from __future__ import annotations

import re
from typing import Any, Callable

from catalog_query.application.pagination import SortDirection
from catalog_query.application.predicates import (
    Aggregate,
    ComparisonOp,
    FieldCompare,
    FieldEquals,
    FieldIn,
    OrderTerm,
    Predicate,
    RelatedExists,
    TextMatch,
)
from catalog_query.kernel.ddd import BaseSpecification, LambdaSpecification, all_of


def like_to_regex(pattern: str, escape: str = "\\") -> re.Pattern[str]:
    """Compile a LIKE *pattern* into a case-insensitive full-match regex."""
    parts: list[str] = []
    chars = iter(pattern)
    for char in chars:
        if escape and char == escape:
            literal = next(chars, escape)
            parts.append(re.escape(literal))
        elif char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


def to_specification(predicate: Predicate) -> BaseSpecification[Any]:
    """Build a specification that evaluates *predicate* against a record."""
    match predicate:
        case FieldEquals(field=field, value=value):
            return LambdaSpecification(lambda c: getattr(c, field) == value, name=f"{field}_eq")
        case FieldIn(field=field, values=values):
            allowed = frozenset(values)
            return LambdaSpecification(lambda c: getattr(c, field) in allowed, name=f"{field}_in")
        case FieldCompare(field=field, op=ComparisonOp.GTE, value=value):
            return LambdaSpecification(
                lambda c: getattr(c, field) is not None and getattr(c, field) >= value,
                name=f"{field}_gte",
            )
        case FieldCompare(field=field, op=ComparisonOp.LTE, value=value):
            return LambdaSpecification(
                lambda c: getattr(c, field) is not None and getattr(c, field) <= value,
                name=f"{field}_lte",
            )
        case TextMatch(fields=fields, pattern=pattern, escape=escape):
            regex = like_to_regex(pattern, escape)
            return LambdaSpecification(
                lambda c: any(regex.fullmatch(str(getattr(c, f) or "")) for f in fields),
                name="text_match",
            )
        case RelatedExists(relation=relation, predicate=inner):
            inner_spec = to_specification(inner)
            return LambdaSpecification(
                lambda c: any(inner_spec.is_satisfied_by(row) for row in getattr(c, relation)),
                name=f"{relation}_exists",
            )
    raise TypeError(f"Unsupported predicate: {predicate!r}")


def combine(predicates: tuple[Predicate, ...]) -> BaseSpecification[Any]:
    return all_of(to_specification(p) for p in predicates)


def _sort_key(term: OrderTerm) -> Callable[[Any], Any]:
    if term.aggregate is None:
        return lambda item: getattr(item, term.field)

    reduce = min if term.aggregate is Aggregate.MIN else max

    def key(item: Any) -> Any:
        values = [getattr(row, term.field) for row in getattr(item, term.relation or "")]
        return reduce(values) if values else 0

    return key


def sort_records(items: list[Any], order_by: tuple[OrderTerm, ...]) -> list[Any]:
    """Stable multi-key sort: the first term is the primary key."""
    result = list(items)
    for term in reversed(order_by):
        result.sort(key=_sort_key(term), reverse=term.direction is SortDirection.DESC)
    return result


__all__ = ["combine", "like_to_regex", "sort_records", "to_specification"]
