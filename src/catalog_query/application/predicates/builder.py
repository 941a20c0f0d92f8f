"""Application predicates – QueryPredicateBuilder."""
from __future__ import annotations

from catalog_query.application.filtering import FilterSpec, SortOption
from catalog_query.application.pagination import SortDirection
from catalog_query.application.predicates.descriptor import (
    Aggregate,
    ComparisonOp,
    FieldCompare,
    FieldEquals,
    FieldIn,
    OrderTerm,
    Predicate,
    PredicateDescriptor,
    RelatedExists,
    TextMatch,
)

VARIANTS = "variants"
LIKE_ESCAPE = "\\"

_NEWEST_FIRST = OrderTerm("created_at", SortDirection.DESC)


def escape_like(text: str, escape: str = LIKE_ESCAPE) -> str:
    """Escape LIKE wildcards in *text* so it matches literally."""
    return (
        text.replace(escape, escape + escape)
        .replace("%", escape + "%")
        .replace("_", escape + "_")
    )


def _order_by(sort_by: SortOption | None) -> tuple[OrderTerm, ...]:
    if sort_by is SortOption.PRICE_ASC:
        return (OrderTerm("price", SortDirection.ASC, Aggregate.MIN, VARIANTS), _NEWEST_FIRST)
    if sort_by is SortOption.PRICE_DESC:
        return (OrderTerm("price", SortDirection.DESC, Aggregate.MAX, VARIANTS), _NEWEST_FIRST)
    return (_NEWEST_FIRST,)


def build_predicate_descriptor(spec: FilterSpec) -> PredicateDescriptor:
    """Translate *spec* into a :class:`PredicateDescriptor`.

    Only published products are ever matched.  Colour and price constraints
    are existence checks over variants, each evaluated on its own: a product
    matches ``price_min`` and ``price_max`` as long as *some* variant is at or
    above the minimum and *some* variant is at or below the maximum.
    """
    where: list[Predicate] = [FieldEquals("is_published", True)]

    if spec.search:
        where.append(TextMatch(("name", "description"), f"%{escape_like(spec.search)}%", LIKE_ESCAPE))

    if spec.category_ids:
        where.append(FieldIn("category_id", spec.category_ids))

    if spec.brand_ids:
        where.append(FieldIn("brand_id", spec.brand_ids))

    if spec.gender is not None:
        where.append(FieldEquals("gender", spec.gender.value))

    if spec.color_ids:
        where.append(RelatedExists(VARIANTS, FieldIn("color_id", spec.color_ids)))

    if spec.price_min is not None:
        where.append(RelatedExists(VARIANTS, FieldCompare("price", ComparisonOp.GTE, spec.price_min)))

    if spec.price_max is not None:
        where.append(RelatedExists(VARIANTS, FieldCompare("price", ComparisonOp.LTE, spec.price_max)))

    return PredicateDescriptor(
        where=tuple(where),
        order_by=_order_by(spec.sort_by),
        offset=spec.offset,
        limit=spec.limit,
        color_filter_ids=spec.color_ids,
    )


__all__ = ["LIKE_ESCAPE", "VARIANTS", "build_predicate_descriptor", "escape_like"]
