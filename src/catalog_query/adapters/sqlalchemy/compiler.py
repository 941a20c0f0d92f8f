"""SQLAlchemy adapter – PredicateDescriptor to SQL expressions."""
from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, exists, func, or_, select
from sqlalchemy.orm import aliased

from catalog_query.adapters.sqlalchemy.models import Product, ProductVariant
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
    VARIANTS,
)

_AGGREGATES = {Aggregate.MIN: func.min, Aggregate.MAX: func.max}


class PredicateCompiler:
    """Compile descriptor predicates against :class:`Product`.

    Each existence check and aggregate ordering gets its own alias of the
    variants table, correlated to the outer product row.
    """

    def __init__(self) -> None:
        self._relations: dict[str, tuple[Any, str]] = {VARIANTS: (ProductVariant, "product_id")}

    def _related(self, relation: str) -> tuple[Any, ColumnElement[bool]]:
        try:
            model, foreign_key = self._relations[relation]
        except KeyError:
            raise ValueError(f"Unknown relation: {relation!r}") from None
        alias = aliased(model)
        return alias, getattr(alias, foreign_key) == Product.id

    def where(self, predicate: Predicate, model: Any = Product) -> ColumnElement[bool]:
        match predicate:
            case FieldEquals(field=field, value=value):
                return getattr(model, field) == value
            case FieldIn(field=field, values=values):
                return getattr(model, field).in_(values)
            case FieldCompare(field=field, op=ComparisonOp.GTE, value=value):
                return getattr(model, field) >= value
            case FieldCompare(field=field, op=ComparisonOp.LTE, value=value):
                return getattr(model, field) <= value
            case TextMatch(fields=fields, pattern=pattern, escape=escape):
                return or_(
                    *(func.coalesce(getattr(model, f), "").ilike(pattern, escape=escape) for f in fields)
                )
            case RelatedExists(relation=relation, predicate=inner):
                alias, join_condition = self._related(relation)
                return exists().where(join_condition, self.where(inner, alias))
        raise TypeError(f"Unsupported predicate: {predicate!r}")

    def aggregate(self, relation: str, field: str, aggregate: Aggregate) -> Any:
        alias, join_condition = self._related(relation)
        return select(_AGGREGATES[aggregate](getattr(alias, field))).where(join_condition).scalar_subquery()

    def order_by(self, term: OrderTerm) -> Any:
        if term.aggregate is not None and term.relation is not None:
            key = self.aggregate(term.relation, term.field, term.aggregate)
        else:
            key = getattr(Product, term.field)
        return key.desc() if term.direction is SortDirection.DESC else key.asc()


__all__ = ["PredicateCompiler"]
