"""Application predicates – FilterSpec to backend-agnostic query descriptor."""
from catalog_query.application.predicates.builder import (
    LIKE_ESCAPE,
    VARIANTS,
    build_predicate_descriptor,
    escape_like,
)
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

__all__ = [
    "Aggregate",
    "ComparisonOp",
    "FieldCompare",
    "FieldEquals",
    "FieldIn",
    "LIKE_ESCAPE",
    "OrderTerm",
    "Predicate",
    "PredicateDescriptor",
    "RelatedExists",
    "TextMatch",
    "VARIANTS",
    "build_predicate_descriptor",
    "escape_like",
]
