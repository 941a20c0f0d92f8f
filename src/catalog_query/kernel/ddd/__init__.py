"""Kernel DDD – value objects and composable specifications."""
from catalog_query.kernel.ddd.specification import (
    AndSpecification,
    BaseSpecification,
    LambdaSpecification,
    NotSpecification,
    OrSpecification,
    all_of,
    any_of,
)
from catalog_query.kernel.ddd.value_object import ValueObject

__all__ = [
    "AndSpecification",
    "BaseSpecification",
    "LambdaSpecification",
    "NotSpecification",
    "OrSpecification",
    "ValueObject",
    "all_of",
    "any_of",
]
