"""Kernel – framework-agnostic building blocks."""

from catalog_query.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    NotFoundError,
    UnsupportedQueryInputError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "NotFoundError",
    "UnsupportedQueryInputError",
]
