"""Application-layer errors: contract violations by calling code."""

from __future__ import annotations

from typing import Any

from catalog_query.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnsupportedQueryInputError(ApplicationError, TypeError):
    """A query parser received something that is neither a string nor a mapping."""

    default_code = "unsupported_query_input"

    def __init__(self, value: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot parse query input of type {type(value).__name__}",
            detail={"input_type": type(value).__name__},
            **kwargs,
        )
        self.input_type = type(value)


__all__ = ["ApplicationError", "UnsupportedQueryInputError"]
