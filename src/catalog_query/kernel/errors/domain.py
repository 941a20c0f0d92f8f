"""Domain errors: catalog lookups and business rules."""

from __future__ import annotations

from typing import Any

from catalog_query.kernel.errors.base import BaseError


class DomainError(BaseError):
    default_code = "domain_error"


class NotFoundError(DomainError):
    """A lookup by id found nothing visible to shoppers.

    Unpublished products are reported the same way as missing ones.
    """

    default_code = "not_found"

    def __init__(self, resource: str, identifier: Any = None, **kwargs: Any) -> None:
        if identifier is None:
            message = f"{resource} not found"
        else:
            message = f"{resource} '{identifier}' not found"
        kwargs.setdefault("detail", {"resource": resource, "identifier": identifier})
        super().__init__(message, **kwargs)
        self.resource = resource
        self.identifier = identifier


__all__ = ["DomainError", "NotFoundError"]
