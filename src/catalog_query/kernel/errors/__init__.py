"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                  (domain.py)
    │   └── NotFoundError
    └── ApplicationError             (application.py)
        └── UnsupportedQueryInputError   (also a ``TypeError``)

Malformed *user* input (query strings, numbers, unknown ids) never raises;
these errors signal contract violations by the calling code.
"""

from catalog_query.kernel.errors.application import (
    ApplicationError,
    UnsupportedQueryInputError,
)
from catalog_query.kernel.errors.base import BaseError
from catalog_query.kernel.errors.domain import DomainError, NotFoundError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "NotFoundError",
    "UnsupportedQueryInputError",
]
