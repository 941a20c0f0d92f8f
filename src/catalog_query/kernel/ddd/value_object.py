"""ValueObject base class."""

from __future__ import annotations

import dataclasses
from typing import Any, TypeVar

TValue = TypeVar("TValue", bound="ValueObject")


@dataclasses.dataclass(frozen=True)
class ValueObject:
    """Base class for immutable request-scoped values.

    Subclasses should be ``@dataclass(frozen=True)``.  Equality and hashing
    are based on field values, so two values built from the same input
    compare equal and can be used as memoization keys.
    """

    def copy_with(self: TValue, **changes: Any) -> TValue:
        """Return a new instance with given fields replaced."""
        return dataclasses.replace(self, **changes)


__all__ = ["ValueObject"]
