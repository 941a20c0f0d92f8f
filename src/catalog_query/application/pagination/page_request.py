"""Application pagination – PageRequest, SortDirection."""
from __future__ import annotations

import dataclasses
from enum import Enum

_SIZE_LIMIT = 1000


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclasses.dataclass(frozen=True)
class PageRequest:
    """Offset-based pagination window.

    Unlike values resolved from a URL (which are clamped), a ``PageRequest``
    built directly by code is validated strictly.
    """

    page: int = 1
    size: int = 20

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be >= 1")
        if self.size < 1 or self.size > _SIZE_LIMIT:
            raise ValueError(f"size must be between 1 and {_SIZE_LIMIT}")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @classmethod
    def from_offset(cls, offset: int, limit: int) -> "PageRequest":
        """Rebuild the page request that produced an ``offset``/``limit`` pair."""
        return cls(page=offset // limit + 1, size=limit)


__all__ = ["PageRequest", "SortDirection"]
