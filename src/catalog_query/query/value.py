"""Query – NormalizedQuery value type and ArrayFormat."""
from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Iterator, Mapping, Union

QueryValue = Union[str, tuple[str, ...], None]
"""A stored query value.

* ``None`` – the *null marker*: the key was present without ``=``.
* ``str`` – a single value, possibly ``""`` (key present but blank).
* ``tuple[str, ...]`` – two or more values.

Absent keys are simply not in the mapping.
"""


class ArrayFormat(str, Enum):
    """How multi-valued keys are written to a query string."""

    COMMA = "comma"
    """``color=red,blue``"""
    NONE = "none"
    """``color=red&color=blue`` (repeated keys)."""


def _coerce(value: Any) -> QueryValue | tuple[()]:
    if value is None or isinstance(value, str):
        return value
    items = tuple(value)
    if len(items) == 1:
        return items[0]
    return items


class NormalizedQuery(Mapping[str, QueryValue]):
    """Immutable, insertion-ordered mapping of query keys to values.

    Sequences are stored as tuples; a one-item sequence collapses to its
    scalar and a key given an empty sequence is dropped, so every key maps to
    exactly one of the three shapes described by :data:`QueryValue`.

    Equality follows mapping semantics (key order is ignored) and instances
    are hashable, so callers may memoize on them::

        query = NormalizedQuery({"color": ["red", "blue"], "page": "2"})
        query["color"]        # ('red', 'blue')
        query.values_for("page")  # ('2',)
    """

    __slots__ = ("_data",)

    def __init__(
        self,
        data: Mapping[str, Any] | Iterable[tuple[str, Any]] = (),
    ) -> None:
        items = data.items() if isinstance(data, Mapping) else data
        clean: dict[str, QueryValue] = {}
        for key, raw in items:
            value = _coerce(raw)
            if value == ():
                clean.pop(key, None)
                continue
            clean[key] = value  # type: ignore[assignment]
        self._data = clean

    def __getitem__(self, key: str) -> QueryValue:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"NormalizedQuery({self._data!r})"

    def values_for(self, key: str) -> tuple[str, ...]:
        """Non-empty values stored under *key*; ``()`` when absent, null or blank."""
        value = self._data.get(key)
        if value is None:
            return ()
        if isinstance(value, str):
            return (value,) if value else ()
        return tuple(item for item in value if item)

    def first(self, key: str) -> str | None:
        found = self.values_for(key)
        return found[0] if found else None

    def is_null(self, key: str) -> bool:
        """``True`` when *key* is present as a bare key (no ``=``)."""
        return key in self._data and self._data[key] is None

    def to_dict(self) -> dict[str, QueryValue]:
        return dict(self._data)


__all__ = ["ArrayFormat", "NormalizedQuery", "QueryValue"]
