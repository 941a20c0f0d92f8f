"""Query – pure mutators deriving a new query from an old one.

None of these functions modify their input; each returns a new
:class:`~catalog_query.query.value.NormalizedQuery`.
"""
from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from catalog_query.query.value import NormalizedQuery, QueryValue


def get_values(query: Mapping[str, QueryValue], key: str) -> tuple[str, ...]:
    """Return the non-empty values under *key* (``()`` if absent, null or blank)."""
    value = query.get(key)
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    return tuple(item for item in value if item)


def set_value(
    query: Mapping[str, QueryValue],
    key: str,
    value: str | Sequence[str] | None,
) -> NormalizedQuery:
    """Replace the value(s) under *key*.

    ``None``, ``""`` and sequences holding only blank strings remove the key.
    """
    data = dict(query.items())

    if isinstance(value, str):
        clean: tuple[str, ...] = (value,) if value else ()
    elif value is None:
        clean = ()
    else:
        clean = tuple(item for item in value if item)

    if clean:
        data[key] = clean
    else:
        data.pop(key, None)
    return NormalizedQuery(data)


def toggle_value(query: Mapping[str, QueryValue], key: str, value: str) -> NormalizedQuery:
    """Add *value* under *key* if missing, remove it otherwise."""
    current = list(dict.fromkeys(get_values(query, key)))
    if value in current:
        current.remove(value)
    else:
        current.append(value)
    return set_value(query, key, current)


def remove_keys(query: Mapping[str, QueryValue], keys: Iterable[str]) -> NormalizedQuery:
    drop = set(keys)
    return NormalizedQuery((key, value) for key, value in query.items() if key not in drop)


def is_query_empty(query: Mapping[str, QueryValue]) -> bool:
    return len(query) == 0


__all__ = ["get_values", "is_query_empty", "remove_keys", "set_value", "toggle_value"]
