"""Query – QueryCodec: query-string parsing and serialisation.

Two multi-value conventions are supported (see :class:`ArrayFormat`)::

    color=red,blue            # ArrayFormat.COMMA (default)
    color=red&color=blue      # ArrayFormat.NONE

Parsing accepts both at once: repeated keys accumulate, and in comma mode
every value is additionally split on ``,``.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Union
from urllib.parse import quote_plus, unquote_plus

from catalog_query.kernel.errors import UnsupportedQueryInputError
from catalog_query.query.value import ArrayFormat, NormalizedQuery, QueryValue

QueryInput = Union[str, Mapping[str, Any], None]

# Characters left unescaped by ``encodeURIComponent`` besides alphanumerics and ``-_.~``.
_SAFE_CHARS = "!'()*"


def _encode(text: str) -> str:
    return quote_plus(text, safe=_SAFE_CHARS)


def _decode(text: str) -> str:
    try:
        return unquote_plus(text, errors="strict")
    except UnicodeDecodeError:
        return text


def _as_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [item if isinstance(item, str) else str(item) for item in value if item is not None]
    return [str(value)]


def _collapse(values: list[str]) -> QueryValue:
    if not values:
        return ""
    if len(values) == 1:
        return values[0]
    return tuple(values)


@dataclasses.dataclass(frozen=True)
class QueryCodec:
    """Parse and serialise URL query strings.

    Parameters
    ----------
    array_format:
        Multi-value convention used when writing (and, for ``COMMA``,
        whether values are split on ``,`` when reading).
    skip_null:
        Omit keys holding the null marker instead of writing them bare.
    skip_empty_string:
        Omit blank values instead of writing ``key=``.
    sort:
        Write keys in sorted order instead of insertion order.
    """

    array_format: ArrayFormat = ArrayFormat.COMMA
    skip_null: bool = False
    skip_empty_string: bool = False
    sort: bool = False

    def parse(self, source: QueryInput) -> NormalizedQuery:
        """Parse a query string or a key → value(s) mapping.

        Mappings (for example framework-provided search params) are written
        out with this codec's array format, dropping null and blank values,
        and parsed back so both input kinds converge on the same shape.

        Raises
        ------
        UnsupportedQueryInputError
            When *source* is neither a string, a mapping nor ``None``.
        """
        if source is None:
            return NormalizedQuery()
        if isinstance(source, NormalizedQuery):
            return source
        if isinstance(source, str):
            return self._parse_string(source)
        if isinstance(source, Mapping):
            normalizer = dataclasses.replace(self, skip_null=True, skip_empty_string=True, sort=False)
            return self._parse_string(normalizer.stringify(source))
        raise UnsupportedQueryInputError(source)

    def _parse_string(self, source: str) -> NormalizedQuery:
        text = source[1:] if source.startswith("?") else source
        result: dict[str, QueryValue] = {}

        for segment in text.split("&"):
            if not segment:
                continue
            raw_key, has_value, raw_value = segment.partition("=")
            key = _decode(raw_key)
            if not key:
                continue
            if not has_value:
                result[key] = None
                continue

            decoded = _decode(raw_value)
            if self.array_format is ArrayFormat.COMMA:
                fragments = [part.strip() for part in decoded.split(",")]
            else:
                fragments = [decoded]

            existing = [item for item in _as_list(result.get(key)) if item]
            result[key] = _collapse(existing + [item for item in fragments if item])

        return NormalizedQuery(result)

    def stringify(self, query: Mapping[str, Any]) -> str:
        keys = list(query.keys())
        if self.sort:
            keys.sort()

        segments: list[str] = []
        for key in keys:
            value = query[key]
            encoded_key = _encode(key)

            if value is None:
                if not self.skip_null:
                    segments.append(encoded_key)
                continue

            values = _as_list(value)
            if self.skip_empty_string:
                values = [item for item in values if item]

            if not values or values == [""]:
                if not self.skip_empty_string:
                    segments.append(f"{encoded_key}=")
                continue

            if self.array_format is ArrayFormat.COMMA:
                segments.append(f"{encoded_key}={','.join(_encode(item) for item in values)}")
            else:
                segments.extend(f"{encoded_key}={_encode(item)}" for item in values)

        return "&".join(segments)

    def build_url(self, path: str, query: Mapping[str, Any]) -> str:
        """Append the serialised *query* to *path*, keeping any ``#fragment`` last."""
        base, _, fragment = path.partition("#")
        suffix = f"#{fragment}" if fragment else ""
        query_string = self.stringify(query)

        if not query_string:
            return f"{base}{suffix}"

        if "?" in base:
            separator = "" if base.endswith(("?", "&")) else "&"
        else:
            separator = "?"
        return f"{base}{separator}{query_string}{suffix}"


CATALOG_CODEC = QueryCodec(skip_null=True, skip_empty_string=True)
"""Storefront convention: comma-joined values, null and blank values dropped."""


def parse_search_params(source: QueryInput) -> NormalizedQuery:
    return CATALOG_CODEC.parse(source)


def stringify_query(query: Mapping[str, Any]) -> str:
    return CATALOG_CODEC.stringify(query)


def build_url(path: str, query: Mapping[str, Any]) -> str:
    return CATALOG_CODEC.build_url(path, query)


__all__ = [
    "CATALOG_CODEC",
    "QueryCodec",
    "QueryInput",
    "build_url",
    "parse_search_params",
    "stringify_query",
]
