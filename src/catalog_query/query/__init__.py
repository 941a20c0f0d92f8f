"""Query – URL query-string state: value type, codec and mutators."""
from catalog_query.query.codec import (
    CATALOG_CODEC,
    QueryCodec,
    QueryInput,
    build_url,
    parse_search_params,
    stringify_query,
)
from catalog_query.query.mutators import (
    get_values,
    is_query_empty,
    remove_keys,
    set_value,
    toggle_value,
)
from catalog_query.query.value import ArrayFormat, NormalizedQuery, QueryValue

__all__ = [
    "ArrayFormat",
    "CATALOG_CODEC",
    "NormalizedQuery",
    "QueryCodec",
    "QueryInput",
    "QueryValue",
    "build_url",
    "get_values",
    "is_query_empty",
    "parse_search_params",
    "remove_keys",
    "set_value",
    "stringify_query",
    "toggle_value",
]
