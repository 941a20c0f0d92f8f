"""Testing – reusable helpers for property-based tests of query state."""
from catalog_query.testing.strategies import (
    normalized_query_strategy,
    query_key_strategy,
    query_value_strategy,
)

__all__ = ["normalized_query_strategy", "query_key_strategy", "query_value_strategy"]
