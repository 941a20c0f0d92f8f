"""Testing – Hypothesis strategies for query state.

Requires the ``hypothesis`` package:

    pip install hypothesis
    # or
    pip install "catalog-query[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

    from catalog_query.query import NormalizedQuery


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


# Letters, digits and URL-significant punctuation; commas are excluded
# because the comma convention uses them as the value separator.
_ALPHABET = "abcxyzABC019 -_.~!*'()&=?#%+/:;@$"


def query_key_strategy() -> "SearchStrategy[str]":
    """Non-empty query keys, including characters that must be percent-encoded."""
    st = _require_hypothesis()
    return st.text(alphabet=_ALPHABET, min_size=1, max_size=12)


def query_value_strategy() -> "SearchStrategy[str]":
    """Non-empty values without surrounding whitespace (which parsing trims)."""
    st = _require_hypothesis()
    return st.text(alphabet=_ALPHABET, min_size=1, max_size=12).filter(
        lambda value: value == value.strip() and value != ""
    )


def normalized_query_strategy(*, max_keys: int = 6) -> "SearchStrategy[NormalizedQuery]":
    """Queries whose values are scalars or 2+ item tuples, never null or blank.

    Every drawn query survives ``parse(stringify(query))`` unchanged under
    the comma convention.

    Example::

        @given(normalized_query_strategy())
        def test_round_trip(query):
            assert codec.parse(codec.stringify(query)) == query
    """
    from catalog_query.query import NormalizedQuery

    st = _require_hypothesis()
    value = query_value_strategy()
    values = st.one_of(value, st.lists(value, min_size=2, max_size=4).map(tuple))
    return st.dictionaries(query_key_strategy(), values, max_size=max_keys).map(NormalizedQuery)


__all__ = ["normalized_query_strategy", "query_key_strategy", "query_value_strategy"]
