"""Application filtering – query state to typed filter criteria."""
from catalog_query.application.filtering.filter_spec import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MAX_PAGE,
    FilterSpec,
    Gender,
    SortOption,
)
from catalog_query.application.filtering.navigation import (
    FILTER_KEYS,
    SORT_LABELS,
    ActiveFilter,
    active_filters,
    apply_sort,
    clear_filters,
    clear_filters_url,
    selected_sort,
    toggle_filter,
)
from catalog_query.application.filtering.price_bands import (
    PRICE_BANDS,
    PriceBand,
    PriceRange,
    get_price_band,
    union_price_bands,
)
from catalog_query.application.filtering.resolver import FilterParamsInput, resolve_filter_params

__all__ = [
    "ActiveFilter",
    "DEFAULT_LIMIT",
    "FILTER_KEYS",
    "FilterParamsInput",
    "FilterSpec",
    "Gender",
    "MAX_LIMIT",
    "MAX_PAGE",
    "PRICE_BANDS",
    "PriceBand",
    "PriceRange",
    "SORT_LABELS",
    "SortOption",
    "active_filters",
    "apply_sort",
    "clear_filters",
    "clear_filters_url",
    "get_price_band",
    "resolve_filter_params",
    "selected_sort",
    "toggle_filter",
    "union_price_bands",
]
