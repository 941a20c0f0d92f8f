"""Application filtering – listing-page navigation helpers.

Query transitions triggered from a product listing: picking a sort order,
toggling a filter, clearing filters, and the "active filter" chips shown
above the results.  Every transition that changes the result set also
drops ``page`` so the user lands on the first page.
"""
from __future__ import annotations

import dataclasses
from typing import Mapping

from catalog_query.application.filtering.price_bands import get_price_band
from catalog_query.application.filtering.resolver import (
    BRAND_KEYS,
    CATEGORY_KEYS,
    COLOR_KEYS,
    PRICE_BAND_KEYS,
)
from catalog_query.query import (
    NormalizedQuery,
    QueryValue,
    build_url,
    get_values,
    remove_keys,
    set_value,
    toggle_value,
)

FILTER_KEYS: tuple[str, ...] = (
    "search",
    "gender",
    *CATEGORY_KEYS,
    *BRAND_KEYS,
    *COLOR_KEYS,
    *PRICE_BAND_KEYS,
    "priceMin",
    "priceMax",
    "page",
)

SORT_LABELS: dict[str, str] = {
    "featured": "Featured",
    "latest": "Newest",
    "newest": "Newest",
    "price_desc": "Price: High → Low",
    "price_asc": "Price: Low → High",
}

DEFAULT_SORT = "featured"


@dataclasses.dataclass(frozen=True)
class ActiveFilter:
    """A removable filter chip."""

    key: str
    value: str
    label: str


def selected_sort(query: Mapping[str, QueryValue]) -> str:
    values = get_values(query, "sort")
    return values[0] if values else DEFAULT_SORT


def apply_sort(query: Mapping[str, QueryValue], value: str | None) -> NormalizedQuery:
    """Select a sort order; ``featured`` is the default and is left out of the URL."""
    sort = None if not value or value == DEFAULT_SORT else value
    return remove_keys(set_value(query, "sort", sort), ["page"])


def toggle_filter(query: Mapping[str, QueryValue], key: str, value: str) -> NormalizedQuery:
    return remove_keys(toggle_value(query, key, value), ["page"])


def clear_filters(query: Mapping[str, QueryValue]) -> NormalizedQuery:
    """Drop every filter key, keeping sort and page size."""
    return remove_keys(query, FILTER_KEYS)


def clear_filters_url(path: str, query: Mapping[str, QueryValue]) -> str:
    return build_url(path, clear_filters(query))


def active_filters(query: Mapping[str, QueryValue]) -> tuple[ActiveFilter, ...]:
    chips: list[ActiveFilter] = []

    searches = get_values(query, "search")
    search = searches[0].strip() if searches else ""
    if search:
        chips.append(ActiveFilter("search", search, f"Search: {search}"))

    for value in get_values(query, "gender"):
        chips.append(ActiveFilter("gender", value, f"Gender: {value}"))

    groups = (
        ("category", "Category", CATEGORY_KEYS),
        ("brand", "Brand", BRAND_KEYS),
        ("color", "Color", COLOR_KEYS),
    )
    for chip_key, title, keys in groups:
        for key in keys:
            for value in get_values(query, key):
                chips.append(ActiveFilter(chip_key, value, f"{title}: {value}"))

    # Unknown band ids filter nothing, so they get no chip.
    for key in PRICE_BAND_KEYS:
        for value in get_values(query, key):
            band = get_price_band(value)
            if band is not None:
                chips.append(ActiveFilter("price", value, f"Price: {band.label}"))

    price_min = query.get("priceMin")
    if isinstance(price_min, str) and price_min:
        chips.append(ActiveFilter("priceMin", price_min, f"Min price: ${price_min}"))

    price_max = query.get("priceMax")
    if isinstance(price_max, str) and price_max:
        chips.append(ActiveFilter("priceMax", price_max, f"Max price: ${price_max}"))

    return tuple(chips)


__all__ = [
    "ActiveFilter",
    "DEFAULT_SORT",
    "FILTER_KEYS",
    "SORT_LABELS",
    "active_filters",
    "apply_sort",
    "clear_filters",
    "clear_filters_url",
    "selected_sort",
    "toggle_filter",
]
