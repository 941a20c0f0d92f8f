"""Application filtering – FilterParamsResolver.

Turns URL query state into a :class:`FilterSpec`.  Resolution is lenient:
malformed numbers, unknown sort keys, unknown price bands and blank text
are dropped (and logged at debug level) instead of raising, so a corrupt
URL degrades to an unfiltered first page.

Recognised keys::

    search                          free text
    gender                          men | women | unisex | kids
    sort | sortBy                   featured | newest | latest | price_asc | price_desc
    category | categoryId | categoryIds
    brand | brandId | brandIds
    color | colorId | colorIds
    price | priceId | priceIds      price band ids (see price_bands)
    priceMin, priceMax              numbers
    page                            number, clamped to [1, MAX_PAGE]
    limit                           number, clamped to [1, 60]

A number is malformed unless it is finite as a double, so ``1e400`` counts as
malformed rather than as a 401-digit page.
"""
from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping, Union

from catalog_query.application.filtering.filter_spec import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    MAX_PAGE,
    FilterSpec,
    Gender,
    SortOption,
)
from catalog_query.application.filtering.price_bands import get_price_band, union_price_bands
from catalog_query.kernel.errors import UnsupportedQueryInputError
from catalog_query.observability.logging import get_logger
from catalog_query.query import parse_search_params

logger = get_logger(__name__)

FilterParamsInput = Union[str, Mapping[str, Any], Iterable[tuple[str, Any]], None]

CATEGORY_KEYS = ("category", "categoryId", "categoryIds")
BRAND_KEYS = ("brand", "brandId", "brandIds")
COLOR_KEYS = ("color", "colorId", "colorIds")
PRICE_BAND_KEYS = ("price", "priceId", "priceIds")

_SORT_ALIASES = {"newest": SortOption.LATEST.value}
_DEFAULT_SORT = "featured"


def _raw_items(params: FilterParamsInput) -> Iterable[tuple[str, Any]]:
    if params is None:
        return ()
    if isinstance(params, str):
        return parse_search_params(params).items()
    if isinstance(params, (bytes, bytearray)):
        raise UnsupportedQueryInputError(params)
    multi_items = getattr(params, "multi_items", None)
    if callable(multi_items):
        return multi_items()
    if isinstance(params, Mapping):
        return params.items()
    if isinstance(params, Iterable):
        return params
    raise UnsupportedQueryInputError(params)


def _normalize(params: FilterParamsInput) -> dict[str, list[str]]:
    """Flatten every value and split it on commas, dropping blanks."""
    values: dict[str, list[str]] = {}
    for key, raw in _raw_items(params):
        if raw is None:
            continue
        items = raw if isinstance(raw, (list, tuple)) else [raw]
        for item in items:
            if item is None:
                continue
            parts = [part.strip() for part in str(item).split(",")]
            parts = [part for part in parts if part]
            if parts:
                values.setdefault(key, []).extend(parts)
    return values


def _first(values: Mapping[str, list[str]], key: str) -> str | None:
    found = values.get(key)
    return found[0] if found else None


def _collect(values: Mapping[str, list[str]], keys: Iterable[str]) -> tuple[str, ...]:
    collected: list[str] = []
    for key in keys:
        collected.extend(values.get(key, ()))
    return tuple(dict.fromkeys(collected))


def _parse_number(value: str | None, *, field: str) -> Decimal | None:
    if value is None:
        return None
    try:
        number = Decimal(value)
    except InvalidOperation:
        logger.debug("filter_params.malformed_number", field=field, value=value)
        return None
    if not number.is_finite() or math.isinf(float(number)):
        logger.debug("filter_params.malformed_number", field=field, value=value)
        return None
    return number


def _parse_sort(value: str | None) -> SortOption | None:
    if value is None or value == _DEFAULT_SORT:
        return None
    value = _SORT_ALIASES.get(value, value)
    try:
        return SortOption(value)
    except ValueError:
        logger.debug("filter_params.unknown_sort", value=value)
        return None


def _parse_gender(value: str | None) -> Gender | None:
    if not value:
        return None
    try:
        return Gender(value.lower())
    except ValueError:
        logger.debug("filter_params.unknown_gender", value=value)
        return None


def _resolve_price(values: Mapping[str, list[str]]) -> tuple[Decimal | None, Decimal | None]:
    price_min = _parse_number(_first(values, "priceMin"), field="priceMin")
    price_max = _parse_number(_first(values, "priceMax"), field="priceMax")

    bands = []
    for band_id in _collect(values, PRICE_BAND_KEYS):
        band = get_price_band(band_id)
        if band is None:
            logger.debug("filter_params.unknown_price_band", value=band_id)
            continue
        bands.append(band)

    selected = union_price_bands(bands)
    if selected is not None:
        price_min = selected.minimum if price_min is None else min(price_min, selected.minimum)
        if selected.unbounded:
            price_max = None
        elif selected.maximum is not None:
            price_max = selected.maximum if price_max is None else max(price_max, selected.maximum)

    if price_min is not None and price_min < 0:
        price_min = Decimal(0)
    return price_min, price_max


def _resolve_int(value: Decimal | None, default: int, *, ceiling: int) -> int:
    if value is None:
        return default
    return math.floor(min(value, ceiling))


def resolve_filter_params(
    params: FilterParamsInput,
    *,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> FilterSpec:
    """Resolve query *params* into a :class:`FilterSpec`.

    *params* may be a query string, a :class:`~catalog_query.query.NormalizedQuery`,
    any ``key -> str | list[str] | None`` mapping, a framework multi-dict
    exposing ``multi_items()``, or an iterable of ``(key, value)`` pairs.

    *max_limit* can only tighten the page-size cap of 60, never raise it.

    Raises
    ------
    UnsupportedQueryInputError
        When *params* is none of the above.
    """
    values = _normalize(params)

    search = (_first(values, "search") or "").strip() or None
    gender = _parse_gender((_first(values, "gender") or "").strip())
    sort_by = _parse_sort(_first(values, "sort") or _first(values, "sortBy"))
    price_min, price_max = _resolve_price(values)

    max_limit = min(max_limit, MAX_LIMIT)
    page = _resolve_int(_parse_number(_first(values, "page"), field="page"), 1, ceiling=MAX_PAGE)
    page = max(page, 1)
    limit = _resolve_int(
        _parse_number(_first(values, "limit"), field="limit"), default_limit, ceiling=max_limit
    )
    limit = max(1, min(limit, max_limit))

    return FilterSpec(
        search=search,
        gender=gender,
        category_ids=_collect(values, CATEGORY_KEYS),
        brand_ids=_collect(values, BRAND_KEYS),
        color_ids=_collect(values, COLOR_KEYS),
        price_min=price_min,
        price_max=price_max,
        sort_by=sort_by,
        page=page,
        limit=limit,
    )


__all__ = [
    "BRAND_KEYS",
    "CATEGORY_KEYS",
    "COLOR_KEYS",
    "FilterParamsInput",
    "PRICE_BAND_KEYS",
    "resolve_filter_params",
]
