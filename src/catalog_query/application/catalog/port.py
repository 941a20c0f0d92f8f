"""Application catalog – ProductCatalog port."""
from __future__ import annotations

from typing import Protocol, Union, runtime_checkable

from catalog_query.application.catalog.models import ProductDetail, ProductSummary
from catalog_query.application.filtering import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    FilterParamsInput,
    FilterSpec,
    resolve_filter_params,
)
from catalog_query.application.pagination import Page

ListingParams = Union[FilterSpec, FilterParamsInput]


@runtime_checkable
class ProductCatalog(Protocol):
    """A source of published products that understands listing criteria."""

    async def list_products(self, params: ListingParams) -> Page[ProductSummary]: ...
    async def get_product(self, product_id: str) -> ProductDetail | None: ...


def coerce_filter_spec(
    params: ListingParams,
    *,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> FilterSpec:
    """Use *params* as is when already resolved, otherwise resolve it."""
    if isinstance(params, FilterSpec):
        return params
    return resolve_filter_params(params, default_limit=default_limit, max_limit=max_limit)


__all__ = ["ListingParams", "ProductCatalog", "coerce_filter_spec"]
