"""In-memory adapter – InMemoryProductCatalog."""
from __future__ import annotations

from typing import Iterable

from catalog_query.adapters.in_memory.matching import combine, sort_records
from catalog_query.adapters.in_memory.records import ProductRecord
from catalog_query.application.catalog import (
    ListingParams,
    ProductDetail,
    ProductSummary,
    coerce_filter_spec,
)
from catalog_query.application.filtering import DEFAULT_LIMIT, MAX_LIMIT
from catalog_query.application.pagination import Page
from catalog_query.application.predicates import PredicateDescriptor, build_predicate_descriptor
from catalog_query.config import CatalogSettings
from catalog_query.kernel.errors import NotFoundError
from catalog_query.observability.logging import get_logger

logger = get_logger(__name__)


class InMemoryProductCatalog:
    """Product catalog over a fixed list of records.

    Products without variants are never listed, matching the relational
    catalog where listings join products to their variants.
    """

    def __init__(
        self,
        products: Iterable[ProductRecord],
        *,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> None:
        self._products = list(products)
        self._default_limit = default_limit
        self._max_limit = max_limit

    @classmethod
    def from_settings(
        cls, products: Iterable[ProductRecord], settings: CatalogSettings
    ) -> "InMemoryProductCatalog":
        return cls(
            products,
            default_limit=settings.default_page_size,
            max_limit=settings.max_page_size,
        )

    def execute(self, descriptor: PredicateDescriptor) -> Page[ProductSummary]:
        spec = combine(descriptor.where)
        matched = [p for p in self._products if p.variants and spec.is_satisfied_by(p)]
        ordered = sort_records(matched, descriptor.order_by)
        page = Page.of(ordered, descriptor.page_request)
        logger.debug(
            "catalog.in_memory.listed",
            total=page.total,
            offset=descriptor.offset,
            limit=descriptor.limit,
        )
        return page.map(ProductRecord.to_summary)

    async def list_products(self, params: ListingParams) -> Page[ProductSummary]:
        spec = coerce_filter_spec(params, default_limit=self._default_limit, max_limit=self._max_limit)
        return self.execute(build_predicate_descriptor(spec))

    async def get_product(self, product_id: str) -> ProductDetail | None:
        for product in self._products:
            if product.id == product_id and product.is_published:
                return product.to_detail()
        return None

    async def get_product_or_raise(self, product_id: str) -> ProductDetail:
        product = await self.get_product(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product


__all__ = ["InMemoryProductCatalog"]
