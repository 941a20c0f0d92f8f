"""Application catalog – product read models and the catalog port."""
from catalog_query.application.catalog.models import (
    ProductDetail,
    ProductSummary,
    ProductVariantDetail,
    Ref,
)
from catalog_query.application.catalog.port import ListingParams, ProductCatalog, coerce_filter_spec

__all__ = [
    "ListingParams",
    "ProductCatalog",
    "ProductDetail",
    "ProductSummary",
    "ProductVariantDetail",
    "Ref",
    "coerce_filter_spec",
]
