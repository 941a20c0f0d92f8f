"""Application catalog – read models returned by catalog executors."""
from __future__ import annotations

import dataclasses
import datetime
from decimal import Decimal


@dataclasses.dataclass(frozen=True)
class Ref:
    """Id and display name of a related brand or category."""

    id: str
    name: str


@dataclasses.dataclass(frozen=True)
class ProductVariantDetail:
    id: str
    color_id: str
    size_id: str
    price: Decimal
    stock: int
    sku: str
    color_name: str | None = None
    color_hex: str | None = None
    size_label: str | None = None


@dataclasses.dataclass(frozen=True)
class ProductSummary:
    """One row of a product listing; prices span the product's variants."""

    id: str
    name: str
    slug: str
    description: str | None
    gender: str
    brand: Ref | None
    category: Ref | None
    min_price: Decimal | None
    max_price: Decimal | None


@dataclasses.dataclass(frozen=True)
class ProductDetail(ProductSummary):
    created_at: datetime.datetime | None = None
    variants: tuple[ProductVariantDetail, ...] = ()


__all__ = ["ProductDetail", "ProductSummary", "ProductVariantDetail", "Ref"]
