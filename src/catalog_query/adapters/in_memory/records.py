"""In-memory adapter – product and variant records."""
from __future__ import annotations

import dataclasses
import datetime
from decimal import Decimal

from catalog_query.application.catalog import (
    ProductDetail,
    ProductSummary,
    ProductVariantDetail,
    Ref,
)


@dataclasses.dataclass(frozen=True)
class VariantRecord:
    id: str
    color_id: str
    size_id: str
    price: Decimal
    stock: int = 0
    sku: str = ""


@dataclasses.dataclass(frozen=True)
class ProductRecord:
    id: str
    name: str
    gender: str
    created_at: datetime.datetime
    slug: str = ""
    description: str | None = None
    brand: Ref | None = None
    category: Ref | None = None
    is_published: bool = True
    variants: tuple[VariantRecord, ...] = ()

    @property
    def brand_id(self) -> str | None:
        return self.brand.id if self.brand else None

    @property
    def category_id(self) -> str | None:
        return self.category.id if self.category else None

    def to_summary(self) -> ProductSummary:
        prices = [variant.price for variant in self.variants]
        return ProductSummary(
            id=self.id,
            name=self.name,
            slug=self.slug,
            description=self.description,
            gender=self.gender,
            brand=self.brand,
            category=self.category,
            min_price=min(prices) if prices else None,
            max_price=max(prices) if prices else None,
        )

    def to_detail(self) -> ProductDetail:
        summary = self.to_summary()
        return ProductDetail(
            **{field.name: getattr(summary, field.name) for field in dataclasses.fields(summary)},
            created_at=self.created_at,
            variants=tuple(
                ProductVariantDetail(
                    id=variant.id,
                    color_id=variant.color_id,
                    size_id=variant.size_id,
                    price=variant.price,
                    stock=max(variant.stock, 0),
                    sku=variant.sku,
                )
                for variant in self.variants
            ),
        )


__all__ = ["ProductRecord", "VariantRecord"]
