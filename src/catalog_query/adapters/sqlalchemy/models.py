"""SQLAlchemy adapter – catalog ORM models."""
from __future__ import annotations

import uuid
from decimal import Decimal

from sqlalchemy import Boolean, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from catalog_query.adapters.sqlalchemy.mixins import TimestampMixin


def _new_id() -> str:
    return str(uuid.uuid4())


class CatalogBase(DeclarativeBase):
    pass


class Brand(CatalogBase):
    __tablename__ = "brands"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(200))
    slug: Mapped[str] = mapped_column(String(200))


class Category(CatalogBase):
    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(200))
    slug: Mapped[str] = mapped_column(String(200))


class Color(CatalogBase):
    __tablename__ = "colors"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(100))
    hex: Mapped[str] = mapped_column(String(7))


class Size(CatalogBase):
    __tablename__ = "sizes"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    label: Mapped[str] = mapped_column(String(50))
    sort_order: Mapped[int] = mapped_column(Integer, default=0)


class Product(TimestampMixin, CatalogBase):
    __tablename__ = "products"
    __table_args__ = (
        Index("products_brand_published_idx", "brand_id", "is_published"),
        Index("products_category_published_idx", "category_id", "is_published"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(300))
    slug: Mapped[str] = mapped_column(String(300))
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    is_published: Mapped[bool] = mapped_column(Boolean, default=True)
    gender: Mapped[str] = mapped_column(String(16))
    brand_id: Mapped[str] = mapped_column(ForeignKey("brands.id", ondelete="CASCADE"))
    category_id: Mapped[str] = mapped_column(ForeignKey("categories.id", ondelete="CASCADE"))

    brand: Mapped[Brand] = relationship()
    category: Mapped[Category] = relationship()
    variants: Mapped[list["ProductVariant"]] = relationship(
        back_populates="product", cascade="all, delete-orphan"
    )


class ProductVariant(TimestampMixin, CatalogBase):
    __tablename__ = "product_variants"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    product_id: Mapped[str] = mapped_column(ForeignKey("products.id", ondelete="CASCADE"), index=True)
    size_id: Mapped[str] = mapped_column(ForeignKey("sizes.id", ondelete="CASCADE"))
    color_id: Mapped[str] = mapped_column(ForeignKey("colors.id", ondelete="CASCADE"))
    sku: Mapped[str] = mapped_column(String(100))
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    stock: Mapped[int] = mapped_column(Integer, default=0)

    product: Mapped[Product] = relationship(back_populates="variants")
    color: Mapped[Color] = relationship()
    size: Mapped[Size] = relationship()


__all__ = ["Brand", "CatalogBase", "Category", "Color", "Product", "ProductVariant", "Size"]
