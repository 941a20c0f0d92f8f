"""SQLAlchemy adapter – SqlAlchemyProductRepository."""
from __future__ import annotations

from decimal import Decimal
from typing import Any

from sqlalchemy import distinct, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog_query.adapters.sqlalchemy.compiler import PredicateCompiler
from catalog_query.adapters.sqlalchemy.models import Product, ProductVariant
from catalog_query.application.catalog import (
    ListingParams,
    ProductDetail,
    ProductSummary,
    ProductVariantDetail,
    Ref,
    coerce_filter_spec,
)
from catalog_query.application.filtering import DEFAULT_LIMIT, MAX_LIMIT
from catalog_query.application.pagination import Page
from catalog_query.application.predicates import (
    VARIANTS,
    Aggregate,
    PredicateDescriptor,
    build_predicate_descriptor,
)
from catalog_query.config import CatalogSettings
from catalog_query.kernel.errors import NotFoundError
from catalog_query.observability.logging import get_logger

logger = get_logger(__name__)


def _decimal(value: Any) -> Decimal | None:
    if value is None or isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _ref(obj: Any) -> Ref | None:
    return Ref(id=obj.id, name=obj.name or "") if obj is not None else None


class SqlAlchemyProductRepository:
    """Product catalog backed by an ``AsyncSession``.

    The session is owned by the caller (typically one per request, obtained
    from :class:`~catalog_query.adapters.sqlalchemy.session.SqlAlchemySessionFactory`).
    """

    def __init__(
        self,
        session: AsyncSession,
        *,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> None:
        self._session = session
        self._compiler = PredicateCompiler()
        self._default_limit = default_limit
        self._max_limit = max_limit

    @classmethod
    def from_settings(cls, session: AsyncSession, settings: CatalogSettings) -> "SqlAlchemyProductRepository":
        """Repository whose listings use the configured page sizes."""
        return cls(
            session,
            default_limit=settings.default_page_size,
            max_limit=settings.max_page_size,
        )

    async def execute(self, descriptor: PredicateDescriptor) -> Page[ProductSummary]:
        has_variants = exists().where(ProductVariant.product_id == Product.id)
        conditions = [has_variants, *(self._compiler.where(p) for p in descriptor.where)]
        min_price = self._compiler.aggregate(VARIANTS, "price", Aggregate.MIN)
        max_price = self._compiler.aggregate(VARIANTS, "price", Aggregate.MAX)

        stmt = (
            select(Product, min_price.label("min_price"), max_price.label("max_price"))
            .options(selectinload(Product.brand), selectinload(Product.category))
            .where(*conditions)
            .order_by(*(self._compiler.order_by(term) for term in descriptor.order_by), Product.id)
            .offset(descriptor.offset)
            .limit(descriptor.limit)
        )
        rows = (await self._session.execute(stmt)).all()

        count_stmt = select(func.count(distinct(Product.id))).where(*conditions)
        total = (await self._session.execute(count_stmt)).scalar_one()

        logger.debug(
            "catalog.sqlalchemy.listed",
            total=total,
            returned=len(rows),
            offset=descriptor.offset,
            limit=descriptor.limit,
        )
        request = descriptor.page_request
        return Page(
            items=tuple(self._to_summary(product, low, high) for product, low, high in rows),
            total=int(total),
            page=request.page,
            size=request.size,
        )

    async def list_products(self, params: ListingParams) -> Page[ProductSummary]:
        spec = coerce_filter_spec(params, default_limit=self._default_limit, max_limit=self._max_limit)
        return await self.execute(build_predicate_descriptor(spec))

    async def get_product(self, product_id: str) -> ProductDetail | None:
        stmt = (
            select(Product)
            .options(
                selectinload(Product.brand),
                selectinload(Product.category),
                selectinload(Product.variants).selectinload(ProductVariant.color),
                selectinload(Product.variants).selectinload(ProductVariant.size),
            )
            .where(Product.id == product_id, Product.is_published.is_(True))
            .limit(1)
        )
        product = (await self._session.execute(stmt)).scalars().first()
        if product is None:
            return None

        variants = tuple(
            ProductVariantDetail(
                id=variant.id,
                color_id=variant.color_id,
                size_id=variant.size_id,
                price=_decimal(variant.price) or Decimal(0),
                stock=max(variant.stock or 0, 0),
                sku=variant.sku,
                color_name=variant.color.name if variant.color else None,
                color_hex=variant.color.hex if variant.color else None,
                size_label=variant.size.label if variant.size else None,
            )
            for variant in product.variants
        )
        prices = [variant.price for variant in variants]
        return ProductDetail(
            id=product.id,
            name=product.name,
            slug=product.slug,
            description=product.description,
            gender=product.gender,
            brand=_ref(product.brand),
            category=_ref(product.category),
            min_price=min(prices) if prices else None,
            max_price=max(prices) if prices else None,
            created_at=product.created_at,
            variants=variants,
        )

    async def get_product_or_raise(self, product_id: str) -> ProductDetail:
        product = await self.get_product(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    @staticmethod
    def _to_summary(product: Product, min_price: Any, max_price: Any) -> ProductSummary:
        return ProductSummary(
            id=product.id,
            name=product.name,
            slug=product.slug,
            description=product.description,
            gender=product.gender,
            brand=_ref(product.brand),
            category=_ref(product.category),
            min_price=_decimal(min_price),
            max_price=_decimal(max_price),
        )


__all__ = ["SqlAlchemyProductRepository"]
