"""SQLAlchemy adapter – catalog models, session lifecycle and product repository."""
from catalog_query.adapters.sqlalchemy.compiler import PredicateCompiler
from catalog_query.adapters.sqlalchemy.mixins import TimestampMixin
from catalog_query.adapters.sqlalchemy.models import (
    Brand,
    CatalogBase,
    Category,
    Color,
    Product,
    ProductVariant,
    Size,
)
from catalog_query.adapters.sqlalchemy.repository import SqlAlchemyProductRepository
from catalog_query.adapters.sqlalchemy.session import SqlAlchemySessionFactory

__all__ = [
    "Brand",
    "CatalogBase",
    "Category",
    "Color",
    "PredicateCompiler",
    "Product",
    "ProductVariant",
    "Size",
    "SqlAlchemyProductRepository",
    "SqlAlchemySessionFactory",
    "TimestampMixin",
]
