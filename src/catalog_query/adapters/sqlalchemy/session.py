"""SQLAlchemy adapter – SqlAlchemySessionFactory."""
from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from catalog_query.adapters.sqlalchemy.models import CatalogBase
from catalog_query.config import CatalogSettings
from catalog_query.observability.logging import get_logger

logger = get_logger(__name__)


class SqlAlchemySessionFactory:
    """Owns an async engine and hands out sessions.

    Create one per process at startup and dispose it at shutdown, either
    explicitly or by using it as an async context manager::

        async with SqlAlchemySessionFactory.from_settings(settings) as sessions:
            async with sessions() as session:
                page = await SqlAlchemyProductRepository(session).list_products(params)
    """

    def __init__(self, database_url: str, **engine_kwargs: Any) -> None:
        self._engine: AsyncEngine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(self._engine, class_=AsyncSession, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings: CatalogSettings) -> "SqlAlchemySessionFactory":
        engine_kwargs: dict[str, Any] = {"echo": settings.echo_sql}
        if not settings.database_url.startswith("sqlite"):
            engine_kwargs["pool_size"] = settings.pool_size
        return cls(settings.database_url, **engine_kwargs)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def __call__(self) -> AsyncSession:
        return self._session_factory()

    async def create_all(self) -> None:
        """Create the catalog tables (development and tests)."""
        async with self._engine.begin() as conn:
            await conn.run_sync(CatalogBase.metadata.create_all)

    async def dispose(self) -> None:
        await self._engine.dispose()
        logger.debug("catalog.sqlalchemy.engine_disposed")

    async def __aenter__(self) -> "SqlAlchemySessionFactory":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.dispose()


__all__ = ["SqlAlchemySessionFactory"]
