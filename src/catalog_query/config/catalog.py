"""Config – CatalogSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from catalog_query.application.filtering import DEFAULT_LIMIT, MAX_LIMIT
from catalog_query.config.settings.base import Settings
from catalog_query.config.validation import InvalidSettingValueError

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class CatalogSettings(Settings):
    """Settings for the catalog query service.

    Read from ``CATALOG_*`` environment variables, e.g.
    ``CATALOG_DATABASE_URL`` and ``CATALOG_MAX_PAGE_SIZE``.
    """

    _prefix: ClassVar[str] = "CATALOG"

    database_url: str
    pool_size: int = 10
    echo_sql: bool = False
    default_page_size: int = DEFAULT_LIMIT
    max_page_size: int = MAX_LIMIT
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if not self.database_url:
            raise InvalidSettingValueError("database_url", self.database_url, "must not be empty")
        if self.pool_size < 1:
            raise InvalidSettingValueError("pool_size", self.pool_size, "must be >= 1")
        if not 1 <= self.max_page_size <= MAX_LIMIT:
            raise InvalidSettingValueError(
                "max_page_size", self.max_page_size, f"must be between 1 and {MAX_LIMIT}"
            )
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise InvalidSettingValueError(
                "default_page_size",
                self.default_page_size,
                f"must be between 1 and max_page_size ({self.max_page_size})",
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")


__all__ = ["CatalogSettings"]
