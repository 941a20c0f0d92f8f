"""SQLAlchemy ORM mixins – TimestampMixin."""
from __future__ import annotations

import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import Mapped, mapped_column


class TimestampMixin:
    """Audit timestamps shared by products and variants.

    ``created_at`` is indexed because listings order newest first; seed data
    and imports may set it explicitly, otherwise the database fills it in.
    ``updated_at`` follows every UPDATE.
    """

    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


__all__ = ["TimestampMixin"]
