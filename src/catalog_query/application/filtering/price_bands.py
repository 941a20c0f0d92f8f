"""Application filtering – price bands.

A price band is a named bucket offered as a discrete filter (``price=under-100``).
Selecting several bands widens the price window to cover all of them.
Both bounds of a band are inclusive.
"""
from __future__ import annotations

import dataclasses
from decimal import Decimal
from typing import Iterable

from catalog_query.kernel.ddd import ValueObject


@dataclasses.dataclass(frozen=True)
class PriceBand(ValueObject):
    id: str
    label: str
    min: Decimal
    max: Decimal | None = None  # None: no upper bound

    @property
    def unbounded(self) -> bool:
        return self.max is None

    def contains(self, price: Decimal) -> bool:
        return self.min <= price and (self.max is None or price <= self.max)


@dataclasses.dataclass(frozen=True)
class PriceRange(ValueObject):
    """Union of one or more bands; ``maximum`` is ``None`` when ``unbounded``."""

    minimum: Decimal
    maximum: Decimal | None
    unbounded: bool = False


PRICE_BANDS: tuple[PriceBand, ...] = (
    PriceBand("under-100", "Under $100", Decimal(0), Decimal(100)),
    PriceBand("100-150", "$100 - $150", Decimal(100), Decimal(150)),
    PriceBand("150-200", "$150 - $200", Decimal(150), Decimal(200)),
    PriceBand("200-plus", "$200 & Above", Decimal(200)),
)

_BANDS_BY_ID = {band.id: band for band in PRICE_BANDS}


def get_price_band(band_id: str) -> PriceBand | None:
    return _BANDS_BY_ID.get(band_id)


def union_price_bands(bands: Iterable[PriceBand]) -> PriceRange | None:
    """Smallest single range covering every band, or ``None`` for no bands."""
    selected = list(bands)
    if not selected:
        return None
    minimum = min(band.min for band in selected)
    if any(band.unbounded for band in selected):
        return PriceRange(minimum, None, unbounded=True)
    return PriceRange(minimum, max(band.max for band in selected))  # type: ignore[type-var]


__all__ = ["PRICE_BANDS", "PriceBand", "PriceRange", "get_price_band", "union_price_bands"]
