"""Unit tests for filter parameter resolution."""

from __future__ import annotations

from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from catalog_query.application.filtering import (
    MAX_LIMIT,
    MAX_PAGE,
    FilterSpec,
    Gender,
    SortOption,
    resolve_filter_params,
)
from catalog_query.application.predicates import build_predicate_descriptor
from catalog_query.kernel.errors import UnsupportedQueryInputError
from catalog_query.query import parse_search_params


class _MultiDict:
    """Mimics a framework multi-dict (``multi_items()`` yields repeated keys)."""

    def __init__(self, *pairs: tuple[str, str]) -> None:
        self._pairs = pairs

    def multi_items(self):
        return list(self._pairs)


# ---------------------------------------------------------------------------
# input shapes
# ---------------------------------------------------------------------------


class TestInputShapes:
    def test_empty_inputs(self) -> None:
        assert resolve_filter_params(None) == FilterSpec()
        assert resolve_filter_params("") == FilterSpec()
        assert resolve_filter_params({}) == FilterSpec()

    def test_mapping_with_lists_and_nulls(self) -> None:
        spec = resolve_filter_params({"color": ["red,blue", "green"], "page": "3", "x": None})
        assert spec.color_ids == ("red", "blue", "green")
        assert spec.page == 3

    def test_pairs(self) -> None:
        spec = resolve_filter_params([("color", "red"), ("color", "blue")])
        assert spec.color_ids == ("red", "blue")

    def test_multi_dict(self) -> None:
        spec = resolve_filter_params(_MultiDict(("brand", "nike"), ("brand", "acme")))
        assert spec.brand_ids == ("nike", "acme")

    def test_normalized_query(self) -> None:
        spec = resolve_filter_params(parse_search_params("color=red,blue"))
        assert spec.color_ids == ("red", "blue")

    def test_string_and_mapping_agree(self) -> None:
        assert resolve_filter_params("color=red,blue&page=2") == resolve_filter_params(
            {"color": ["red", "blue"], "page": "2"}
        )

    @pytest.mark.parametrize("bad", [42, b"color=red"])
    def test_unsupported_input(self, bad: object) -> None:
        with pytest.raises(UnsupportedQueryInputError):
            resolve_filter_params(bad)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# id lists and synonyms
# ---------------------------------------------------------------------------


class TestIdLists:
    def test_category_synonyms_merge(self) -> None:
        spec = resolve_filter_params("?category=shoes&categoryIds=boots,sneakers")
        assert spec.category_ids == ("shoes", "boots", "sneakers")

    def test_duplicates_removed_in_order(self) -> None:
        spec = resolve_filter_params("category=a&categoryId=a,b&categoryIds=b")
        assert spec.category_ids == ("a", "b")

    def test_brand_and_color_synonyms(self) -> None:
        spec = resolve_filter_params("brandId=nike&brandIds=acme&colorIds=red&colorId=blue")
        assert spec.brand_ids == ("nike", "acme")
        assert spec.color_ids == ("red", "blue")

    def test_blank_fragments_dropped(self) -> None:
        assert resolve_filter_params("color=red,,%20,blue").color_ids == ("red", "blue")


# ---------------------------------------------------------------------------
# scalar fields
# ---------------------------------------------------------------------------


class TestScalars:
    def test_search_trimmed(self) -> None:
        assert resolve_filter_params("search=++nike++").search == "nike"

    def test_blank_search_absent(self) -> None:
        assert resolve_filter_params("search=+++").search is None

    def test_gender(self) -> None:
        assert resolve_filter_params("gender=Women").gender is Gender.WOMEN
        assert resolve_filter_params("gender=aliens").gender is None

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("sort=featured", None),
            ("sort=newest", SortOption.LATEST),
            ("sort=latest", SortOption.LATEST),
            ("sort=price_asc", SortOption.PRICE_ASC),
            ("sortBy=price_desc", SortOption.PRICE_DESC),
            ("sort=bogus", None),
            ("sort=price_asc&sortBy=price_desc", SortOption.PRICE_ASC),
        ],
    )
    def test_sort_normalization(self, raw: str, expected: SortOption | None) -> None:
        assert resolve_filter_params(raw).sort_by is expected

    def test_unknown_sort_is_logged(self) -> None:
        with capture_logs() as logs:
            resolve_filter_params("sort=bogus")
        assert any(entry["event"] == "filter_params.unknown_sort" for entry in logs)


# ---------------------------------------------------------------------------
# page and limit
# ---------------------------------------------------------------------------


class TestPaging:
    @pytest.mark.parametrize(
        "raw, expected",
        [("page=abc", 1), ("page=0", 1), ("page=-3", 1), ("page=2.7", 2), ("page=5", 5)],
    )
    def test_page(self, raw: str, expected: int) -> None:
        assert resolve_filter_params(raw).page == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [("limit=1000", 60), ("limit=0", 1), ("limit=-5", 1), ("limit=abc", 12), ("limit=24", 24)],
    )
    def test_limit_clamped(self, raw: str, expected: int) -> None:
        assert resolve_filter_params(raw).limit == expected

    def test_limit_bounds_configurable(self) -> None:
        assert resolve_filter_params({}, default_limit=24).limit == 24
        assert resolve_filter_params("limit=100", max_limit=30).limit == 30

    def test_max_limit_cannot_exceed_hard_cap(self) -> None:
        assert resolve_filter_params("limit=100", max_limit=100).limit == MAX_LIMIT

    def test_infinite_values_rejected(self) -> None:
        spec = resolve_filter_params("page=Infinity&limit=NaN")
        assert spec.page == 1
        assert spec.limit == 12

    @pytest.mark.parametrize("raw", ["page=1e400", "page=-1e400", "page=1e2000000"])
    def test_page_beyond_double_range_is_default(self, raw: str) -> None:
        assert resolve_filter_params(raw).page == 1

    def test_limit_beyond_double_range_is_default(self) -> None:
        assert resolve_filter_params("limit=1e400").limit == 12

    def test_huge_page_clamped(self) -> None:
        spec = resolve_filter_params("page=1e300&limit=60")
        assert spec.page == MAX_PAGE
        assert spec.offset < 2**63

    def test_out_of_range_number_is_logged(self) -> None:
        with capture_logs() as logs:
            resolve_filter_params("page=1e400")
        assert any(
            entry["event"] == "filter_params.malformed_number" and entry["value"] == "1e400"
            for entry in logs
        )


# ---------------------------------------------------------------------------
# price
# ---------------------------------------------------------------------------


class TestPrice:
    def test_explicit_bounds(self) -> None:
        spec = resolve_filter_params("priceMin=10.5&priceMax=99")
        assert spec.price_min == Decimal("10.5")
        assert spec.price_max == Decimal("99")

    def test_malformed_bounds_dropped(self) -> None:
        spec = resolve_filter_params("priceMin=abc&priceMax=Infinity")
        assert spec.price_min is None
        assert spec.price_max is None

    def test_bounds_beyond_double_range_dropped(self) -> None:
        spec = resolve_filter_params("priceMin=-1e400&priceMax=1e400")
        assert spec.price_min is None
        assert spec.price_max is None

    def test_large_finite_bound_kept(self) -> None:
        assert resolve_filter_params("priceMax=1e300").price_max == Decimal("1e300")

    def test_negative_minimum_clamped(self) -> None:
        assert resolve_filter_params("priceMin=-5").price_min == Decimal(0)

    def test_single_band(self) -> None:
        spec = resolve_filter_params("price=100-150")
        assert (spec.price_min, spec.price_max) == (Decimal(100), Decimal(150))

    def test_band_union(self) -> None:
        spec = resolve_filter_params("price=under-100&priceIds=150-200")
        assert (spec.price_min, spec.price_max) == (Decimal(0), Decimal(200))

    def test_open_band_drops_maximum(self) -> None:
        spec = resolve_filter_params("price=under-100,200-plus")
        assert spec.price_min == Decimal(0)
        assert spec.price_max is None

    def test_unknown_band_ignored(self) -> None:
        spec = resolve_filter_params("price=cheap")
        assert spec.price_min is None
        assert spec.price_max is None

    def test_bands_widen_explicit_bounds(self) -> None:
        spec = resolve_filter_params("priceMin=50&price=under-100")
        assert (spec.price_min, spec.price_max) == (Decimal(0), Decimal(100))

        spec = resolve_filter_params("priceMax=300&price=100-150")
        assert (spec.price_min, spec.price_max) == (Decimal(100), Decimal(300))

        spec = resolve_filter_params("priceMax=300&priceId=200-plus")
        assert spec.price_max is None


# ---------------------------------------------------------------------------
# end to end
# ---------------------------------------------------------------------------


class TestEndToEnd:
    def test_listing_url(self) -> None:
        spec = resolve_filter_params("color=red,blue&price=under-100&sort=price_desc&page=2")
        assert spec == FilterSpec(
            color_ids=("red", "blue"),
            price_min=Decimal(0),
            price_max=Decimal(100),
            sort_by=SortOption.PRICE_DESC,
            page=2,
            limit=12,
        )
        descriptor = build_predicate_descriptor(spec)
        assert descriptor.offset == 12
        assert descriptor.limit == 12

    def test_idempotent_on_equal_input(self) -> None:
        raw = "search=air&gender=men&brand=nike&page=2"
        assert resolve_filter_params(raw) == resolve_filter_params(raw)
