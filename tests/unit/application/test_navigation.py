"""Unit tests for listing navigation helpers."""

from __future__ import annotations

from catalog_query.application.filtering import (
    FILTER_KEYS,
    SORT_LABELS,
    ActiveFilter,
    active_filters,
    apply_sort,
    clear_filters,
    clear_filters_url,
    selected_sort,
    toggle_filter,
)
from catalog_query.query import parse_search_params, stringify_query


class TestSort:
    def test_selected_sort_defaults_to_featured(self) -> None:
        assert selected_sort({}) == "featured"
        assert selected_sort({"sort": "price_asc"}) == "price_asc"

    def test_apply_sort_resets_page(self) -> None:
        query = parse_search_params("color=red&page=3")
        assert stringify_query(apply_sort(query, "price_desc")) == "color=red&sort=price_desc"

    def test_featured_removes_sort(self) -> None:
        query = parse_search_params("sort=price_asc&page=2")
        assert apply_sort(query, "featured") == {}
        assert apply_sort(query, None) == {}

    def test_labels(self) -> None:
        assert SORT_LABELS["featured"] == "Featured"
        assert SORT_LABELS["newest"] == SORT_LABELS["latest"]


class TestToggleFilter:
    def test_toggle_resets_page(self) -> None:
        query = parse_search_params("color=red&page=4")
        result = toggle_filter(query, "color", "blue")
        assert result == {"color": ("red", "blue")}

    def test_toggle_off(self) -> None:
        assert toggle_filter({"color": ("red", "blue")}, "color", "red") == {"color": "blue"}


class TestClearFilters:
    def test_keeps_sort_and_limit(self) -> None:
        query = parse_search_params(
            "search=air&gender=men&categoryIds=a&brand=b&colorId=c&price=under-100"
            "&priceIds=200-plus&priceMin=1&priceMax=2&page=3&sort=price_asc&limit=24"
        )
        assert clear_filters(query) == {"sort": "price_asc", "limit": "24"}

    def test_filter_keys_cover_synonyms(self) -> None:
        for key in ("categoryId", "brandIds", "colorIds", "price", "priceId", "priceIds", "page"):
            assert key in FILTER_KEYS

    def test_clear_filters_url(self) -> None:
        query = parse_search_params("color=red&sort=latest")
        assert clear_filters_url("/products", query) == "/products?sort=latest"
        assert clear_filters_url("/products", {"color": "red"}) == "/products"


class TestActiveFilters:
    def test_empty(self) -> None:
        assert active_filters({}) == ()

    def test_chips(self) -> None:
        query = parse_search_params(
            "search=air&gender=men&category=shoes&categoryIds=boots"
            "&brand=nike&color=red,blue&priceMin=10&priceMax=99"
        )
        assert active_filters(query) == (
            ActiveFilter("search", "air", "Search: air"),
            ActiveFilter("gender", "men", "Gender: men"),
            ActiveFilter("category", "shoes", "Category: shoes"),
            ActiveFilter("category", "boots", "Category: boots"),
            ActiveFilter("brand", "nike", "Brand: nike"),
            ActiveFilter("color", "red", "Color: red"),
            ActiveFilter("color", "blue", "Color: blue"),
            ActiveFilter("priceMin", "10", "Min price: $10"),
            ActiveFilter("priceMax", "99", "Max price: $99"),
        )

    def test_blank_search_has_no_chip(self) -> None:
        assert active_filters({"search": "  "}) == ()

    def test_synonym_keys_have_chips(self) -> None:
        query = parse_search_params("categoryId=boots&brandId=acme&brandIds=nike&colorId=red")
        assert active_filters(query) == (
            ActiveFilter("category", "boots", "Category: boots"),
            ActiveFilter("brand", "acme", "Brand: acme"),
            ActiveFilter("brand", "nike", "Brand: nike"),
            ActiveFilter("color", "red", "Color: red"),
        )

    def test_price_band_chips(self) -> None:
        query = parse_search_params("price=under-100,bogus&priceIds=100-150&priceMax=120")
        assert active_filters(query) == (
            ActiveFilter("price", "under-100", "Price: Under $100"),
            ActiveFilter("price", "100-150", "Price: $100 - $150"),
            ActiveFilter("priceMax", "120", "Max price: $120"),
        )
