"""Tests for catalog browsing and the wishlist/theme toggles."""

import logging

import pytest

from storefront.application.browse_catalog import BrowseCatalogHandler, filter_products
from storefront.application.toggle_preferences import (
    ToggleThemeHandler,
    ToggleWishlistHandler,
)
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.preferences import Theme
from tests.fakes import FakePreferencesRepository, FakeProductCatalog, make_product


PRODUCTS = [
    make_product("1", "199.99", name="Aurora Wireless Headphones", category="Electronics"),
    make_product("2", "129.00", name="Leather Watch", category="Accessories"),
    make_product("3", "89.99", name="Smart Speaker", category="Electronics"),
    make_product("4", "120.00", name="Wool Sweater", category="Fashion"),
]


class TestFilterProducts:

    def test_no_filters_returns_everything_in_order(self):
        assert [p.id for p in filter_products(PRODUCTS)] == ["1", "2", "3", "4"]

    def test_search_is_case_insensitive(self):
        assert [p.id for p in filter_products(PRODUCTS, query="WATCH")] == ["2"]

    def test_category(self):
        assert [p.id for p in filter_products(PRODUCTS, category="Electronics")] == ["1", "3"]

    def test_wishlist_only(self):
        result = filter_products(PRODUCTS, wishlist_only=True, wishlist=["4", "2"])
        assert [p.id for p in result] == ["2", "4"]

    def test_filters_combine(self):
        result = filter_products(
            PRODUCTS, query="s", category="Electronics", wishlist_only=True, wishlist=["3"]
        )
        assert [p.id for p in result] == ["3"]


class TestBrowseCatalogHandler:

    def test_marks_wishlisted_products(self):
        handler = BrowseCatalogHandler(
            FakeProductCatalog(PRODUCTS), FakePreferencesRepository(wishlist=["3"])
        )
        dtos = handler.handle()
        assert [d.id for d in dtos if d.wishlisted] == ["3"]
        assert dtos[0].price == "$199.99"


class TestToggleWishlist:

    def test_toggle_adds_then_removes(self):
        prefs = FakePreferencesRepository()
        handler = ToggleWishlistHandler(FakeProductCatalog(PRODUCTS), prefs)

        assert handler.handle("2") is True
        assert prefs.wishlist == ["2"]
        assert handler.handle("2") is False
        assert prefs.wishlist == []

    def test_unknown_product_rejected(self):
        handler = ToggleWishlistHandler(FakeProductCatalog(PRODUCTS), FakePreferencesRepository())
        with pytest.raises(EntityNotFoundError):
            handler.handle("99")

    def test_storage_failure_is_logged(self, caplog):
        prefs = FakePreferencesRepository()
        prefs.fail_on_save = True
        handler = ToggleWishlistHandler(FakeProductCatalog(PRODUCTS), prefs)

        with caplog.at_level(logging.WARNING):
            assert handler.handle("1") is True
        assert "Wishlist could not be persisted" in caplog.text


class TestToggleTheme:

    def test_toggles_between_light_and_dark(self):
        prefs = FakePreferencesRepository(theme=Theme.LIGHT)
        handler = ToggleThemeHandler(prefs)

        assert handler.handle() is Theme.DARK
        assert prefs.theme is Theme.DARK
        assert handler.handle() is Theme.LIGHT
