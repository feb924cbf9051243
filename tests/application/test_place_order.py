"""Integration tests for the PlaceOrder and ShowCart use cases.

Uses in-memory fakes — no file I/O.
"""

from datetime import datetime, timezone

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.session import StorefrontSession
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import CheckoutStep
from storefront.domain.model.shipping import ShippingMethod
from tests.fakes import (
    FakeCartRepository,
    FakePreferencesRepository,
    FakeProductCatalog,
    make_product,
)


def _session(saved=None) -> tuple[StorefrontSession, FakeCartRepository]:
    catalog = FakeProductCatalog([
        make_product("1", "120.00", name="Headphones"),
        make_product("2", "90.00", name="Bag"),
        make_product("3", "10.00", name="Sunglasses"),
    ])
    cart_repo = FakeCartRepository(saved)
    session = StorefrontSession.open(catalog, cart_repo, FakePreferencesRepository())
    return session, cart_repo


class TestAddToCart:

    def test_adds_catalog_product(self):
        session, cart_repo = _session()
        handler = AddToCartHandler(session.catalog, session.cart_store)

        product = handler.handle("1")
        handler.handle("1")

        assert product.name == "Headphones"
        assert cart_repo.saved == [("1", 2)]

    def test_unknown_product_rejected(self):
        session, _ = _session()
        handler = AddToCartHandler(session.catalog, session.cart_store)
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle("404")


class TestShowCart:

    def test_formats_lines_and_summary(self):
        session, _ = _session(saved=[("1", 1), ("3", 2)])
        dto = ShowCartHandler(session.cart_store, session.checkout).handle()

        assert [(i.product_name, i.quantity, i.line_total) for i in dto.items] == [
            ("Headphones", 1, "$120.00"),
            ("Sunglasses", 2, "$20.00"),
        ]
        assert dto.item_count == 3
        assert dto.summary.subtotal == "$140.00"
        assert dto.summary.shipping == "$6.99"
        assert dto.summary.tax == "$11.90"
        assert dto.summary.total == "$158.89"
        assert dto.free_shipping_remaining == "$60.00"

    def test_shipping_options_flag_selection_and_availability(self):
        session, _ = _session(saved=[("3", 1)])
        dto = ShowCartHandler(session.cart_store, session.checkout).handle()

        by_method = {o.method: o for o in dto.shipping_options}
        assert by_method["Standard"].selected
        assert not by_method["Free"].selectable
        assert by_method["Express"].cost == "$14.99"


class TestPlaceOrder:

    def test_places_order_with_free_shipping(self):
        session, cart_repo = _session(saved=[("1", 1), ("2", 1)])
        dto = PlaceOrderHandler(session.checkout).handle(ShippingMethod.FREE)

        assert dto is not None
        assert dto.shipping_method == "Free"
        assert dto.summary.shipping == "$0.00"
        assert dto.summary.tax == "$17.85"
        assert dto.summary.total == "$227.85"
        assert dto.order_number.startswith("LS-")
        assert dto.item_count == 2
        assert cart_repo.saved == []
        assert session.checkout.step is CheckoutStep.SUCCESS

    def test_unavailable_free_falls_back_to_standard(self):
        session, _ = _session(saved=[("3", 1)])
        dto = PlaceOrderHandler(session.checkout).handle(ShippingMethod.FREE)

        assert dto.shipping_method == "Standard"
        assert dto.summary.shipping == "$6.99"

    def test_empty_cart_returns_none(self):
        session, _ = _session()
        assert PlaceOrderHandler(session.checkout).handle() is None
        assert session.checkout.step is CheckoutStep.CART

    def test_works_after_previous_success(self):
        session, _ = _session(saved=[("3", 1)])
        handler = PlaceOrderHandler(session.checkout)
        first = handler.handle()

        session.cart_store.add(session.catalog.get_by_id("3"))
        second = handler.handle()

        assert second is not None
        assert second.order_number != first.order_number


class TestSessionClock:

    def test_placed_at_formatting(self):
        session, _ = _session(saved=[("3", 1)])
        session.checkout._clock = lambda: datetime(2026, 1, 2, 3, 4, tzinfo=timezone.utc)
        dto = PlaceOrderHandler(session.checkout).handle()
        assert dto.placed_at == "2026-01-02 03:04 UTC"
