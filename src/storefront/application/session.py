"""The storefront session — explicit context for one shopper.

Bundles the catalog, the Cart Store and the Checkout State Machine so
callers pass one object around instead of reaching for globals.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.application.cart_store import CartStore
from storefront.application.checkout import CheckoutStateMachine
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.preferences_repository import PreferencesRepository
from storefront.domain.repository.product_catalog import ProductCatalog
from storefront.domain.service.order_number import OrderNumberGenerator


@dataclass
class StorefrontSession:
    catalog: ProductCatalog
    cart_store: CartStore
    checkout: CheckoutStateMachine
    preferences_repo: PreferencesRepository

    @staticmethod
    def open(
        catalog: ProductCatalog,
        cart_repo: CartRepository,
        preferences_repo: PreferencesRepository,
        order_numbers: OrderNumberGenerator | None = None,
    ) -> StorefrontSession:
        """Restore the persisted cart and start a fresh checkout at CART."""
        cart_store = CartStore(cart_repo, catalog)
        checkout = CheckoutStateMachine(cart_store, order_numbers)
        return StorefrontSession(
            catalog=catalog,
            cart_store=cart_store,
            checkout=checkout,
            preferences_repo=preferences_repo,
        )
