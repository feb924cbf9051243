"""Abstract repository for the persisted Cart."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart
from storefront.domain.repository.product_catalog import ProductCatalog


class CartRepository(ABC):

    @abstractmethod
    def load(self, catalog: ProductCatalog) -> Cart:
        """Restore the saved cart, resolving product ids through *catalog*.

        Must never raise: an absent or malformed record yields an empty Cart.
        """

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the cart. Raises PersistenceError if storage fails."""
