"""JSON-file-backed implementation of CartRepository.

The record is a list of ``{"product_id", "quantity"}`` pairs; product
data is looked up in the catalog on load, so price changes in the
catalog show up in a restored cart.
"""

from __future__ import annotations

import logging

from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_catalog import ProductCatalog
from storefront.infrastructure.persistence.json_store import JsonFileStore

logger = logging.getLogger(__name__)

CART_KEY = "cart"


class JsonCartRepository(CartRepository):

    def __init__(self, store: JsonFileStore) -> None:
        self._store = store

    # --- CartRepository interface ---------------------------------------------

    def load(self, catalog: ProductCatalog) -> Cart:
        raw = self._store.get(CART_KEY)
        if raw is None:
            return Cart()
        if not self._is_well_formed(raw):
            logger.warning("Malformed cart record; starting with an empty cart")
            return Cart()
        return self._to_domain(raw, catalog)

    def save(self, cart: Cart) -> None:
        self._store.set(CART_KEY, self._to_raw(cart))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> list[dict]:
        return [
            {"product_id": line.product_id, "quantity": line.quantity.value}
            for line in cart.lines
        ]

    @staticmethod
    def _to_domain(raw: list[dict], catalog: ProductCatalog) -> Cart:
        cart = Cart()
        for entry in raw:
            product = catalog.get_by_id(entry["product_id"])
            if product is None:
                logger.warning("Dropping unknown product '%s' from saved cart", entry["product_id"])
                continue
            cart.add(product)
            cart.set_quantity(product.id, entry["quantity"])
        return cart

    @staticmethod
    def _is_well_formed(raw: object) -> bool:
        if not isinstance(raw, list):
            return False
        for entry in raw:
            if not isinstance(entry, dict):
                return False
            product_id = entry.get("product_id")
            quantity = entry.get("quantity")
            if not isinstance(product_id, str):
                return False
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
                return False
        return True
