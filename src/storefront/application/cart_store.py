"""Cart Store — owns the session's Cart and keeps it persisted.

Every mutation is written through the CartRepository and then announced
to registered listeners (the checkout state machine uses this to re-check
free-shipping eligibility).  Persistence is fire-and-forget: a storage
failure is logged and the in-memory cart stays authoritative.
"""

from __future__ import annotations

import logging
from typing import Callable

from storefront.domain.exceptions import PersistenceError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)

CartListener = Callable[[Cart], None]


class CartStore:

    def __init__(self, cart_repo: CartRepository, catalog: ProductCatalog) -> None:
        self._cart_repo = cart_repo
        self._cart = cart_repo.load(catalog)
        self._listeners: list[CartListener] = []

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product) -> None:
        self._cart.add(product)
        self._changed()

    def set_quantity(self, product_id: str, quantity: int) -> None:
        self._cart.set_quantity(product_id, quantity)
        self._changed()

    def remove(self, product_id: str) -> None:
        self._cart.remove(product_id)
        self._changed()

    def clear(self) -> None:
        self._cart.clear()
        self._changed()

    # --- Queries --------------------------------------------------------------

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def lines(self) -> list[CartLine]:
        return self._cart.lines

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    @property
    def subtotal(self) -> Money:
        return self._cart.subtotal

    # --- Listeners ------------------------------------------------------------

    def subscribe(self, listener: CartListener) -> None:
        """Call *listener* with the cart after every mutation."""
        self._listeners.append(listener)

    # --- Internal helpers -----------------------------------------------------

    def _changed(self) -> None:
        try:
            self._cart_repo.save(self._cart)
        except PersistenceError:
            logger.warning("Cart could not be persisted; keeping in-memory state", exc_info=True)
        for listener in self._listeners:
            listener(self._cart)
