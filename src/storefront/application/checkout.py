"""Checkout State Machine: cart -> checkout -> success.

Preconditions are expressed as refusals: a transition that is not
allowed returns ``False`` (or ``None`` for ``place_order``) and leaves
every piece of state untouched.  Nothing here raises for a refused
transition.

The selected shipping method self-heals: whenever the cart changes, and
again at placement, a Free selection whose subtotal no longer qualifies
is replaced by Standard.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from storefront.application.cart_store import CartStore
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import CheckoutStep, Order, OrderLine, OrderSummary
from storefront.domain.model.shipping import (
    ShippingMethod,
    ShippingOption,
    available_methods,
    effective_method,
    is_free_shipping_eligible,
)
from storefront.domain.service.order_number import OrderNumberGenerator
from storefront.domain.service.pricing_engine import compute_summary

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CheckoutStateMachine:

    def __init__(
        self,
        cart_store: CartStore,
        order_numbers: OrderNumberGenerator | None = None,
        clock: Clock = _utc_now,
    ) -> None:
        self._cart_store = cart_store
        self._order_numbers = order_numbers or OrderNumberGenerator()
        self._clock = clock
        self._step = CheckoutStep.CART
        self._shipping_method = ShippingMethod.STANDARD
        self._last_order: Order | None = None
        cart_store.subscribe(self._on_cart_changed)

    # --- State ----------------------------------------------------------------

    @property
    def step(self) -> CheckoutStep:
        return self._step

    @property
    def shipping_method(self) -> ShippingMethod:
        return self._shipping_method

    @property
    def last_order(self) -> Order | None:
        """The most recent placement; kept until the next one replaces it."""
        return self._last_order

    # --- Derived values (recomputed on every read) -----------------------------

    @property
    def can_free_ship(self) -> bool:
        return is_free_shipping_eligible(self._cart_store.subtotal)

    def summary(self) -> OrderSummary:
        return compute_summary(self._cart_store.cart, self._shipping_method)

    def shipping_options(self) -> dict[ShippingMethod, ShippingOption]:
        return available_methods(self._cart_store.subtotal)

    # --- Shipping selection ---------------------------------------------------

    def select_shipping_method(self, method: ShippingMethod) -> bool:
        """Select *method*; refused while it is not currently selectable."""
        if not self.shipping_options()[method].selectable:
            logger.info("Refused shipping method %s: subtotal below threshold", method.value)
            return False
        self._shipping_method = method
        return True

    def reconcile_shipping(self) -> bool:
        """Force an ineligible Free selection back to Standard.

        Returns True when the selection was changed.
        """
        corrected = effective_method(self._shipping_method, self._cart_store.subtotal)
        if corrected is self._shipping_method:
            return False
        logger.info(
            "Shipping downgraded from %s to %s", self._shipping_method.value, corrected.value
        )
        self._shipping_method = corrected
        return True

    # --- Transitions ----------------------------------------------------------

    def open_cart(self) -> None:
        """Re-enter the cart view from any step; the last order stays readable."""
        self._step = CheckoutStep.CART

    def start_checkout(self) -> bool:
        """Transition CART -> CHECKOUT. Refused when the cart is empty."""
        if self._step is not CheckoutStep.CART or self._cart_store.is_empty:
            logger.info("Refused start_checkout from %s", self._step.value)
            return False
        self._step = CheckoutStep.CHECKOUT
        return True

    def back_to_cart(self) -> bool:
        """Transition CHECKOUT -> CART."""
        if self._step is not CheckoutStep.CHECKOUT:
            return False
        self._step = CheckoutStep.CART
        return True

    def place_order(self) -> Order | None:
        """Transition CHECKOUT -> SUCCESS, producing the Order snapshot.

        Steps:
        1. Re-check free-shipping eligibility against the current subtotal.
        2. Price the cart with the (possibly downgraded) method.
        3. Derive a unique order number from the placement time.
        4. Freeze lines and summary into an Order.
        5. Clear the cart.
        6. Move to SUCCESS.

        Returns None, changing nothing, when not in CHECKOUT or the cart
        is empty.
        """
        if self._step is not CheckoutStep.CHECKOUT or self._cart_store.is_empty:
            logger.info("Refused place_order from %s", self._step.value)
            return None

        self.reconcile_shipping()
        cart = self._cart_store.cart
        summary = compute_summary(cart, self._shipping_method)
        placed_at = self._clock()

        order = Order(
            order_number=self._order_numbers.next_number(placed_at),
            lines=tuple(OrderLine.snapshot(line) for line in cart.lines),
            summary=summary,
            shipping_method=self._shipping_method,
            placed_at=placed_at,
        )
        self._last_order = order

        self._cart_store.clear()
        self._step = CheckoutStep.SUCCESS
        logger.info("Order %s placed, total %s", order.order_number, order.summary.total)
        return order

    # --- Internal helpers -----------------------------------------------------

    def _on_cart_changed(self, cart: Cart) -> None:
        self.reconcile_shipping()
