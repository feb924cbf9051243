"""Domain service: Pricing Engine.

A pure function from cart contents and a shipping method to an
OrderSummary.  It does not check free-shipping eligibility: the caller
decides which method is valid (see ``CheckoutStateMachine``).
"""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.cart import Cart
from storefront.domain.model.order import OrderSummary
from storefront.domain.model.shipping import ShippingMethod, shipping_cost
from storefront.domain.model.value_objects import Money

TAX_RATE = Decimal("0.085")


def compute_tax(subtotal: Money) -> Money:
    """Tax applies to the subtotal only; shipping is never taxed."""
    return subtotal * TAX_RATE


def compute_summary(cart: Cart, method: ShippingMethod) -> OrderSummary:
    subtotal = cart.subtotal
    return OrderSummary.create(
        subtotal=subtotal,
        shipping_cost=shipping_cost(method),
        tax=compute_tax(subtotal),
    )
