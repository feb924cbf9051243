"""Order — the immutable record produced by a successful placement.

An Order is a snapshot: its lines copy the product data and quantities
at placement time, and its summary freezes the totals. Nothing mutates
an Order after it is created.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from storefront.domain.model.cart import CartLine
from storefront.domain.model.shipping import ShippingMethod
from storefront.domain.model.value_objects import Money


class CheckoutStep(Enum):
    CART = "cart"
    CHECKOUT = "checkout"
    SUCCESS = "success"


@dataclass(frozen=True)
class OrderSummary:
    """Monetary summary of a cart under a shipping method.

    Use ``OrderSummary.create()`` so ``total`` is always the exact sum
    of the other three amounts.
    """

    subtotal: Money
    shipping_cost: Money
    tax: Money
    total: Money

    @staticmethod
    def create(subtotal: Money, shipping_cost: Money, tax: Money) -> OrderSummary:
        return OrderSummary(
            subtotal=subtotal,
            shipping_cost=shipping_cost,
            tax=tax,
            total=subtotal + shipping_cost + tax,
        )


@dataclass(frozen=True)
class OrderLine:
    """Captures the product and quantity of a cart line at placement time."""

    product_id: str
    product_name: str
    category: str
    unit_price: Money  # locked at placement time
    quantity: int

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity

    @staticmethod
    def snapshot(line: CartLine) -> OrderLine:
        return OrderLine(
            product_id=line.product.id,
            product_name=line.product.name,
            category=line.product.category,
            unit_price=line.product.price,
            quantity=line.quantity.value,
        )


@dataclass(frozen=True)
class Order:
    order_number: str
    lines: tuple[OrderLine, ...]
    summary: OrderSummary
    shipping_method: ShippingMethod
    placed_at: datetime

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)
