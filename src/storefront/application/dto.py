"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Amounts are
pre-formatted for display.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.order import OrderSummary


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    category: str
    price: str  # formatted, e.g. "$49.99"
    wishlisted: bool = False


@dataclass(frozen=True)
class LineDTO:
    """A cart line or order line as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class SummaryDTO:
    subtotal: str
    shipping: str
    tax: str
    total: str

    @staticmethod
    def from_summary(summary: OrderSummary) -> SummaryDTO:
        return SummaryDTO(
            subtotal=str(summary.subtotal),
            shipping=str(summary.shipping_cost),
            tax=str(summary.tax),
            total=str(summary.total),
        )


@dataclass(frozen=True)
class ShippingOptionDTO:
    method: str
    cost: str
    selectable: bool
    selected: bool


@dataclass(frozen=True)
class CartDTO:
    items: list[LineDTO]
    item_count: int
    shipping_method: str
    shipping_options: list[ShippingOptionDTO]
    summary: SummaryDTO
    free_shipping_remaining: str  # "$0.00" once eligible


@dataclass(frozen=True)
class OrderDTO:
    order_number: str
    items: list[LineDTO]
    item_count: int
    shipping_method: str
    summary: SummaryDTO
    placed_at: str
