"""Application service: Place Order use case.

Drives the checkout state machine through a whole placement in one go:
open the cart, pick a shipping method, start checkout and place the
order.  Returns None when the machine refuses (empty cart).
"""

from __future__ import annotations

import logging

from storefront.application.checkout import CheckoutStateMachine
from storefront.application.dto import LineDTO, OrderDTO, SummaryDTO
from storefront.domain.model.order import Order
from storefront.domain.model.shipping import ShippingMethod

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(self, checkout: CheckoutStateMachine) -> None:
        self._checkout = checkout

    def handle(self, shipping_method: ShippingMethod | None = None) -> OrderDTO | None:
        self._checkout.open_cart()

        if shipping_method is not None and not self._checkout.select_shipping_method(
            shipping_method
        ):
            logger.warning(
                "%s shipping is not available for this cart; using %s",
                shipping_method.value,
                self._checkout.shipping_method.value,
            )

        if not self._checkout.start_checkout():
            return None

        order = self._checkout.place_order()
        if order is None:
            return None
        return self._to_dto(order)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            order_number=order.order_number,
            items=[
                LineDTO(
                    product_id=line.product_id,
                    product_name=line.product_name,
                    quantity=line.quantity,
                    unit_price=str(line.unit_price),
                    line_total=str(line.line_total),
                )
                for line in order.lines
            ],
            item_count=order.item_count,
            shipping_method=order.shipping_method.value,
            summary=SummaryDTO.from_summary(order.summary),
            placed_at=order.placed_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
