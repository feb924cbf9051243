"""Application service: Show Cart use case (query).

Everything shown is recomputed from the current cart: summary,
shipping options and the free-shipping hint are never cached.
"""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.checkout import CheckoutStateMachine
from storefront.application.dto import CartDTO, LineDTO, ShippingOptionDTO, SummaryDTO
from storefront.domain.model.shipping import amount_to_free_shipping


class ShowCartHandler:

    def __init__(self, cart_store: CartStore, checkout: CheckoutStateMachine) -> None:
        self._cart_store = cart_store
        self._checkout = checkout

    def handle(self) -> CartDTO:
        cart = self._cart_store.cart
        selected = self._checkout.shipping_method
        return CartDTO(
            items=[
                LineDTO(
                    product_id=line.product_id,
                    product_name=line.product.name,
                    quantity=line.quantity.value,
                    unit_price=str(line.product.price),
                    line_total=str(line.line_total),
                )
                for line in cart.lines
            ],
            item_count=cart.item_count,
            shipping_method=selected.value,
            shipping_options=[
                ShippingOptionDTO(
                    method=option.method.value,
                    cost=str(option.cost),
                    selectable=option.selectable,
                    selected=option.method is selected,
                )
                for option in self._checkout.shipping_options().values()
            ],
            summary=SummaryDTO.from_summary(self._checkout.summary()),
            free_shipping_remaining=str(amount_to_free_shipping(cart.subtotal)),
        )
