"""Shipping policy — static rate table plus the free-shipping rule.

Pure configuration: nothing here holds state. Free shipping exists as a
method but is only selectable once the subtotal reaches
``FREE_SHIPPING_THRESHOLD``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.model.value_objects import Money


class ShippingMethod(Enum):
    STANDARD = "Standard"
    EXPRESS = "Express"
    FREE = "Free"


SHIPPING_RATES: dict[ShippingMethod, Money] = {
    ShippingMethod.STANDARD: Money.of("6.99"),
    ShippingMethod.EXPRESS: Money.of("14.99"),
    ShippingMethod.FREE: Money.of("0.00"),
}

FREE_SHIPPING_THRESHOLD = Money.of("200.00")


@dataclass(frozen=True)
class ShippingOption:
    method: ShippingMethod
    cost: Money
    selectable: bool


def shipping_cost(method: ShippingMethod) -> Money:
    """Rate for *method*; Free is always zero regardless of eligibility."""
    return SHIPPING_RATES[method]


def is_free_shipping_eligible(subtotal: Money) -> bool:
    return subtotal >= FREE_SHIPPING_THRESHOLD


def available_methods(subtotal: Money) -> dict[ShippingMethod, ShippingOption]:
    """Every method with its cost and whether it can be chosen right now."""
    eligible = is_free_shipping_eligible(subtotal)
    return {
        method: ShippingOption(
            method=method,
            cost=cost,
            selectable=eligible if method is ShippingMethod.FREE else True,
        )
        for method, cost in SHIPPING_RATES.items()
    }


def effective_method(method: ShippingMethod, subtotal: Money) -> ShippingMethod:
    """Downgrade Free to Standard when *subtotal* no longer qualifies."""
    if method is ShippingMethod.FREE and not is_free_shipping_eligible(subtotal):
        return ShippingMethod.STANDARD
    return method


def amount_to_free_shipping(subtotal: Money) -> Money:
    """How much more the shopper must add to unlock free shipping."""
    if is_free_shipping_eligible(subtotal):
        return Money.zero()
    return FREE_SHIPPING_THRESHOLD - subtotal
