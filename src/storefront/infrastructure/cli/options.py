"""Shared click parameter types."""

from __future__ import annotations

import click

from storefront.domain.model.shipping import ShippingMethod

shipping_option = click.option(
    "--shipping",
    "shipping",
    type=click.Choice([m.value for m in ShippingMethod], case_sensitive=False),
    default=None,
    help="Shipping method (Standard, Express, Free).",
)


def to_shipping_method(raw: str | None) -> ShippingMethod | None:
    """Map a case-insensitive choice back to the enum."""
    if raw is None:
        return None
    for method in ShippingMethod:
        if method.value.lower() == raw.lower():
            return method
    raise click.BadParameter(f"Unknown shipping method '{raw}'.")
