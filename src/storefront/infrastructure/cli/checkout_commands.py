"""CLI command for placing an order."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.application.place_order import PlaceOrderHandler
from storefront.infrastructure.bootstrap import open_session
from storefront.infrastructure.cli.options import shipping_option, to_shipping_method


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.order_number} confirmed")
    click.echo(f"Placed:   {dto.placed_at}")
    click.echo(f"Shipping: {dto.shipping_method}")
    click.echo()
    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*55}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<28} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*55}")
    click.echo(f"  {'Subtotal':<20} {dto.summary.subtotal:>12}")
    click.echo(f"  {'Shipping':<20} {dto.summary.shipping:>12}")
    click.echo(f"  {'Tax':<20} {dto.summary.tax:>12}")
    click.echo(f"  {'Total':<20} {dto.summary.total:>12}")


@click.command("checkout")
@shipping_option
def checkout(shipping: str | None) -> None:
    """Place an order for everything in the cart."""
    session = open_session()
    handler = PlaceOrderHandler(checkout=session.checkout)

    dto = handler.handle(to_shipping_method(shipping))
    if dto is None:
        click.echo("Your cart is empty; nothing to check out.")
        return

    _display_order(dto)
