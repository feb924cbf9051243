"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.dto import CartDTO
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.shipping import FREE_SHIPPING_THRESHOLD
from storefront.infrastructure.bootstrap import open_session
from storefront.infrastructure.cli.options import shipping_option, to_shipping_method


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
def cart_add(product_id: str) -> None:
    """Add one unit of a product to the cart."""
    session = open_session()
    handler = AddToCartHandler(catalog=session.catalog, cart_store=session.cart_store)

    try:
        product = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    line = session.cart_store.cart.line_for(product.id)
    click.echo(f"Added '{product.name}' to cart (quantity {line.quantity})")


@click.command("set")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity; 0 or less removes it.")
def cart_set(product_id: str, quantity: int) -> None:
    """Set the quantity of a product already in the cart."""
    session = open_session()
    if session.cart_store.cart.line_for(product_id) is None:
        click.echo(f"Product '{product_id}' is not in the cart.")
        return

    session.cart_store.set_quantity(product_id, quantity)

    if quantity <= 0:
        click.echo(f"Removed '{product_id}' from cart.")
    else:
        click.echo(f"Quantity of '{product_id}' set to {quantity}.")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def cart_remove(product_id: str) -> None:
    """Remove a product from the cart."""
    session = open_session()
    session.cart_store.remove(product_id)
    click.echo(f"Removed '{product_id}' from cart.")


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    session = open_session()
    session.cart_store.clear()
    click.echo("Cart cleared.")


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying the cart."""
    if not dto.items:
        click.echo("Your cart is empty.")
        return

    noun = "item" if dto.item_count == 1 else "items"
    click.echo(f"{dto.item_count} {noun} in your cart")
    click.echo()
    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*55}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<28} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*55}")
    click.echo()

    click.echo("Shipping:")
    for option in dto.shipping_options:
        marker = "(x)" if option.selected else "( )"
        note = "" if option.selectable else "  [unavailable]"
        click.echo(f"  {marker} {option.method:<10} {option.cost:>10}{note}")
    if dto.free_shipping_remaining != "$0.00":
        click.echo(
            f"  Free shipping unlocks at {FREE_SHIPPING_THRESHOLD}. Add {dto.free_shipping_remaining} more."
        )
    click.echo()

    click.echo(f"  {'Subtotal':<20} {dto.summary.subtotal:>12}")
    click.echo(f"  {'Shipping':<20} {dto.summary.shipping:>12}")
    click.echo(f"  {'Tax':<20} {dto.summary.tax:>12}")
    click.echo(f"  {'Total':<20} {dto.summary.total:>12}")


@click.command("show")
@shipping_option
def cart_show(shipping: str | None) -> None:
    """Show cart contents, shipping options and the order summary."""
    session = open_session()
    method = to_shipping_method(shipping)
    if method is not None and not session.checkout.select_shipping_method(method):
        click.echo(f"{method.value} shipping is not available for this cart.")

    handler = ShowCartHandler(cart_store=session.cart_store, checkout=session.checkout)
    _display_cart(handler.handle())
