"""CLI commands for wishlist and theme preferences."""

from __future__ import annotations

import click

from storefront.application.toggle_preferences import (
    ToggleThemeHandler,
    ToggleWishlistHandler,
)
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import preferences_repository, product_catalog


@click.command("toggle")
@click.option("--id", "product_id", required=True, help="Product ID.")
def wishlist_toggle(product_id: str) -> None:
    """Add a product to the wishlist, or remove it if already there."""
    handler = ToggleWishlistHandler(
        catalog=product_catalog(),
        preferences_repo=preferences_repository(),
    )

    try:
        wishlisted = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if wishlisted:
        click.echo(f"Added '{product_id}' to wishlist.")
    else:
        click.echo(f"Removed '{product_id}' from wishlist.")


@click.command("toggle")
def theme_toggle() -> None:
    """Switch between light and dark theme."""
    theme = ToggleThemeHandler(preferences_repo=preferences_repository()).handle()
    click.echo(f"Theme set to {theme.value}.")


@click.command("show")
def theme_show() -> None:
    """Show the current theme."""
    click.echo(preferences_repository().load_theme().value)
