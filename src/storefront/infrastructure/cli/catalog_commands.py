"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.application.browse_catalog import BrowseCatalogHandler
from storefront.domain.model.product import CATEGORIES
from storefront.infrastructure.bootstrap import preferences_repository, product_catalog


@click.command("list")
@click.option("--search", default="", help="Match product names containing this text.")
@click.option(
    "--category",
    type=click.Choice(CATEGORIES),
    default="All",
    show_default=True,
    help="Only show this category.",
)
@click.option("--wishlist", "wishlist_only", is_flag=True, default=False, help="Only show wishlisted products.")
def catalog_list(search: str, category: str, wishlist_only: bool) -> None:
    """List products in the catalog."""
    handler = BrowseCatalogHandler(
        catalog=product_catalog(),
        preferences_repo=preferences_repository(),
    )
    products = handler.handle(query=search, category=category, wishlist_only=wishlist_only)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"  {'ID':<6} {'Name':<28} {'Category':<12} {'Price':>10}")
    click.echo("-" * 62)
    for p in products:
        star = "*" if p.wishlisted else " "
        click.echo(f"{star} {p.id:<6} {p.name:<28} {p.category:<12} {p.price:>10}")
