import click

from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
)
from storefront.infrastructure.cli.catalog_commands import catalog_list
from storefront.infrastructure.cli.checkout_commands import checkout
from storefront.infrastructure.cli.preference_commands import (
    theme_show,
    theme_toggle,
    wishlist_toggle,
)
from storefront.infrastructure.config import get_settings
from storefront.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log at INFO level.")
def cli(verbose: bool) -> None:
    """Storefront — cart and checkout"""
    configure_logging("INFO" if verbose else get_settings().log_level)


@cli.group()
def catalog() -> None:
    """Browse products."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def wishlist() -> None:
    """Manage the wishlist."""


@cli.group()
def theme() -> None:
    """Manage the theme preference."""


# Register subcommands
catalog.add_command(catalog_list)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
cli.add_command(checkout)
wishlist.add_command(wishlist_toggle)
theme.add_command(theme_show)
theme.add_command(theme_toggle)
