"""Application service: Add To Cart use case."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.repository.product_catalog import ProductCatalog


class AddToCartHandler:

    def __init__(self, catalog: ProductCatalog, cart_store: CartStore) -> None:
        self._catalog = catalog
        self._cart_store = cart_store

    def handle(self, product_id: str) -> Product:
        """Add one unit of a catalog product to the cart."""
        product = self._catalog.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        self._cart_store.add(product)
        return product
