"""Application service: Browse Catalog use case (query)."""

from __future__ import annotations

from collections.abc import Iterable

from storefront.application.dto import ProductDTO
from storefront.domain.model.product import Product
from storefront.domain.repository.preferences_repository import PreferencesRepository
from storefront.domain.repository.product_catalog import ProductCatalog


def filter_products(
    products: Iterable[Product],
    query: str = "",
    category: str = "All",
    wishlist_only: bool = False,
    wishlist: Iterable[str] = (),
) -> list[Product]:
    """Case-insensitive name search, category match and wishlist restriction."""
    needle = query.strip().lower()
    wished = set(wishlist)
    return [
        p
        for p in products
        if needle in p.name.lower()
        and (category == "All" or p.category == category)
        and (not wishlist_only or p.id in wished)
    ]


class BrowseCatalogHandler:

    def __init__(
        self,
        catalog: ProductCatalog,
        preferences_repo: PreferencesRepository,
    ) -> None:
        self._catalog = catalog
        self._preferences_repo = preferences_repo

    def handle(
        self,
        query: str = "",
        category: str = "All",
        wishlist_only: bool = False,
    ) -> list[ProductDTO]:
        wishlist = self._preferences_repo.load_wishlist()
        products = filter_products(
            self._catalog.list_all(), query, category, wishlist_only, wishlist
        )
        return [
            ProductDTO(
                id=p.id,
                name=p.name,
                category=p.category,
                price=str(p.price),
                wishlisted=p.id in wishlist,
            )
            for p in products
        ]
