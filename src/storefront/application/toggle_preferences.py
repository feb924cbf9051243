"""Application services: wishlist and theme toggles.

Preference writes are fire-and-forget like the cart: a storage failure
is logged and the toggled value is still returned.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import EntityNotFoundError, PersistenceError
from storefront.domain.model.preferences import Theme
from storefront.domain.repository.preferences_repository import PreferencesRepository
from storefront.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class ToggleWishlistHandler:

    def __init__(
        self,
        catalog: ProductCatalog,
        preferences_repo: PreferencesRepository,
    ) -> None:
        self._catalog = catalog
        self._preferences_repo = preferences_repo

    def handle(self, product_id: str) -> bool:
        """Add or remove a product from the wishlist; True if now wishlisted."""
        if self._catalog.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        wishlist = self._preferences_repo.load_wishlist()
        if product_id in wishlist:
            wishlist = [pid for pid in wishlist if pid != product_id]
            wishlisted = False
        else:
            wishlist = [*wishlist, product_id]
            wishlisted = True

        try:
            self._preferences_repo.save_wishlist(wishlist)
        except PersistenceError:
            logger.warning("Wishlist could not be persisted", exc_info=True)
        return wishlisted


class ToggleThemeHandler:

    def __init__(self, preferences_repo: PreferencesRepository) -> None:
        self._preferences_repo = preferences_repo

    def handle(self) -> Theme:
        theme = self._preferences_repo.load_theme().toggled()
        try:
            self._preferences_repo.save_theme(theme)
        except PersistenceError:
            logger.warning("Theme preference could not be persisted", exc_info=True)
        return theme
