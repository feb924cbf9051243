"""Abstract repository for wishlist and theme preferences."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.preferences import Theme


class PreferencesRepository(ABC):

    @abstractmethod
    def load_wishlist(self) -> list[str]:
        """Return the wishlisted product ids; empty when absent or malformed."""

    @abstractmethod
    def save_wishlist(self, product_ids: list[str]) -> None:
        """Persist the wishlist. Raises PersistenceError if storage fails."""

    @abstractmethod
    def load_theme(self) -> Theme:
        """Return the saved theme; ``Theme.LIGHT`` when absent or malformed."""

    @abstractmethod
    def save_theme(self, theme: Theme) -> None:
        """Persist the theme. Raises PersistenceError if storage fails."""
