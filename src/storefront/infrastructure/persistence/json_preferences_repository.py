"""JSON-file-backed implementation of PreferencesRepository."""

from __future__ import annotations

import logging

from storefront.domain.model.preferences import Theme
from storefront.domain.repository.preferences_repository import PreferencesRepository
from storefront.infrastructure.persistence.json_store import JsonFileStore

logger = logging.getLogger(__name__)

WISHLIST_KEY = "wishlist"
THEME_KEY = "theme"


class JsonPreferencesRepository(PreferencesRepository):

    def __init__(self, store: JsonFileStore) -> None:
        self._store = store

    def load_wishlist(self) -> list[str]:
        raw = self._store.get(WISHLIST_KEY)
        if raw is None:
            return []
        if not isinstance(raw, list) or not all(isinstance(pid, str) for pid in raw):
            logger.warning("Malformed wishlist record; using an empty wishlist")
            return []
        # de-duplicate, keeping first occurrence
        return list(dict.fromkeys(raw))

    def save_wishlist(self, product_ids: list[str]) -> None:
        self._store.set(WISHLIST_KEY, list(product_ids))

    def load_theme(self) -> Theme:
        raw = self._store.get(THEME_KEY)
        try:
            return Theme(raw)
        except ValueError:
            if raw is not None:
                logger.warning("Unknown theme %r; using light", raw)
            return Theme.LIGHT

    def save_theme(self, theme: Theme) -> None:
        self._store.set(THEME_KEY, theme.value)
