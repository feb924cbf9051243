"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.application.session import StorefrontSession
from storefront.infrastructure.config import Settings, get_settings
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_preferences_repository import (
    JsonPreferencesRepository,
)
from storefront.infrastructure.persistence.json_product_catalog import (
    JsonProductCatalog,
)
from storefront.infrastructure.persistence.json_store import JsonFileStore


def product_catalog(settings: Settings | None = None) -> JsonProductCatalog:
    settings = settings or get_settings()
    return JsonProductCatalog(settings.catalog_path)


def state_store(settings: Settings | None = None) -> JsonFileStore:
    settings = settings or get_settings()
    return JsonFileStore(settings.resolved_state_dir)


def preferences_repository(settings: Settings | None = None) -> JsonPreferencesRepository:
    return JsonPreferencesRepository(state_store(settings))


def open_session(settings: Settings | None = None) -> StorefrontSession:
    """Build a session over the configured catalog and persisted state."""
    store = state_store(settings)
    return StorefrontSession.open(
        catalog=product_catalog(settings),
        cart_repo=JsonCartRepository(store),
        preferences_repo=JsonPreferencesRepository(store),
    )
