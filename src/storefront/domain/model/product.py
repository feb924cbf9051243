"""Product — a read-only catalog entry.

Products are owned by the catalog provider. The cart references them
but never mutates them, so the dataclass is frozen.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Money

CATEGORIES = ("All", "Electronics", "Fashion", "Home", "Accessories")


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: str
    name: str
    category: str
    price: Money
    image: str = ""
