"""JSON-file-backed implementation of ProductCatalog (read-only)."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_catalog import ProductCatalog


class JsonProductCatalog(ProductCatalog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._products: dict[str, Product] | None = None

    # --- ProductCatalog interface ---------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        # The catalog is immutable for the lifetime of a session: read once.
        if self._products is None:
            self._products = self._read()
        return self._products

    def _read(self) -> dict[str, Product]:
        if not self._file_path.exists():
            return {}
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                category=item["category"],
                price=Money(Decimal(str(item["price"])), item.get("currency", "USD")),
                image=item.get("image", ""),
            )
            for item in raw
        }
