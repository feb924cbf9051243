"""Cart aggregate — the set of products a shopper has selected.

Invariants:
- at most one CartLine per product id
- every CartLine holds a positive quantity; driving a quantity to zero or
  below removes the line instead
- lines keep their insertion order; updating a quantity never moves a line
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for the shopper's selection.

    Mutate only through ``add``, ``set_quantity``, ``remove`` and ``clear``.
    Derived values (``subtotal``, ``item_count``) are computed on every read.
    """

    _lines: list[CartLine] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product) -> None:
        """Add one unit of *product*, appending a new line if needed."""
        line = self.line_for(product.id)
        if line is None:
            self._lines.append(CartLine(product=product, quantity=Quantity(1)))
        else:
            line.quantity = line.quantity + 1

    def set_quantity(self, product_id: str, quantity: int) -> None:
        """Set the quantity of an existing line.

        A quantity of zero or less removes the line. Setting the quantity
        of a product that is not in the cart is a no-op.
        """
        if quantity <= 0:
            self.remove(product_id)
            return
        line = self.line_for(product_id)
        if line is not None:
            line.quantity = Quantity(quantity)

    def remove(self, product_id: str) -> None:
        self._lines = [line for line in self._lines if line.product_id != product_id]

    def clear(self) -> None:
        self._lines = []

    # --- Queries --------------------------------------------------------------

    @property
    def lines(self) -> list[CartLine]:
        """A copy of the lines, in insertion order."""
        return list(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self._lines)

    @property
    def subtotal(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.line_total
        return result

    def line_for(self, product_id: str) -> CartLine | None:
        for line in self._lines:
            if line.product_id == product_id:
                return line
        return None
