"""Unit tests for the Cart aggregate and its invariants."""

import random

from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import Money
from tests.fakes import make_product


WIDGET = make_product("1", "49.99", name="Widget")
GADGET = make_product("2", "10.00", name="Gadget")
GIZMO = make_product("3", "5.00", name="Gizmo")


def _cart(*products) -> Cart:
    cart = Cart()
    for product in products:
        cart.add(product)
    return cart


def _quantities(cart: Cart) -> list[tuple[str, int]]:
    return [(line.product_id, line.quantity.value) for line in cart.lines]


class TestAdd:

    def test_new_product_appends_line_with_quantity_one(self):
        cart = _cart(WIDGET, GADGET)
        assert _quantities(cart) == [("1", 1), ("2", 1)]

    def test_existing_product_increments_in_place(self):
        cart = _cart(WIDGET, GADGET, WIDGET)
        assert _quantities(cart) == [("1", 2), ("2", 1)]


class TestSetQuantity:

    def test_sets_quantity_preserving_position(self):
        cart = _cart(WIDGET, GADGET, GIZMO)
        cart.set_quantity("2", 7)
        assert _quantities(cart) == [("1", 1), ("2", 7), ("3", 1)]

    def test_zero_removes_line(self):
        cart = _cart(WIDGET, GADGET, GIZMO)
        cart.set_quantity("2", 0)
        assert _quantities(cart) == [("1", 1), ("3", 1)]

    def test_negative_removes_line(self):
        cart = _cart(WIDGET, GADGET, GIZMO)
        cart.set_quantity("1", -4)
        assert _quantities(cart) == [("2", 1), ("3", 1)]

    def test_unknown_product_is_noop(self):
        cart = _cart(WIDGET, GADGET, GIZMO)
        cart.set_quantity("99", 3)
        cart.set_quantity("99", 0)
        assert _quantities(cart) == [("1", 1), ("2", 1), ("3", 1)]


class TestRemoveAndClear:

    def test_remove_present(self):
        cart = _cart(WIDGET)
        cart.remove("1")
        assert cart.is_empty

    def test_remove_absent_is_noop(self):
        cart = _cart(WIDGET)
        cart.remove("42")
        assert _quantities(cart) == [("1", 1)]

    def test_clear_is_idempotent(self):
        cart = _cart(WIDGET)
        cart.clear()
        cart.clear()
        assert cart.is_empty
        assert cart.lines == []


class TestDerivedValues:

    def test_subtotal_is_exact_sum(self):
        cart = _cart(WIDGET, WIDGET, GADGET)
        assert cart.subtotal == Money.of("109.98")

    def test_empty_cart_subtotal_is_zero(self):
        assert Cart().subtotal == Money.zero()

    def test_item_count_sums_quantities(self):
        cart = _cart(WIDGET, GADGET)
        cart.set_quantity("1", 3)
        assert cart.item_count == 4

    def test_lines_is_a_copy(self):
        cart = _cart(WIDGET)
        cart.lines.clear()
        assert not cart.is_empty

    def test_line_total(self):
        cart = _cart(WIDGET, WIDGET)
        assert cart.line_for("1").line_total == Money.of("99.98")


class TestInvariantsUnderRandomOperations:

    def test_no_nonpositive_or_duplicate_lines(self):
        rng = random.Random(1234)
        products = [WIDGET, GADGET, GIZMO]
        cart = Cart()

        for _ in range(500):
            op = rng.choice(["add", "set", "remove"])
            product = rng.choice(products)
            if op == "add":
                cart.add(product)
            elif op == "set":
                cart.set_quantity(product.id, rng.randint(-3, 5))
            else:
                cart.remove(product.id)

            ids = [line.product_id for line in cart.lines]
            assert len(ids) == len(set(ids))
            assert all(line.quantity.value > 0 for line in cart.lines)
            expected = sum(
                line.product.price.amount * line.quantity.value for line in cart.lines
            )
            assert cart.subtotal.amount == expected
