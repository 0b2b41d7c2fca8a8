"""Unit tests for the Order aggregate."""

from dataclasses import FrozenInstanceError

import pytest

from shopsim.domain.exceptions import ValidationError
from shopsim.domain.model.cart import Cart, CartLine
from shopsim.domain.model.catalog import CatalogItem
from shopsim.domain.model.order import Order
from shopsim.domain.model.value_objects import Money, Quantity


def _make_line(name: str = "Laptop", qty: int = 1, price: str = "56.00") -> CartLine:
    """Helper to build a valid cart line."""
    return CartLine(CatalogItem(1, name, Money.of(price)), Quantity(qty))


class TestOrderCreation:

    def test_happy_path(self):
        order = Order.create(1, [_make_line(qty=2)], "Cash")
        assert order.id == 1
        assert order.payment_method_label == "Cash"
        assert order.total_amount == Money.of("112.00")
        assert len(order.lines) == 1

    def test_total_is_sum_of_lines(self):
        lines = [
            _make_line("Laptop", qty=2, price="56.00"),
            _make_line("Smartphone", qty=1, price="48.00"),
        ]
        assert Order.create(1, lines, "GCash").total_amount == Money.of("160.00")

    def test_no_lines_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order.create(1, [], "Cash")

    def test_non_positive_id_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Order.create(0, [_make_line()], "Cash")

    def test_missing_label_rejected(self):
        with pytest.raises(ValidationError, match="label is required"):
            Order.create(1, [_make_line()], "")


class TestOrderSnapshot:

    def test_lines_independent_of_cart(self):
        cart = Cart()
        cart.add_line(CatalogItem(1, "Laptop", Money.of("56.00")), Quantity(1))
        order = Order.create(1, cart.lines, "Cash")
        cart.clear()
        assert len(order.lines) == 1
        assert order.total_amount == Money.of("56.00")

    def test_lines_are_copies(self):
        line = _make_line()
        order = Order.create(1, [line], "Cash")
        assert order.lines[0] == line
        assert order.lines[0] is not line

    def test_order_is_immutable(self):
        order = Order.create(1, [_make_line()], "Cash")
        with pytest.raises(FrozenInstanceError):
            order.payment_method_label = "GCash"
