"""Unit tests for the Cart and its lines."""

import pytest

from shopsim.domain.exceptions import ValidationError
from shopsim.domain.model.cart import Cart, CartLine
from shopsim.domain.model.catalog import CatalogItem
from shopsim.domain.model.result import ErrorKind
from shopsim.domain.model.value_objects import Money, Quantity

LAPTOP = CatalogItem(1, "Laptop", Money.of("56.00"))
PHONE = CatalogItem(2, "Smartphone", Money.of("48.00"))
KEYBOARD = CatalogItem(5, "Keyboard", Money.of("4.99"))


class TestCartLine:

    def test_line_total(self):
        line = CartLine(LAPTOP, Quantity(3))
        assert line.line_total == Money.of("168.00")


class TestCartTotals:

    def test_empty_cart(self):
        cart = Cart()
        assert cart.is_empty()
        assert cart.total() == Money.zero()

    def test_total_is_sum_of_lines(self):
        cart = Cart()
        cart.add_line(LAPTOP, Quantity(2))
        cart.add_line(PHONE, Quantity(1))
        assert cart.total() == Money.of("160.00")
        assert str(cart.total()) == "160.00"

    def test_total_is_exact_before_display(self):
        cart = Cart()
        for _ in range(3):
            cart.add_line(KEYBOARD, Quantity(7))
        assert cart.total() == Money.of("104.79")


class TestCartLines:

    def test_same_item_twice_stays_two_lines(self):
        cart = Cart()
        cart.add_line(LAPTOP, Quantity(1))
        cart.add_line(LAPTOP, Quantity(1))
        assert len(cart) == 2

    def test_insertion_order_preserved(self):
        cart = Cart()
        cart.add_line(PHONE, Quantity(1))
        cart.add_line(LAPTOP, Quantity(1))
        assert [line.item.name for line in cart.lines] == ["Smartphone", "Laptop"]

    def test_add_returns_line(self):
        result = Cart().add_line(LAPTOP, Quantity(4))
        assert result.ok
        assert result.value.quantity.value == 4

    def test_clear(self):
        cart = Cart()
        cart.add_line(LAPTOP, Quantity(1))
        cart.clear()
        assert cart.is_empty()
        assert cart.total() == Money.zero()

    def test_lines_view_cannot_mutate_cart(self):
        cart = Cart()
        cart.add_line(LAPTOP, Quantity(1))
        lines = cart.lines
        cart.clear()
        assert len(lines) == 1


class TestCartCapacity:

    def test_default_capacity(self):
        assert Cart().capacity == 100

    def test_full_cart_reports_capacity_exceeded(self):
        cart = Cart(capacity=2)
        cart.add_line(LAPTOP, Quantity(1))
        cart.add_line(PHONE, Quantity(1))
        result = cart.add_line(KEYBOARD, Quantity(1))
        assert result.error is ErrorKind.CAPACITY_EXCEEDED
        assert "Keyboard" in result.message
        assert len(cart) == 2

    def test_non_positive_capacity_rejected(self):
        with pytest.raises(ValidationError):
            Cart(capacity=0)
