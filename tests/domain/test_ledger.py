"""Unit tests for the Ledger and its id sequence."""

import pytest

from shopsim.domain.exceptions import ValidationError
from shopsim.domain.model.cart import CartLine
from shopsim.domain.model.catalog import CatalogItem
from shopsim.domain.model.ledger import Ledger
from shopsim.domain.model.order import Order
from shopsim.domain.model.result import ErrorKind
from shopsim.domain.model.value_objects import Money, Quantity

_LINE = CartLine(CatalogItem(4, "Mouse", Money.of("1.50")), Quantity(2))


def _record_next(ledger: Ledger, label: str = "Cash"):
    return ledger.record(Order.create(ledger.next_id(), [_LINE], label))


class TestLedgerIds:

    def test_first_id_is_one(self):
        assert Ledger().next_id() == 1

    def test_ids_increase_by_one(self):
        ledger = Ledger()
        ids = [_record_next(ledger).value.id for _ in range(3)]
        assert ids == [1, 2, 3]
        assert ledger.next_id() == 4

    def test_out_of_sequence_id_rejected(self):
        ledger = Ledger()
        with pytest.raises(ValidationError, match="out of sequence"):
            ledger.record(Order.create(5, [_LINE], "Cash"))


class TestLedgerContents:

    def test_orders_in_checkout_order(self):
        ledger = Ledger()
        _record_next(ledger, "Cash")
        _record_next(ledger, "GCash")
        assert [o.payment_method_label for o in ledger.orders] == ["Cash", "GCash"]

    def test_empty(self):
        ledger = Ledger()
        assert len(ledger) == 0
        assert ledger.orders == ()


class TestLedgerCapacity:

    def test_full_ledger_refuses_order(self):
        ledger = Ledger(capacity=1)
        _record_next(ledger)
        assert ledger.is_full()
        result = ledger.record(Order.create(2, [_LINE], "Cash"))
        assert result.error is ErrorKind.CAPACITY_EXCEEDED
        assert len(ledger) == 1
        assert ledger.next_id() == 2

    def test_non_positive_capacity_rejected(self):
        with pytest.raises(ValidationError):
            Ledger(capacity=-1)
