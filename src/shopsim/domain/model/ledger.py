"""Ledger: the append-only history of orders for this process.

The ledger also owns the order id sequence.  Ids start at 1, increase
by one per recorded order and are never reused.
"""

from __future__ import annotations

from shopsim.domain.exceptions import ValidationError
from shopsim.domain.model.order import Order
from shopsim.domain.model.result import ErrorKind, Result

DEFAULT_LEDGER_CAPACITY = 100


class Ledger:

    def __init__(self, capacity: int = DEFAULT_LEDGER_CAPACITY) -> None:
        if capacity <= 0:
            raise ValidationError("Ledger capacity must be positive")
        self._capacity = capacity
        self._orders: list[Order] = []
        self._next_id = 1

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def is_full(self) -> bool:
        return len(self._orders) >= self._capacity

    def next_id(self) -> int:
        """Peek at the id the next recorded order will receive."""
        return self._next_id

    def record(self, order: Order) -> Result[Order]:
        """Append *order*, which must carry the id from ``next_id()``."""
        if self.is_full():
            return Result.failure(
                ErrorKind.CAPACITY_EXCEEDED,
                f"Order history is full ({self._capacity} orders)",
            )
        if order.id != self._next_id:
            raise ValidationError(
                f"Order id {order.id} out of sequence, expected {self._next_id}"
            )
        self._orders.append(order)
        self._next_id += 1
        return Result.success(order)

    def __len__(self) -> int:
        return len(self._orders)
