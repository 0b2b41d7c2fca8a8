"""Shopping cart for the current session.

Lines are kept in insertion order and never merged: adding the same
product twice yields two lines.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopsim.domain.exceptions import ValidationError
from shopsim.domain.model.catalog import CatalogItem
from shopsim.domain.model.result import ErrorKind, Result
from shopsim.domain.model.value_objects import Money, Quantity

DEFAULT_CART_CAPACITY = 100


@dataclass(frozen=True)
class CartLine:
    """A catalog item and how many of it were requested.

    ``item`` is a frozen snapshot, so later catalog changes cannot alter
    a line already in the cart.
    """

    item: CatalogItem
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.item.price * self.quantity.value


class Cart:
    """Mutable, ordered list of ``CartLine``.

    Invariant: ``total()`` always equals the sum of every line's total.
    """

    def __init__(self, capacity: int = DEFAULT_CART_CAPACITY) -> None:
        if capacity <= 0:
            raise ValidationError("Cart capacity must be positive")
        self._capacity = capacity
        self._lines: list[CartLine] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    def add_line(self, item: CatalogItem, quantity: Quantity) -> Result[CartLine]:
        """Append a line, or report ``CAPACITY_EXCEEDED`` when full."""
        if len(self._lines) >= self._capacity:
            return Result.failure(
                ErrorKind.CAPACITY_EXCEEDED,
                f"Cart is full ({self._capacity} lines); {item.name} was not added",
            )
        line = CartLine(item=item, quantity=quantity)
        self._lines.append(line)
        return Result.success(line)

    def total(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.line_total
        return result

    def is_empty(self) -> bool:
        return not self._lines

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)
