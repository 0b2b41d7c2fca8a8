"""Order aggregate: a frozen snapshot of a checked-out cart.

Orders are created only by checkout and never change afterwards.  The
lines are copies, independent of the cart they came from.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from shopsim.domain.exceptions import ValidationError
from shopsim.domain.model.cart import CartLine
from shopsim.domain.model.value_objects import Money


@dataclass(frozen=True)
class Order:
    """Use ``Order.create()`` for new orders; it computes the total."""

    id: int
    total_amount: Money
    payment_method_label: str
    lines: tuple[CartLine, ...]

    @staticmethod
    def create(
        order_id: int,
        lines: Iterable[CartLine],
        payment_method_label: str,
    ) -> Order:
        """Build an order from cart lines, enforcing its invariants."""
        if order_id <= 0:
            raise ValidationError("Order id must be positive")
        if not payment_method_label:
            raise ValidationError("Payment method label is required")

        snapshot = tuple(replace(line) for line in lines)
        if not snapshot:
            raise ValidationError("Order must contain at least one item")

        total = Money.zero()
        for line in snapshot:
            total = total + line.line_total

        return Order(
            id=order_id,
            total_amount=total,
            payment_method_label=payment_method_label,
            lines=snapshot,
        )
