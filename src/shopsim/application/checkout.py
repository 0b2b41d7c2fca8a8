"""Application service: Checkout use case.

Turns the cart into an immutable Order:

1. Refuse an empty cart or a full ledger (no side effects at all).
2. Resolve the payment kind and show its confirmation.
3. Snapshot the cart lines into a new Order with the next id.
4. Record it in the ledger and clear the cart.
5. Append the audit line.

A failed audit write does not undo the order or refill the cart.
"""

from __future__ import annotations

import logging
from typing import Callable

from shopsim.application.dto import OrderDTO, order_to_dto
from shopsim.domain.model.cart import Cart
from shopsim.domain.model.ledger import Ledger
from shopsim.domain.model.order import Order
from shopsim.domain.model.payment import PaymentKind, resolve
from shopsim.domain.model.result import ErrorKind, Result
from shopsim.domain.repository.order_log import OrderLog

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        cart: Cart,
        ledger: Ledger,
        order_log: OrderLog,
        notify: Callable[[str], None],
    ) -> None:
        self._cart = cart
        self._ledger = ledger
        self._order_log = order_log
        self._notify = notify

    def handle(self, payment_kind: PaymentKind) -> Result[OrderDTO]:
        if self._cart.is_empty():
            return Result.failure(ErrorKind.EMPTY_CART, "Your cart is empty.")

        if self._ledger.is_full():
            logger.warning(
                "Checkout refused: ledger holds %d orders", len(self._ledger)
            )
            return Result.failure(
                ErrorKind.CAPACITY_EXCEEDED,
                f"Order history is full ({self._ledger.capacity} orders); "
                f"checkout cancelled",
            )

        total = self._cart.total()
        method = resolve(payment_kind)
        method.confirm(total, self._notify)

        order = Order.create(
            order_id=self._ledger.next_id(),
            lines=self._cart.lines,
            payment_method_label=method.label,
        )
        recorded = self._ledger.record(order)
        if not recorded.ok:
            return Result.failure(recorded.error, recorded.message)

        self._cart.clear()
        self._order_log.append(order)

        logger.info(
            "Order %d placed: %s via %s (%d lines)",
            order.id, order.total_amount, method.label, len(order.lines),
        )
        return Result.success(order_to_dto(order))
