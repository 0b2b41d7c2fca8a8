"""Application service: Show Orders use case (query)."""

from __future__ import annotations

from shopsim.application.dto import OrderDTO, order_to_dto
from shopsim.domain.model.ledger import Ledger


class ShowOrdersHandler:

    def __init__(self, ledger: Ledger) -> None:
        self._ledger = ledger

    def handle(self) -> list[OrderDTO]:
        """Every recorded order, oldest first."""
        return [order_to_dto(order) for order in self._ledger.orders]
