"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from shopsim.application.dto import CartDTO, line_to_dto
from shopsim.domain.model.cart import Cart


class ShowCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return CartDTO(
            lines=[line_to_dto(line) for line in self._cart.lines],
            total=str(self._cart.total()),
        )
