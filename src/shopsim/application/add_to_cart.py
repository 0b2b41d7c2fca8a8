"""Application service: Add To Cart use case."""

from __future__ import annotations

import logging

from shopsim.application.dto import CartLineDTO, line_to_dto
from shopsim.domain.model.cart import Cart
from shopsim.domain.model.catalog import Catalog
from shopsim.domain.model.result import Result
from shopsim.domain.model.value_objects import Quantity

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self, product_id: int, quantity: int) -> Result[CartLineDTO]:
        """Append a line for *product_id*.

        Fails with ``NOT_FOUND`` for an unknown id and with
        ``CAPACITY_EXCEEDED`` when the cart is full.  *quantity* is
        expected to be validated already; a non-positive value raises
        ``ValidationError``.
        """
        found = self._catalog.lookup(product_id)
        if not found.ok:
            return Result.failure(found.error, found.message)

        added = self._cart.add_line(found.value, Quantity(quantity))
        if not added.ok:
            logger.warning("Cart line refused: %s", added.message)
            return Result.failure(added.error, added.message)

        logger.debug(
            "Added %d x %s to cart (%d lines)",
            quantity, found.value.name, len(self._cart),
        )
        return Result.success(line_to_dto(added.value))
