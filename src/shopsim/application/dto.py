"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals.  Money is already formatted, e.g. "56.00".
"""

from __future__ import annotations

from dataclasses import dataclass

from shopsim.domain.model.cart import CartLine
from shopsim.domain.model.catalog import CatalogItem
from shopsim.domain.model.order import Order


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str


@dataclass(frozen=True)
class CartLineDTO:
    product_id: int
    name: str
    price: str
    quantity: int
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class OrderDTO:
    id: int
    total: str
    payment_method: str
    lines: list[CartLineDTO]


# --- Mapping -------------------------------------------------------------------


def product_to_dto(item: CatalogItem) -> ProductDTO:
    return ProductDTO(id=item.id, name=item.name, price=str(item.price))


def line_to_dto(line: CartLine) -> CartLineDTO:
    return CartLineDTO(
        product_id=line.item.id,
        name=line.item.name,
        price=str(line.item.price),
        quantity=line.quantity.value,
        line_total=str(line.line_total),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        total=str(order.total_amount),
        payment_method=order.payment_method_label,
        lines=[line_to_dto(line) for line in order.lines],
    )
