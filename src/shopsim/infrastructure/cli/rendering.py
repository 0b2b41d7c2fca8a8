"""Plain-text tables for products, the cart and order history.

Columns are left-aligned at fixed widths; money strings arrive already
formatted with two decimals.
"""

from __future__ import annotations

from shopsim.application.dto import CartDTO, CartLineDTO, OrderDTO, ProductDTO

ID_WIDTH = 12
NAME_WIDTH = 20
PRICE_WIDTH = 10
QTY_WIDTH = 10


def _row(*cells: tuple[object, int]) -> str:
    return "".join(f"{str(value):<{width}}" for value, width in cells)


def _line_header() -> str:
    return _row(
        ("Product ID", ID_WIDTH),
        ("Name", NAME_WIDTH),
        ("Price", PRICE_WIDTH),
        ("Quantity", QTY_WIDTH),
    )


def _line_rows(lines: list[CartLineDTO]) -> list[str]:
    return [
        _row(
            (line.product_id, ID_WIDTH),
            (line.name, NAME_WIDTH),
            (line.price, PRICE_WIDTH),
            (line.quantity, QTY_WIDTH),
        )
        for line in lines
    ]


def product_table(products: list[ProductDTO]) -> list[str]:
    rows = [_row(("Product ID", ID_WIDTH), ("Name", NAME_WIDTH), ("Price", PRICE_WIDTH))]
    for p in products:
        rows.append(_row((p.id, ID_WIDTH), (p.name, NAME_WIDTH), (p.price, PRICE_WIDTH)))
    return rows


def cart_table(cart: CartDTO) -> list[str]:
    return [_line_header(), *_line_rows(cart.lines), f"Total: {cart.total}"]


def order_block(order: OrderDTO) -> list[str]:
    return [
        "",
        f"Order ID: {order.id}",
        f"Total Amount: {order.total}",
        f"Payment Method: {order.payment_method}",
        "Order Details:",
        _line_header(),
        *_line_rows(order.lines),
    ]
