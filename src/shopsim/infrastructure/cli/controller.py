"""Interactive controller: the menu loop and its validated prompts.

States::

    MainMenu -> {BuildingCart, ViewingCart, ViewingOrders} -> MainMenu
    MainMenu -> Exit

Every prompt re-asks until its parser accepts the line; there is no
retry limit.  Running out of input ends the session like ``Exit``.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from shopsim.application.add_to_cart import AddToCartHandler
from shopsim.application.checkout import CheckoutHandler
from shopsim.application.input_validation import (
    parse_choice,
    parse_product_id,
    parse_quantity,
    parse_yes_no,
)
from shopsim.application.list_products import ListProductsHandler
from shopsim.application.session import ShopSession
from shopsim.application.show_cart import ShowCartHandler
from shopsim.application.show_orders import ShowOrdersHandler
from shopsim.domain.exceptions import DomainException
from shopsim.domain.model.payment import PAYMENT_MENU, PAYMENT_METHODS
from shopsim.domain.model.result import ErrorKind, Result
from shopsim.domain.repository.order_log import OrderLog
from shopsim.infrastructure.cli.console import Console, EndOfInput
from shopsim.infrastructure.cli.rendering import cart_table, order_block, product_table

T = TypeVar("T")

logger = logging.getLogger(__name__)

MENU_VIEW_PRODUCTS = "1"
MENU_VIEW_CART = "2"
MENU_VIEW_ORDERS = "3"
MENU_EXIT = "4"


class ShopController:

    def __init__(
        self,
        session: ShopSession,
        order_log: OrderLog,
        console: Console,
    ) -> None:
        self._session = session
        self._console = console
        self._list_products = ListProductsHandler(session.catalog)
        self._add_to_cart = AddToCartHandler(session.catalog, session.cart)
        self._show_cart = ShowCartHandler(session.cart)
        self._show_orders = ShowOrdersHandler(session.ledger)
        self._checkout = CheckoutHandler(
            cart=session.cart,
            ledger=session.ledger,
            order_log=order_log,
            notify=console.echo,
        )

    # --- Main loop ------------------------------------------------------------

    def run(self) -> None:
        """Show the main menu until the user exits or input runs out."""
        actions: dict[str, Callable[[], None]] = {
            MENU_VIEW_PRODUCTS: self.build_cart,
            MENU_VIEW_CART: self.view_cart,
            MENU_VIEW_ORDERS: self.view_orders,
        }
        try:
            while True:
                self._echo_lines([
                    "",
                    "===== E-Commerce Menu =====",
                    "1. View Products",
                    "2. View Cart",
                    "3. View Orders",
                    "4. Exit",
                ])
                choice = self._prompt(
                    "Choice: ",
                    lambda raw: parse_choice(raw, "1234"),
                    "Invalid choice! Please enter 1-4: ",
                )
                if choice == MENU_EXIT:
                    return
                try:
                    actions[choice]()
                except DomainException as exc:
                    self._console.echo(f"Error: {exc}")
        except EndOfInput:
            logger.debug("Console input exhausted; ending session")
            self._console.echo()

    # --- States ---------------------------------------------------------------

    def build_cart(self) -> None:
        """Add products until the user declines to add another.

        An unknown product id aborts back to the main menu.
        """
        while True:
            self._echo_lines(["", "Available Products:"])
            self._echo_lines(product_table(self._list_products.handle()))

            product_id = self._prompt(
                "\nEnter product ID to add to cart: ",
                parse_product_id,
                "Invalid input! Please enter a number: ",
            )
            found = self._session.catalog.lookup(product_id)
            if not found.ok:
                self._console.echo(f"Error: {found.message}")
                return

            quantity = self._prompt(
                "Enter quantity: ",
                parse_quantity,
                "Invalid input! Please enter a positive number: ",
            )
            added = self._add_to_cart.handle(product_id, quantity)
            if added.ok:
                self._console.echo("Product added successfully!")
            else:
                self._report(added)

            if not self._confirm("Add another product? (Y/N): "):
                return

    def view_cart(self) -> None:
        cart = self._show_cart.handle()
        if cart.is_empty:
            self._console.echo("Your cart is empty.")
            return

        self._echo_lines(["", "Your Shopping Cart:"])
        self._echo_lines(cart_table(cart))

        if self._confirm("\nCheckout? (Y/N): "):
            self.checkout()

    def checkout(self) -> None:
        self._console.echo("\nSelect payment method:")
        for key, kind in PAYMENT_MENU.items():
            self._console.echo(f"{key}. {PAYMENT_METHODS[kind].label}")
        choice = self._prompt(
            "Choice: ",
            lambda raw: parse_choice(raw, PAYMENT_MENU),
            f"Invalid choice! Please enter 1-{len(PAYMENT_MENU)}: ",
        )

        placed = self._checkout.handle(PAYMENT_MENU[choice])
        if placed.ok:
            self._console.echo("[ORDER] Order placed successfully!")
        else:
            self._report(placed)

    def view_orders(self) -> None:
        orders = self._show_orders.handle()
        if not orders:
            self._console.echo("No orders found.")
            return

        self._console.echo("\nOrder History:")
        for order in orders:
            self._echo_lines(order_block(order))

    # --- Input helpers --------------------------------------------------------

    def _prompt(
        self,
        prompt: str,
        parser: Callable[[str], Result[T]],
        retry_prompt: str,
    ) -> T:
        text = prompt
        while True:
            parsed = parser(self._console.ask(text))
            if parsed.ok:
                return parsed.value  # type: ignore[return-value]
            logger.debug("Rejected input: %s", parsed.message)
            text = retry_prompt

    def _confirm(self, prompt: str) -> bool:
        return self._prompt(prompt, parse_yes_no, "Invalid input! Please enter Y or N: ")

    # --- Output helpers -------------------------------------------------------

    def _echo_lines(self, lines: list[str]) -> None:
        for line in lines:
            self._console.echo(line)

    def _report(self, result: Result) -> None:
        if result.error is ErrorKind.CAPACITY_EXCEEDED:
            self._console.echo(f"Warning: {result.message}")
        else:
            self._console.echo(result.message)
