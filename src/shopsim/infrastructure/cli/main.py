"""Entry point for the ``shopsim`` console script."""

from __future__ import annotations

from pathlib import Path

import click

from shopsim.domain.model.cart import DEFAULT_CART_CAPACITY
from shopsim.domain.model.ledger import DEFAULT_LEDGER_CAPACITY
from shopsim.infrastructure import bootstrap
from shopsim.infrastructure.config import DEFAULT_ORDER_LOG, ShopConfig
from shopsim.infrastructure.logging_config import configure_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.command()
@click.option(
    "--order-log",
    "order_log_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_ORDER_LOG,
    show_default=True,
    help="File that receives one audit line per completed checkout.",
)
@click.option(
    "--cart-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_CART_CAPACITY,
    show_default=True,
    help="Maximum number of lines in the cart.",
)
@click.option(
    "--ledger-capacity",
    type=click.IntRange(min=1),
    default=DEFAULT_LEDGER_CAPACITY,
    show_default=True,
    help="Maximum number of orders kept for this session.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Diagnostic log level (written to stderr).",
)
@click.option("-v", "--verbose", is_flag=True, help="Shortcut for --log-level DEBUG.")
def cli(
    order_log_path: Path,
    cart_capacity: int,
    ledger_capacity: int,
    log_level: str,
    verbose: bool,
) -> None:
    """Interactive shopping simulator: browse, fill a cart, check out."""
    config = ShopConfig(
        order_log_path=order_log_path,
        cart_capacity=cart_capacity,
        ledger_capacity=ledger_capacity,
        log_level="DEBUG" if verbose else log_level.upper(),
    )
    configure_logging(config.log_level)
    bootstrap.controller(config).run()


if __name__ == "__main__":
    cli()
