"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from shopsim.application.session import ShopSession
from shopsim.domain.model.cart import Cart
from shopsim.domain.model.catalog import default_catalog
from shopsim.domain.model.ledger import Ledger
from shopsim.infrastructure.cli.console import ClickConsole, Console
from shopsim.infrastructure.cli.controller import ShopController
from shopsim.infrastructure.config import ShopConfig
from shopsim.infrastructure.persistence.file_order_log import FileOrderLog


def session(config: ShopConfig) -> ShopSession:
    return ShopSession(
        catalog=default_catalog(),
        cart=Cart(capacity=config.cart_capacity),
        ledger=Ledger(capacity=config.ledger_capacity),
    )


def order_log(config: ShopConfig) -> FileOrderLog:
    return FileOrderLog(config.order_log_path)


def controller(config: ShopConfig, console: Console | None = None) -> ShopController:
    return ShopController(
        session=session(config),
        order_log=order_log(config),
        console=console or ClickConsole(),
    )
