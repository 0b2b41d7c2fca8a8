"""Runtime configuration, assembled once by the CLI entry point."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from shopsim.domain.model.cart import DEFAULT_CART_CAPACITY
from shopsim.domain.model.ledger import DEFAULT_LEDGER_CAPACITY

DEFAULT_ORDER_LOG = Path("orders.log")


@dataclass(frozen=True)
class ShopConfig:
    order_log_path: Path = DEFAULT_ORDER_LOG
    cart_capacity: int = DEFAULT_CART_CAPACITY
    ledger_capacity: int = DEFAULT_LEDGER_CAPACITY
    log_level: str = "WARNING"
