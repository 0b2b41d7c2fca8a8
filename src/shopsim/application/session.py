"""Per-run shopping state, built once by the composition root."""

from __future__ import annotations

from dataclasses import dataclass, field

from shopsim.domain.model.cart import Cart
from shopsim.domain.model.catalog import Catalog, default_catalog
from shopsim.domain.model.ledger import Ledger


@dataclass
class ShopSession:
    catalog: Catalog = field(default_factory=default_catalog)
    cart: Cart = field(default_factory=Cart)
    ledger: Ledger = field(default_factory=Ledger)
