"""Catalog of purchasable items.

The catalog is fixed at startup: items are frozen and the collection
offers no mutation operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from shopsim.domain.exceptions import ValidationError
from shopsim.domain.model.result import ErrorKind, Result
from shopsim.domain.model.value_objects import Money


@dataclass(frozen=True)
class CatalogItem:
    id: int
    name: str
    price: Money


class Catalog:
    """Ordered, read-only set of ``CatalogItem``.

    Display order is definition order.  Ids must be unique.
    """

    def __init__(self, items: Iterable[CatalogItem]) -> None:
        self._items: tuple[CatalogItem, ...] = tuple(items)
        seen: set[int] = set()
        for item in self._items:
            if item.id in seen:
                raise ValidationError(f"Duplicate catalog id {item.id}")
            seen.add(item.id)

    def list_items(self) -> tuple[CatalogItem, ...]:
        return self._items

    def find_by_id(self, product_id: int) -> CatalogItem | None:
        """Return the item with *product_id*, or None."""
        for item in self._items:
            if item.id == product_id:
                return item
        return None

    def lookup(self, product_id: int) -> Result[CatalogItem]:
        """Like ``find_by_id`` but reports a miss as ``NOT_FOUND``."""
        item = self.find_by_id(product_id)
        if item is None:
            return Result.failure(ErrorKind.NOT_FOUND, "Product not found!")
        return Result.success(item)

    def __len__(self) -> int:
        return len(self._items)


DEFAULT_ITEMS = (
    CatalogItem(1, "Laptop", Money.of("56.00")),
    CatalogItem(2, "Smartphone", Money.of("48.00")),
    CatalogItem(3, "Headphones", Money.of("25.00")),
    CatalogItem(4, "Mouse", Money.of("1.50")),
    CatalogItem(5, "Keyboard", Money.of("4.99")),
)


def default_catalog() -> Catalog:
    return Catalog(DEFAULT_ITEMS)
