"""Application service: List Products use case (query)."""

from __future__ import annotations

from shopsim.application.dto import ProductDTO, product_to_dto
from shopsim.domain.model.catalog import Catalog


class ListProductsHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(self) -> list[ProductDTO]:
        return [product_to_dto(item) for item in self._catalog.list_items()]
