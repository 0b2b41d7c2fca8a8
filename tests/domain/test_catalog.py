"""Unit tests for the Catalog."""

import pytest

from shopsim.domain.exceptions import ValidationError
from shopsim.domain.model.catalog import Catalog, CatalogItem, default_catalog
from shopsim.domain.model.result import ErrorKind
from shopsim.domain.model.value_objects import Money


class TestDefaultCatalog:

    def test_has_five_items_in_definition_order(self):
        names = [item.name for item in default_catalog().list_items()]
        assert names == ["Laptop", "Smartphone", "Headphones", "Mouse", "Keyboard"]

    def test_ids_are_one_to_five(self):
        assert [item.id for item in default_catalog().list_items()] == [1, 2, 3, 4, 5]

    def test_prices(self):
        catalog = default_catalog()
        assert catalog.find_by_id(1).price == Money.of("56.00")
        assert catalog.find_by_id(5).price == Money.of("4.99")


class TestLookup:

    def test_find_by_id_hit(self):
        assert default_catalog().find_by_id(2).name == "Smartphone"

    def test_find_by_id_miss_returns_none(self):
        assert default_catalog().find_by_id(99) is None

    def test_lookup_miss_is_not_found(self):
        result = default_catalog().lookup(0)
        assert not result.ok
        assert result.error is ErrorKind.NOT_FOUND
        assert result.message == "Product not found!"

    def test_lookup_hit(self):
        result = default_catalog().lookup(3)
        assert result.ok
        assert result.value.name == "Headphones"


class TestImmutability:

    def test_items_are_frozen(self):
        item = default_catalog().find_by_id(1)
        with pytest.raises(AttributeError):
            item.price = Money.of("1.00")

    def test_list_items_is_a_tuple(self):
        assert isinstance(default_catalog().list_items(), tuple)

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate catalog id"):
            Catalog([
                CatalogItem(1, "A", Money.of("1")),
                CatalogItem(1, "B", Money.of("2")),
            ])
