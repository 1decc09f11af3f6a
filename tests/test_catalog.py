"""
Pruebas del catalogo: siembra inicial, reemplazo completo y movimientos de stock.
"""

import pytest

from luminapos.core.catalog import DEFAULT_CATALOG, CatalogRepository
from luminapos.core.errors import ProductNotFoundError
from luminapos.core.models import Product
from luminapos.storage.base import PRODUCTS


def _product(**overrides) -> Product:
    defaults = dict(id="p-1", name="Kopi Susu", category="Beverages", price=18000, stock=7, sku="BEV-010", image="img")
    defaults.update(overrides)
    return Product(**defaults)


class TestSeeding:
    def test_empty_store_seeds_default_catalog(self, catalog, store):
        products = catalog.get_products()
        assert [(p.id, p.name, p.category, p.price, p.stock, p.sku) for p in products] == [
            ("1", "Arabica Coffee Beans 250g", "Coffee", 85000, 24, "COF-001"),
            ("2", "Iced Latte", "Beverages", 28000, 100, "BEV-001"),
            ("3", "Chocolate Croissant", "Pastry", 22000, 15, "PAS-001"),
            ("4", "Mineral Water 600ml", "Beverages", 5000, 50, "BEV-002"),
            ("5", "Tote Bag Lumina", "Merchandise", 45000, 10, "MER-001"),
        ]
        assert store.read(PRODUCTS) is not None

    def test_second_read_does_not_reseed(self, catalog, store):
        catalog.get_products()
        writes = store.writes
        again = catalog.get_products()
        assert len(again) == len(DEFAULT_CATALOG)
        assert store.writes == writes

    def test_reads_are_idempotent(self, catalog):
        assert catalog.get_products() == catalog.get_products()

    def test_seeded_categories(self, catalog):
        assert catalog.categories() == ["Coffee", "Beverages", "Pastry", "Merchandise"]

    def test_empty_saved_catalog_is_not_reseeded(self, catalog):
        catalog.replace_all([])
        assert catalog.get_products() == []


class TestReplaceAll:
    def test_round_trip(self, catalog):
        product = _product()
        catalog.save_products([product])
        assert catalog.get_product("p-1") == product

    def test_full_replace_not_merge(self, catalog):
        catalog.get_products()
        catalog.replace_all([_product()])
        assert [p.id for p in catalog.get_products()] == ["p-1"]

    def test_new_repository_sees_saved_data(self, catalog, store):
        catalog.replace_all([_product(stock=3)])
        assert CatalogRepository(store).stock_of("p-1") == 3

    def test_duplicate_skus_allowed(self, catalog):
        catalog.replace_all([_product(id="a", sku="DUP"), _product(id="b", sku="DUP")])
        assert len(catalog.get_products()) == 2


class TestStock:
    def test_decrement(self, catalog):
        catalog.decrement_stock("3", 4)
        assert catalog.stock_of("3") == 11

    def test_decrement_is_not_clamped(self, catalog):
        catalog.decrement_stock("5", 12)
        assert catalog.stock_of("5") == -2

    def test_decrement_unknown_product(self, catalog):
        with pytest.raises(ProductNotFoundError):
            catalog.decrement_stock("nope", 1)

    def test_stock_of_unknown_is_zero(self, catalog):
        assert catalog.stock_of("nope") == 0

    def test_low_stock(self, catalog):
        assert [p.id for p in catalog.low_stock(15)] == ["5"]
        assert catalog.low_stock(0) == []


class TestManagement:
    def test_create_prepends_with_generated_id(self, catalog):
        created = catalog.create_product(name="Teh Tarik", category="Beverages", price=15000, stock=20)
        products = catalog.get_products()
        assert products[0].id == created.id
        assert created.id.isdigit()
        assert created.image.startswith("https://picsum.photos/seed/")

    def test_upsert_replaces_existing(self, catalog):
        catalog.upsert_product(_product(id="2", name="Iced Latte XL", price=32000))
        products = catalog.get_products()
        assert len(products) == 5
        assert products[1].name == "Iced Latte XL"

    def test_delete(self, catalog):
        catalog.delete_product("1")
        assert catalog.get_product("1") is None
        with pytest.raises(ProductNotFoundError):
            catalog.delete_product("1")

    def test_invalid_product_values(self):
        with pytest.raises(ValueError, match="Precio"):
            _product(price=-1)
        with pytest.raises(ValueError, match="Stock"):
            _product(stock=-1)


class TestSearch:
    def test_by_name_case_insensitive(self, catalog):
        assert [p.id for p in catalog.search("latte")] == ["2"]

    def test_by_sku(self, catalog):
        assert [p.id for p in catalog.search("bev-")] == ["2", "4"]

    def test_by_category(self, catalog):
        assert [p.id for p in catalog.search(category="Beverages")] == ["2", "4"]
        assert len(catalog.search(category="All")) == 5
