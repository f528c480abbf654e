"""
==============================================================================
Record Store Tests
==============================================================================

Tests for reading and writing the flat catalog files.

==============================================================================
"""

import pytest
from pathlib import Path

from wondertrack.catalog.models import ProductItem, RecordSource
from wondertrack.catalog.store import RecordStore, parse_product_line
from wondertrack.core.exceptions import CatalogLoadError


class TestLoadCategories:
    """Tests for categories.txt parsing."""

    def test_keeps_file_order(self, store: RecordStore):
        result = store.load_categories()
        assert result.items == ("Savory", "Spicy", "Sweet")
        assert result.source == RecordSource.PRIMARY
        assert result.errors == []

    def test_skips_blank_lines_and_trims(self, write_catalog, data_dir: Path):
        write_catalog(["", "Waffles", "   ", "  Drinks ", "Sides", ""])
        result = RecordStore(data_dir, use_fallback=False).load_categories()
        assert result.items == ("Waffles", "Drinks", "Sides")


class TestLoadProducts:
    """Tests for products.txt parsing."""

    def test_parses_records(self, store: RecordStore):
        result = store.load_products()
        assert len(result.items) == 6
        assert result.items[0] == ProductItem(
            category="Savory",
            name="Eggmayoza",
            description="Egg and mayo filling",
            price="₱45",
        )
        assert result.skipped == []

    def test_skips_malformed_lines(self, write_catalog, data_dir: Path):
        write_catalog(products=[
            "Waffles|Classic Belgian|Crisp golden waffle|$5.50",
            "bad|line",
            "",
            "Waffles|Too|Many|Fields|Here",
            "  Drinks | Iced Tea | House blend | $2 ",
        ])
        result = RecordStore(data_dir, use_fallback=False).load_products()

        assert [p.name for p in result.items] == ["Classic Belgian", "Iced Tea"]
        assert result.items[1].category == "Drinks"
        assert result.items[1].price == "$2"
        assert [s.line_number for s in result.skipped] == [2, 4]
        assert result.skipped[0].content == "bad|line"

    def test_trailing_empty_field_is_not_counted(self):
        assert parse_product_line("Sweet|Churro|Cinnamon sugar|") is None
        assert parse_product_line("Sweet|Churro||₱40") == ProductItem(
            category="Sweet", name="Churro", description="", price="₱40"
        )


class TestFallback:
    """Tests for primary/bundled resolution."""

    def test_missing_primary_uses_fallback(self, write_catalog, tmp_path: Path):
        bundled = write_catalog(["Sides"], ["Sides|Fries|Crispy|$3"], directory=tmp_path / "bundled")
        store = RecordStore(tmp_path / "missing", fallback_dir=bundled)

        categories = store.load_categories()
        products = store.load_products()

        assert categories.items == ("Sides",)
        assert categories.source == RecordSource.FALLBACK
        assert categories.errors == []
        assert products.items[0].name == "Fries"
        assert products.source == RecordSource.FALLBACK

    def test_missing_everywhere_is_empty(self, tmp_path: Path):
        empty = tmp_path / "empty"
        empty.mkdir()
        store = RecordStore(tmp_path / "missing", fallback_dir=empty)

        categories = store.load_categories()
        products = store.load_products()

        assert categories.items == ()
        assert products.items == ()
        assert categories.source == RecordSource.NONE
        assert products.errors == []

    def test_bundled_copy_ships_with_package(self, tmp_path: Path):
        store = RecordStore(tmp_path / "missing")
        result = store.load_categories()
        assert result.source == RecordSource.FALLBACK
        assert result.items == ("Savory", "Spicy", "Sweet")
        assert len(store.load_products().items) == 7

    def test_unreadable_primary_without_fallback_raises(self, data_dir: Path):
        (data_dir / "categories.txt").write_bytes(b"\xff\xfe\xfa broken")
        store = RecordStore(data_dir, use_fallback=False)

        with pytest.raises(CatalogLoadError) as exc_info:
            store.load_categories()

        assert exc_info.value.code == "CATALOG_LOAD_FAILED"
        assert exc_info.value.resource == "categories.txt"

    def test_unreadable_primary_recovers_from_fallback(self, write_catalog, data_dir: Path, tmp_path: Path):
        (data_dir / "categories.txt").write_bytes(b"\xff\xfe\xfa broken")
        bundled = write_catalog(["Sides"], directory=tmp_path / "bundled")

        result = RecordStore(data_dir, fallback_dir=bundled).load_categories()

        assert result.items == ("Sides",)
        assert result.source == RecordSource.FALLBACK
        assert len(result.errors) == 1


class TestSave:
    """Tests for rewriting the editable files."""

    def test_save_products_rewrites_file(self, store: RecordStore):
        items = [
            ProductItem(category="Sweet", name="Churro", description="Cinnamon", price="₱40"),
            ProductItem(category="Savory", name="Cheesy", description="Cheddar", price="₱50"),
        ]
        store.save_products(items)

        assert store.products_path.read_text(encoding="utf-8") == (
            "Sweet|Churro|Cinnamon|₱40\nSavory|Cheesy|Cheddar|₱50\n"
        )
        assert store.load_products().items == tuple(items)

    def test_save_creates_data_directory(self, tmp_path: Path):
        store = RecordStore(tmp_path / "new" / "dir", use_fallback=False)
        store.save_categories(["Drinks"])
        assert store.load_categories().items == ("Drinks",)
