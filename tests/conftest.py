"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides temporary catalog files, services and an API client.

==============================================================================
"""

import pytest
from pathlib import Path
from typing import Callable, Generator, Iterable, Optional

from fastapi.testclient import TestClient

from wondertrack.catalog.layout import LayoutConfig
from wondertrack.catalog.store import RecordStore
from wondertrack.config import Settings
from wondertrack.main import Application
from wondertrack.services.catalog_service import CatalogService
from wondertrack.services.product_service import ProductManagementService


CATEGORIES = ["Savory", "Spicy", "Sweet"]

PRODUCT_LINES = [
    "Savory|Eggmayoza|Egg and mayo filling|₱45",
    "Savory|Tropiham|Ham and pineapple|₱55",
    "Spicy|Spicy tunasaur|Tuna with chili mayo|₱45",
    "Sweet|Berry on top|Mixed berry jam|₱45",
    "Sweet|Oreo-verload|Crushed cookies and cream|₱45",
    "Sweet|S'morelicious|Marshmallow and chocolate|₱55",
]


# ============================================================================
# FILE FIXTURES
# ============================================================================

@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Empty editable data directory."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def write_catalog(data_dir: Path) -> Callable[..., Path]:
    """Write categories.txt / products.txt into a directory (data_dir by default)."""
    def _write(
        categories: Optional[Iterable[str]] = None,
        products: Optional[Iterable[str]] = None,
        directory: Optional[Path] = None,
    ) -> Path:
        target = directory or data_dir
        target.mkdir(parents=True, exist_ok=True)
        if categories is not None:
            (target / "categories.txt").write_text(
                "".join(f"{line}\n" for line in categories), encoding="utf-8"
            )
        if products is not None:
            (target / "products.txt").write_text(
                "".join(f"{line}\n" for line in products), encoding="utf-8"
            )
        return target
    return _write


@pytest.fixture
def seeded_dir(write_catalog) -> Path:
    """Data directory holding the standard waffle catalog."""
    return write_catalog(CATEGORIES, PRODUCT_LINES)


# ============================================================================
# SERVICE FIXTURES
# ============================================================================

@pytest.fixture
def store(seeded_dir: Path) -> RecordStore:
    """Store over the seeded directory with the bundled fallback disabled."""
    return RecordStore(seeded_dir, use_fallback=False)


@pytest.fixture
def layout() -> LayoutConfig:
    return LayoutConfig(available_width=875, gap=15, min_card_width=280, card_height=120)


@pytest.fixture
def catalog_service(store: RecordStore, layout: LayoutConfig) -> CatalogService:
    return CatalogService(store, layout)


@pytest.fixture
def product_service(catalog_service: CatalogService) -> ProductManagementService:
    return ProductManagementService(catalog_service)


# ============================================================================
# API FIXTURES
# ============================================================================

@pytest.fixture
def application(seeded_dir: Path, store: RecordStore) -> Application:
    settings = Settings(data_directory=str(seeded_dir), debug=False)
    return Application(settings=settings, store=store)


@pytest.fixture
def client(application: Application) -> Generator[TestClient, None, None]:
    """Test client bound to the seeded catalog."""
    with TestClient(application.app) as test_client:
        yield test_client
