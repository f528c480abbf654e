"""
==============================================================================
WonderTrack Product Catalog - Application Entry Point
==============================================================================

FastAPI application serving the product catalog page:
- Catalog view (category sections with planned card widths)
- Category and product management over the flat catalog files
- Health endpoints

Usage:
------
    # Development
    uvicorn wondertrack.main:app --reload

    # Or
    python -m wondertrack.main

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from wondertrack.config import Settings, get_settings
from wondertrack.core.exceptions import register_exception_handlers
from wondertrack.api.router import api_router
from wondertrack.catalog.layout import LayoutConfig
from wondertrack.catalog.store import RecordStore
from wondertrack.services.catalog_service import CatalogService
from wondertrack.services.product_service import ProductManagementService


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles:
    - Service wiring (store → catalog service → product service)
    - Startup refresh of the catalog view
    - Router and exception handler registration
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[RecordStore] = None
    ):
        """
        Initialize the application.

        Args:
            settings: Settings to use (global settings if None)
            store: RecordStore to use (built from settings if None)
        """
        self._settings = settings or get_settings()
        self._store = store or RecordStore.from_settings(self._settings)
        self._catalog_service = CatalogService(
            self._store,
            LayoutConfig.from_settings(self._settings)
        )
        self._product_service = ProductManagementService(self._catalog_service)
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version="1.0.0",
            description="Waffle shop product catalog and management",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        app.state.catalog_service = self._catalog_service
        app.state.product_service = self._product_service

        register_exception_handlers(app)
        app.include_router(api_router)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup()
        yield
        logger.info("🛑 Shutting down...")

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info(f"📂 Catalog files: {self._settings.data_path.resolve()}")

        view = self._catalog_service.refresh()
        logger.info(
            f"✅ Catalog {view.status.value}: {len(view.sections)} sections, "
            f"{sum(s.item_count for s in view.sections)} products"
        )
        logger.info("=" * 60)

    @property
    def catalog_service(self) -> CatalogService:
        return self._catalog_service

    @property
    def product_service(self) -> ProductManagementService:
        return self._product_service

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "wondertrack.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
