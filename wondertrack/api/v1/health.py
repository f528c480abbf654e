"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring.

==============================================================================
"""

from fastapi import APIRouter, Depends

from wondertrack.core.dependencies import get_catalog_service
from wondertrack.core.exceptions import CatalogLoadError
from wondertrack.services.catalog_service import CatalogService


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, catalog: CatalogService):
        self._catalog = catalog

    def check_catalog(self) -> dict:
        """Check that both catalog files can be loaded."""
        try:
            categories = self._catalog.store.load_categories()
            products = self._catalog.store.load_products()
        except CatalogLoadError:
            return {"status": "unreadable", "source": None, "products": 0}

        return {
            "status": "healthy" if categories.items else "empty",
            "source": products.source.value,
            "products": len(products.items),
        }

    def get_health(self) -> dict:
        """Get full health status."""
        catalog_info = self.check_catalog()

        overall = "healthy" if catalog_info["status"] == "healthy" else "degraded"

        return {
            "status": overall,
            "components": {
                "api": "healthy",
                "catalog": catalog_info["status"]
            },
            "details": {
                "catalog_source": catalog_info["source"],
                "products_loaded": catalog_info["products"]
            }
        }


@router.get("")
async def health_check(catalog: CatalogService = Depends(get_catalog_service)):
    """
    Health check endpoint.

    Returns API and catalog file status.
    """
    controller = HealthController(catalog)
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness check."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness check."""
    return {"alive": True}
