"""
==============================================================================
Catalog View Endpoints
==============================================================================

JSON rendering adapter for the catalog page. Each request runs a full
refresh and returns the resulting view-model tree.

==============================================================================
"""

from fastapi import APIRouter, Depends

from wondertrack.catalog.layout import LayoutConfig
from wondertrack.core.dependencies import get_catalog_service, get_layout_config
from wondertrack.schemas.catalog import CatalogView
from wondertrack.services.catalog_service import CatalogService


router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get("", response_model=CatalogView)
async def get_catalog_view(
    layout: LayoutConfig = Depends(get_layout_config),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Catalog sections for the given container width."""
    return catalog.refresh(layout)


@router.post("/refresh", response_model=CatalogView)
async def refresh_catalog_view(
    layout: LayoutConfig = Depends(get_layout_config),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Explicitly rebuild the catalog view."""
    return catalog.refresh(layout)


@router.get("/stats")
async def get_catalog_stats(catalog: CatalogService = Depends(get_catalog_service)):
    """Get catalog statistics."""
    return {
        "success": True,
        "stats": catalog.stats()
    }
