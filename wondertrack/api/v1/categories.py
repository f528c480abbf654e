"""
==============================================================================
Category Management Endpoints
==============================================================================

Listing, adding and removing catalog categories.

==============================================================================
"""

from fastapi import APIRouter, Depends

from wondertrack.core.dependencies import get_product_service
from wondertrack.schemas.common import MessageResponse
from wondertrack.schemas.product import CategoryCreate, CategoryListResponse
from wondertrack.services.product_service import ProductManagementService


router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=CategoryListResponse)
async def list_categories(service: ProductManagementService = Depends(get_product_service)):
    """List categories in display order."""
    categories = service.list_categories()
    return CategoryListResponse(categories=categories, total=len(categories))


@router.post("", response_model=MessageResponse)
async def create_category(
    data: CategoryCreate,
    service: ProductManagementService = Depends(get_product_service)
):
    """Append a category."""
    name = service.add_category(data.name)
    return MessageResponse(message=f"Category '{name}' added")


@router.delete("/{name}", response_model=MessageResponse)
async def delete_category(
    name: str,
    service: ProductManagementService = Depends(get_product_service)
):
    """Remove a category and its products."""
    removed = service.remove_category(name)
    return MessageResponse(message=f"Category '{name}' removed with {removed} products")
