"""
==============================================================================
Product Management Endpoints
==============================================================================

Endpoints for browsing and editing product records.

==============================================================================
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from wondertrack.core.dependencies import get_product_service
from wondertrack.schemas.product import (
    ProductCreate,
    ProductListResponse,
    ProductResponse,
    ProductUpdate,
)
from wondertrack.services.product_service import ProductManagementService


router = APIRouter(prefix="/products", tags=["Products"])


@router.get("", response_model=ProductListResponse)
async def list_products(
    category: Optional[str] = Query(None),
    service: ProductManagementService = Depends(get_product_service)
):
    """List products, optionally for one category."""
    products = service.list_products(category)
    return ProductListResponse(products=products, total=len(products))


@router.post("", response_model=ProductResponse)
async def create_product(
    data: ProductCreate,
    service: ProductManagementService = Depends(get_product_service)
):
    """Add a product to a declared category."""
    return ProductResponse(product=service.add_product(data))


@router.put("/{category}/{name}", response_model=ProductResponse)
async def update_product(
    category: str,
    name: str,
    data: ProductUpdate,
    service: ProductManagementService = Depends(get_product_service)
):
    """Update the first product matching category and name."""
    return ProductResponse(product=service.update_product(category, name, data))


@router.delete("/{category}/{name}", response_model=ProductResponse)
async def delete_product(
    category: str,
    name: str,
    service: ProductManagementService = Depends(get_product_service)
):
    """Remove the first product matching category and name."""
    return ProductResponse(product=service.remove_product(category, name))
