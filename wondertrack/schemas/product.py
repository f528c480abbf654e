"""
==============================================================================
Product Schemas Module
==============================================================================

Request and response schemas for catalog management.

==============================================================================
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from wondertrack.catalog.models import ProductItem


class CategoryCreate(BaseModel):
    """Category creation request."""
    name: str = Field(..., min_length=1)


class ProductCreate(BaseModel):
    """Product creation request."""
    category: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: str = Field(..., min_length=1)


class ProductUpdate(BaseModel):
    """Product update request. Omitted fields keep their value."""
    category: Optional[str] = Field(default=None)
    name: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    price: Optional[str] = Field(default=None)


class ProductResponse(BaseModel):
    """Single product response."""
    success: bool = Field(default=True)
    product: ProductItem


class ProductListResponse(BaseModel):
    """List of products response."""
    success: bool = Field(default=True)
    products: List[ProductItem]
    total: int


class CategoryListResponse(BaseModel):
    """List of categories response."""
    success: bool = Field(default=True)
    categories: List[str]
    total: int
