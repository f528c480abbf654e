"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request, response and view-model schemas using Pydantic.

This package provides:
- Common: Shared response schemas
- Catalog: Immutable catalog view-model tree
- Product: Catalog management schemas

==============================================================================
"""

from .common import MessageResponse
from .catalog import Card, Section, CatalogView, ViewStatus
from .product import (
    CategoryCreate,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse,
    CategoryListResponse,
)

__all__ = [
    # Common
    "MessageResponse",
    # Catalog
    "Card",
    "Section",
    "CatalogView",
    "ViewStatus",
    # Product
    "CategoryCreate",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductListResponse",
    "CategoryListResponse",
]
