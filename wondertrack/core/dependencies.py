"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency providers for the services wired by the application factory.

The Application builds one RecordStore, CatalogService and
ProductManagementService and stores them on app.state. Endpoints receive
them through Depends(), and tests may swap any of them either on
app.state or through app.dependency_overrides.

Dependency Hierarchy:
--------------------
              ┌──────────────────────┐
              │ get_catalog_service  │
              └──────────┬───────────┘
                         │
          ┌──────────────┴──────────────┐
          │                             │
┌─────────▼──────────┐      ┌───────────▼────────────┐
│ get_layout_config  │      │ get_product_service    │
└────────────────────┘      └────────────────────────┘

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Query, Request

from wondertrack.catalog.layout import LayoutConfig
from wondertrack.core import exceptions
from wondertrack.services.catalog_service import CatalogService
from wondertrack.services.product_service import ProductManagementService


# Module logger
logger = logging.getLogger(__name__)


def get_catalog_service(request: Request) -> CatalogService:
    """CatalogService held on the application state."""
    service = getattr(request.app.state, "catalog_service", None)
    if service is None:
        raise exceptions.internal_error("Catalog service not initialized")
    return service


def get_product_service(request: Request) -> ProductManagementService:
    """ProductManagementService held on the application state."""
    service = getattr(request.app.state, "product_service", None)
    if service is None:
        raise exceptions.internal_error("Product service not initialized")
    return service


def get_layout_config(
    available_width: Optional[float] = Query(
        None, gt=0, description="Measured width of the card grid container"
    ),
    gap: Optional[float] = Query(
        None, ge=0, description="Horizontal gap between cards"
    ),
    catalog: CatalogService = Depends(get_catalog_service),
) -> LayoutConfig:
    """
    Layout for this request.

    Clients pass their measured container width; anything omitted falls
    back to the configured defaults.
    """
    overrides = {}
    if available_width is not None:
        overrides["available_width"] = available_width
    if gap is not None:
        overrides["gap"] = gap

    if not overrides:
        return catalog.default_layout
    return catalog.default_layout.model_copy(update=overrides)
