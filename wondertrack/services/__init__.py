"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes sitting between the API and the catalog files.

This package provides:
- CatalogService: Runs the load → group → render pipeline
- ProductManagementService: Category and product CRUD

    ┌─────────────────────────┐
    │       API Router        │
    └────────────┬────────────┘
                 │
    ┌────────────▼────────────┐      notify_data_changed()
    │ ProductManagementService├──────────────┐
    └────────────┬────────────┘              │
                 │                  ┌────────▼────────┐
                 │                  │ CatalogService  │
                 │                  └────────┬────────┘
    ┌────────────▼───────────────────────────▼────────┐
    │                  RecordStore                    │
    └─────────────────────────────────────────────────┘

Services receive their collaborators through the constructor; the
application factory wires one instance of each onto app.state.

==============================================================================
"""

from .catalog_service import CatalogService
from .product_service import ProductManagementService

__all__ = [
    "CatalogService",
    "ProductManagementService",
]
