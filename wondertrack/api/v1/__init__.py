"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Health check endpoints
- catalog: Catalog view (sections and cards)
- categories: Category management
- products: Product management

==============================================================================
"""

from . import health, catalog, categories, products

__all__ = ["health", "catalog", "categories", "products"]
