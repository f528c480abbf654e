"""
==============================================================================
Catalog Package - Product Catalog Pipeline
==============================================================================

Loads the catalog files, groups products by category and plans the card
grid for each category.

Classes:
--------
- ProductItem: Frozen pydantic model for one product record
- LoadResult: Parsed records plus skipped lines and recovered errors
- RecordStore: Reads and writes categories.txt / products.txt
- LayoutConfig, LayoutPlanner: Card width policy

The renderer lives in wondertrack.catalog.renderer and is imported from
there directly.

==============================================================================
"""

from .models import ProductItem, LoadResult, RecordSource, SkippedLine
from .catalog import CatalogIndex, group_by_category, orphaned_categories, catalog_stats
from .layout import LayoutConfig, LayoutPlanner, card_width
from .store import RecordStore

__all__ = [
    "ProductItem",
    "LoadResult",
    "RecordSource",
    "SkippedLine",
    "CatalogIndex",
    "group_by_category",
    "orphaned_categories",
    "catalog_stats",
    "LayoutConfig",
    "LayoutPlanner",
    "card_width",
    "RecordStore",
]
