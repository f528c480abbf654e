"""
==============================================================================
Catalog Aggregation Module
==============================================================================

Groups product records by category.

The resulting CatalogIndex is a plain dict rebuilt from scratch on every
refresh. Keys come from each product's own category field in first-seen
order, so a product whose category is not declared in categories.txt still
gets a group. Only declared categories are ever rendered; the rest are
reported as orphans.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence

from .models import ProductItem


# Module logger
logger = logging.getLogger(__name__)

CatalogIndex = Dict[str, List[ProductItem]]


def group_by_category(products: Iterable[ProductItem]) -> CatalogIndex:
    """
    Group products by their category field.

    Grouping is stable and duplicates are kept.

    Example:
        >>> index = group_by_category(items)
        >>> [p.name for p in index["Sweet"]]
        ['Berry on top', 'Oreo-verload']
    """
    index: CatalogIndex = {}
    for product in products:
        index.setdefault(product.category, []).append(product)
    return index


def orphaned_categories(index: CatalogIndex, categories: Sequence[str]) -> List[str]:
    """Group keys that are not in the declared category list."""
    declared = set(categories)
    return [category for category in index if category not in declared]


def catalog_stats(categories: Sequence[str], index: CatalogIndex) -> Dict:
    """
    Get catalog statistics.

    Counts cover declared categories only; orphaned products are counted
    separately.
    """
    orphans = orphaned_categories(index, categories)
    stats = {
        "total_products": sum(len(index.get(c, [])) for c in categories),
        "total_categories": len(categories),
        "categories": {
            category: len(index.get(category, []))
            for category in categories
        },
        "orphaned_products": sum(len(index[c]) for c in orphans),
    }
    return stats
