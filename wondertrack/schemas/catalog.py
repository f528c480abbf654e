"""
==============================================================================
Catalog View Schemas Module
==============================================================================

Immutable view-model tree for the product catalog page.

    CatalogView
    └── Section (one per declared category)
        └── Card (one per product)

A rendering adapter (the JSON API, or any UI toolkit) applies this tree
as a whole; nothing in it refers back to live widgets.

==============================================================================
"""

from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from wondertrack.catalog.layout import LayoutConfig
from wondertrack.catalog.models import SkippedLine


class Card(BaseModel):
    """One product card."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    price: str
    width: float = Field(..., ge=0)
    min_width: float = Field(..., ge=0)
    height: float = Field(..., gt=0)


class Section(BaseModel):
    """One category section: header, count badge and card grid."""

    model_config = ConfigDict(frozen=True)

    category: str
    item_count: int = Field(..., ge=0)
    badge: str
    card_width: float
    cards: Tuple[Card, ...] = ()


class ViewStatus(str, Enum):
    """Outcome of one refresh."""
    READY = "ready"
    EMPTY = "empty"
    FAILED = "failed"


class CatalogView(BaseModel):
    """
    Result of one refresh.

    Attributes:
        status: ready, empty (legitimately nothing to show) or failed
        sections: Rendered sections in category order
        orphaned_categories: Product categories missing from categories.txt
        skipped_lines: Malformed product lines that were dropped
        errors: Load failures, recovered or not
        layout: Dimensions the sections were planned for
    """

    model_config = ConfigDict(frozen=True)

    success: bool = Field(default=True)
    status: ViewStatus
    sections: Tuple[Section, ...] = ()
    orphaned_categories: List[str] = Field(default_factory=list)
    skipped_lines: List[SkippedLine] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
    layout: LayoutConfig
