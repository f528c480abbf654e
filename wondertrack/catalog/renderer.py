"""
==============================================================================
View Renderer Module
==============================================================================

Turns declared categories and a CatalogIndex into Section view-models.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

from wondertrack.catalog.catalog import CatalogIndex
from wondertrack.catalog.layout import LayoutPlanner
from wondertrack.catalog.models import ProductItem
from wondertrack.schemas.catalog import Card, Section


# Module logger
logger = logging.getLogger(__name__)


class ViewRenderer:
    """
    Pure renderer from catalog data to view-models.

    Every declared category yields a section, in declared order, even when
    it has no products. Index keys that are not declared are ignored.

    Example:
        >>> renderer = ViewRenderer(LayoutPlanner(LayoutConfig()))
        >>> sections = renderer.render(["Sweet"], {"Sweet": [item]})
        >>> sections[0].badge
        '1 Items'
    """

    def __init__(self, planner: LayoutPlanner) -> None:
        self._planner = planner

    def render(self, categories: Sequence[str], index: CatalogIndex) -> Tuple[Section, ...]:
        """Build one Section per declared category."""
        return tuple(
            self.render_section(category, index.get(category, []))
            for category in categories
        )

    def render_section(self, category: str, products: Sequence[ProductItem]) -> Section:
        planned = self._planner.plan(len(products))
        cards = tuple(self._card(product, planned) for product in products)

        logger.debug(f"Section '{category}': {len(cards)} cards at {planned:.2f}px")

        return Section(
            category=category,
            item_count=len(cards),
            badge=f"{len(cards)} Items",
            card_width=planned,
            cards=cards,
        )

    def _card(self, product: ProductItem, planned_width: float) -> Card:
        config = self._planner.config
        return Card(
            name=product.name,
            description=product.description,
            price=product.price,
            width=self._planner.clamp(planned_width),
            min_width=config.min_card_width,
            height=config.card_height,
        )
