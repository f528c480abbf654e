"""
==============================================================================
Catalog Service Module
==============================================================================

Runs the catalog display pipeline and tells subscribers when it re-runs.

Pipeline:
---------
    RecordStore.load_categories / load_products
        → group_by_category
        → ViewRenderer.render (LayoutPlanner per section)
        → CatalogView

Every refresh is a full, stateless rebuild. Refresh triggers are the
initial page load, a "data changed" notification from the management
service, and explicit requests from the hosting page.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from wondertrack.catalog.catalog import group_by_category, orphaned_categories, catalog_stats
from wondertrack.catalog.layout import LayoutConfig, LayoutPlanner
from wondertrack.catalog.renderer import ViewRenderer
from wondertrack.catalog.store import RecordStore
from wondertrack.core.exceptions import CatalogLoadError
from wondertrack.schemas.catalog import CatalogView, ViewStatus


# Module logger
logger = logging.getLogger(__name__)

ViewListener = Callable[[CatalogView], None]


class CatalogService:
    """
    Entry point for the catalog page.

    Attributes:
        _store: RecordStore the pipeline reads from
        _layout: Default layout used when refresh() gets none
        _listeners: Callbacks receiving the view after a data change
        _last_view: Most recent refresh result

    Example:
        >>> service = CatalogService(store, LayoutConfig())
        >>> view = service.refresh()
        >>> [s.category for s in view.sections]
        ['Savory', 'Spicy', 'Sweet']
    """

    def __init__(self, store: RecordStore, layout: Optional[LayoutConfig] = None) -> None:
        self._store = store
        self._layout = layout or LayoutConfig()
        self._listeners: List[ViewListener] = []
        self._last_view: Optional[CatalogView] = None

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def default_layout(self) -> LayoutConfig:
        return self._layout

    @property
    def last_view(self) -> Optional[CatalogView]:
        return self._last_view

    # =========================================================================
    # REFRESH
    # =========================================================================

    def refresh(self, layout: Optional[LayoutConfig] = None) -> CatalogView:
        """
        Load, group and render the catalog.

        A load failure produces a FAILED view instead of raising, so the
        hosting page can show it next to the last good content.
        """
        layout = layout or self._layout
        logger.info("Refreshing products view...")

        try:
            categories = self._store.load_categories()
            products = self._store.load_products()
        except CatalogLoadError as e:
            logger.error(f"Catalog refresh failed: {e.message}")
            view = CatalogView(
                success=False,
                status=ViewStatus.FAILED,
                errors=[e.message],
                layout=layout,
            )
            self._last_view = view
            return view

        index = group_by_category(products.items)
        orphans = orphaned_categories(index, categories.items)
        if orphans:
            logger.warning(
                f"Products reference undeclared categories, not shown: {', '.join(orphans)}"
            )

        sections = ViewRenderer(LayoutPlanner(layout)).render(categories.items, index)

        view = CatalogView(
            status=ViewStatus.READY if sections else ViewStatus.EMPTY,
            sections=sections,
            orphaned_categories=orphans,
            skipped_lines=products.skipped,
            errors=categories.errors + products.errors,
            layout=layout,
        )
        self._last_view = view

        logger.info(f"Products view refreshed: {len(sections)} sections ({view.status.value})")
        return view

    def stats(self) -> dict:
        """Catalog statistics for the declared categories."""
        categories = self._store.load_categories()
        products = self._store.load_products()
        return catalog_stats(categories.items, group_by_category(products.items))

    # =========================================================================
    # CHANGE NOTIFICATION
    # =========================================================================

    def subscribe(self, listener: ViewListener) -> None:
        """Register a callback for views produced by data changes."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: ViewListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify_data_changed(self) -> CatalogView:
        """
        Re-run the pipeline after the catalog files were edited.

        Returns:
            The new view, also delivered to every subscriber. A failing
            subscriber is logged and does not stop the others.
        """
        logger.info("Catalog data changed, rebuilding view")
        view = self.refresh()
        for listener in list(self._listeners):
            try:
                listener(view)
            except Exception:
                logger.exception(f"View listener {listener!r} failed")
        return view
