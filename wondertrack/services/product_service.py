"""
==============================================================================
Product Management Service Module
==============================================================================

Edits categories.txt and products.txt on behalf of the management surface.

Every successful change rewrites the affected file in the data directory
and then notifies the CatalogService, which rebuilds the catalog view.
When only the bundled copy exists, the first change writes a new editable
copy; the bundled files are never modified.

Rewriting products.txt drops lines that failed to parse. Edits are refused
while an editable file exists but cannot be read, so a bundled fallback
never overwrites it.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List, Optional

from wondertrack.catalog.models import LoadResult, ProductItem
from wondertrack.core import exceptions
from wondertrack.core.exceptions import CatalogLoadError
from wondertrack.schemas.product import ProductCreate, ProductUpdate
from wondertrack.services.catalog_service import CatalogService
from wondertrack.utils.validators import RecordFieldValidator


# Module logger
logger = logging.getLogger(__name__)

# Fields used as path segments by the API
IDENTIFIER_FIELDS = ("category", "name")


class ProductManagementService:
    """
    Category and product CRUD over the flat catalog files.

    Attributes:
        _catalog: CatalogService owning the store and the view listeners
        _validator: Field validator applied to every written value

    Example:
        >>> service = ProductManagementService(catalog_service)
        >>> service.add_category("Drinks")
        'Drinks'
        >>> service.add_product(ProductCreate(
        ...     category="Drinks", name="Iced Tea",
        ...     description="House blend", price="₱30"
        ... ))
    """

    def __init__(
        self,
        catalog: CatalogService,
        validator: Optional[RecordFieldValidator] = None
    ) -> None:
        self._catalog = catalog
        self._store = catalog.store
        self._validator = validator or RecordFieldValidator()

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def list_categories(self) -> List[str]:
        return list(self._store.load_categories().items)

    def list_products(self, category: Optional[str] = None) -> List[ProductItem]:
        """All products in file order, optionally for one category."""
        products = self._store.load_products().items
        if category is None:
            return list(products)
        return [p for p in products if p.category == category]

    # =========================================================================
    # CATEGORY OPERATIONS
    # =========================================================================

    def add_category(self, name: str) -> str:
        """
        Append a category to the list.

        Raises:
            AppException: INVALID_FIELD, CATEGORY_EXISTS
            CatalogLoadError: categories.txt exists but is unreadable
        """
        name = self._clean("category", name)
        categories = self._editable_categories()

        if name in categories:
            logger.warning(f"Category creation failed: exists - {name}")
            raise exceptions.category_exists(name)

        categories.append(name)
        self._store.save_categories(categories)

        logger.info(f"✅ Category added: {name}")
        self._catalog.notify_data_changed()
        return name

    def remove_category(self, name: str) -> int:
        """
        Remove a category together with its products.

        Returns:
            Number of products removed

        Raises:
            AppException: CATEGORY_NOT_FOUND
        """
        categories = self._editable_categories()
        if name not in categories:
            raise exceptions.category_not_found(name)

        products = self._editable_products()
        kept = [p for p in products if p.category != name]
        removed = len(products) - len(kept)

        self._store.save_categories([c for c in categories if c != name])
        if removed:
            self._store.save_products(kept)

        logger.info(f"🗑️ Category removed: {name} ({removed} products)")
        self._catalog.notify_data_changed()
        return removed

    # =========================================================================
    # PRODUCT OPERATIONS
    # =========================================================================

    def add_product(self, data: ProductCreate) -> ProductItem:
        """
        Append a product to its category.

        Raises:
            AppException: INVALID_FIELD, CATEGORY_NOT_FOUND
            CatalogLoadError: products.txt exists but is unreadable
        """
        product = ProductItem(
            category=self._clean("category", data.category),
            name=self._clean("name", data.name),
            description=self._clean("description", data.description),
            price=self._clean("price", data.price),
        )
        self._require_category(product.category)

        products = self._editable_products()
        products.append(product)
        self._store.save_products(products)

        logger.info(f"✅ Product added: {product.name} ({product.category})")
        self._catalog.notify_data_changed()
        return product

    def update_product(self, category: str, name: str, data: ProductUpdate) -> ProductItem:
        """
        Replace fields of the first product matching (category, name).

        Raises:
            AppException: PRODUCT_NOT_FOUND, INVALID_FIELD, CATEGORY_NOT_FOUND
        """
        products = self._editable_products()
        position = self._find(products, category, name)

        changes = {
            field: self._clean(field, value)
            for field, value in data.model_dump(exclude_none=True).items()
        }
        updated = products[position].model_copy(update=changes)
        if updated.category != category:
            self._require_category(updated.category)

        products[position] = updated
        self._store.save_products(products)

        logger.info(f"✏️ Product updated: {name} ({category})")
        self._catalog.notify_data_changed()
        return updated

    def remove_product(self, category: str, name: str) -> ProductItem:
        """
        Remove the first product matching (category, name).

        Raises:
            AppException: PRODUCT_NOT_FOUND
        """
        products = self._editable_products()
        removed = products.pop(self._find(products, category, name))
        self._store.save_products(products)

        logger.info(f"🗑️ Product removed: {name} ({category})")
        self._catalog.notify_data_changed()
        return removed

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _editable_categories(self) -> List[str]:
        result = self._store.load_categories()
        self._require_clean_load(result, self._store.categories_path.name)
        return list(result.items)

    def _editable_products(self) -> List[ProductItem]:
        result = self._store.load_products()
        self._require_clean_load(result, self._store.products_path.name)
        return list(result.items)

    @staticmethod
    def _require_clean_load(result: LoadResult, resource: str) -> None:
        """Refuse to edit when the editable copy exists but could not be read."""
        if result.errors:
            logger.error(f"Refusing to edit {resource}: {result.errors}")
            raise CatalogLoadError(resource, "; ".join(result.errors))

    def _clean(self, field: str, value: Optional[str]) -> str:
        is_valid, normalized, error = self._validator.validate(
            value, identifier=field in IDENTIFIER_FIELDS
        )
        if not is_valid:
            raise exceptions.invalid_field(field, error)
        return normalized

    def _require_category(self, category: str) -> None:
        if category not in self._editable_categories():
            raise exceptions.category_not_found(category)

    @staticmethod
    def _find(products: List[ProductItem], category: str, name: str) -> int:
        for position, product in enumerate(products):
            if product.category == category and product.name == name:
                return position
        raise exceptions.product_not_found(category, name)
