"""
==============================================================================
Record Store Module
==============================================================================

Reads and writes the two flat catalog files.

File Formats:
-------------
categories.txt - one category name per line, blank lines ignored:

    Savory
    Spicy
    Sweet

products.txt - one record per line, four pipe-delimited fields:

    Savory|Eggmayoza|Egg and mayo filling|₱45

Resolution:
-----------
The editable copy under the configured data directory is read first. If it
cannot be read, the copy bundled with this package is used instead. A file
missing from both places loads as empty; any other read failure with no
usable copy raises CatalogLoadError.

==============================================================================
"""

from __future__ import annotations

import logging
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from wondertrack.catalog.models import (
    FIELD_SEPARATOR,
    LoadResult,
    ProductItem,
    RecordSource,
    SkippedLine,
)
from wondertrack.core.exceptions import CatalogLoadError


# Module logger
logger = logging.getLogger(__name__)

PRODUCT_FIELD_COUNT = 4


def bundled_data_dir() -> Traversable:
    """Location of the catalog files shipped with the package."""
    return resources.files("wondertrack.catalog").joinpath("data")


class RecordStore:
    """
    Loader and writer for the category and product files.

    Attributes:
        _data_dir: Directory holding the editable files
        _fallback_dir: Read-only bundled copy, or None to disable fallback

    Example:
        >>> store = RecordStore(Path("storage/txtFiles"))
        >>> categories = store.load_categories()
        >>> categories.items
        ('Savory', 'Spicy', 'Sweet')
    """

    def __init__(
        self,
        data_dir: Path,
        categories_filename: str = "categories.txt",
        products_filename: str = "products.txt",
        fallback_dir: Optional[Traversable] = None,
        use_fallback: bool = True,
    ) -> None:
        self._data_dir = Path(data_dir)
        self._categories_filename = categories_filename
        self._products_filename = products_filename
        if use_fallback:
            self._fallback_dir = fallback_dir if fallback_dir is not None else bundled_data_dir()
        else:
            self._fallback_dir = None

    @classmethod
    def from_settings(cls, settings) -> "RecordStore":
        """Build a store from application settings."""
        return cls(
            settings.data_path,
            categories_filename=settings.categories_filename,
            products_filename=settings.products_filename,
        )

    @property
    def categories_path(self) -> Path:
        return self._data_dir / self._categories_filename

    @property
    def products_path(self) -> Path:
        return self._data_dir / self._products_filename

    # =========================================================================
    # LOADING
    # =========================================================================

    def load_categories(self) -> LoadResult[str]:
        """
        Load category names in file order.

        Names are trimmed; blank lines are skipped without being reported.
        """
        text, source, errors = self._read_text(self._categories_filename)
        if text is None:
            return LoadResult[str](source=source, errors=errors)

        categories = [line.strip() for line in text.splitlines() if line.strip()]

        logger.info(f"Loaded {len(categories)} categories from {source.value} copy")
        return LoadResult[str](items=tuple(categories), source=source, errors=errors)

    def load_products(self) -> LoadResult[ProductItem]:
        """
        Load product records in file order.

        Lines that do not split into exactly four fields are skipped and
        listed in the result.
        """
        text, source, errors = self._read_text(self._products_filename)
        if text is None:
            return LoadResult[ProductItem](source=source, errors=errors)

        products: List[ProductItem] = []
        skipped: List[SkippedLine] = []

        for line_number, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue

            item = parse_product_line(line)
            if item is None:
                skipped.append(SkippedLine(
                    line_number=line_number,
                    content=line,
                    reason=f"expected {PRODUCT_FIELD_COUNT} fields",
                ))
                continue
            products.append(item)

        if skipped:
            logger.warning(
                f"Skipped {len(skipped)} malformed product line(s) in {self._products_filename}"
            )
        logger.info(f"Loaded {len(products)} products from {source.value} copy")

        return LoadResult[ProductItem](
            items=tuple(products),
            source=source,
            skipped=skipped,
            errors=errors,
        )

    def _read_text(self, filename: str) -> Tuple[Optional[str], RecordSource, List[str]]:
        """
        Read one catalog file, primary copy first.

        Returns:
            (text or None, source used, recovered error messages)

        Raises:
            CatalogLoadError: A copy exists but is unreadable and no
                other copy could be used
        """
        errors: List[str] = []
        unreadable = False

        primary = self._data_dir / filename
        try:
            return primary.read_text(encoding="utf-8"), RecordSource.PRIMARY, errors
        except FileNotFoundError:
            logger.warning(f"{filename} not found at {primary}, trying fallback...")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {primary}: {e}")
            errors.append(f"{primary}: {e}")
            unreadable = True

        if self._fallback_dir is not None:
            bundled = self._fallback_dir.joinpath(filename)
            try:
                return bundled.read_text(encoding="utf-8"), RecordSource.FALLBACK, errors
            except FileNotFoundError:
                logger.warning(f"{filename} not found in bundled resources either")
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"Failed to read bundled {filename}: {e}")
                errors.append(f"bundled {filename}: {e}")
                unreadable = True

        if unreadable:
            raise CatalogLoadError(filename, "; ".join(errors))

        return None, RecordSource.NONE, errors

    # =========================================================================
    # WRITING
    # =========================================================================

    def save_categories(self, categories: Iterable[str]) -> None:
        """Rewrite the editable category file."""
        self._write_lines(self.categories_path, categories)
        logger.info(f"Saved categories to {self.categories_path}")

    def save_products(self, products: Iterable[ProductItem]) -> None:
        """Rewrite the editable product file."""
        self._write_lines(self.products_path, (p.to_line() for p in products))
        logger.info(f"Saved products to {self.products_path}")

    @staticmethod
    def _write_lines(path: Path, lines: Iterable[str]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        body = "".join(f"{line}\n" for line in lines)
        path.write_text(body, encoding="utf-8")


def parse_product_line(line: str) -> Optional[ProductItem]:
    """
    Parse one products.txt line.

    Trailing empty fields are discarded before counting, so "A|b|c|" has
    three fields and is rejected.

    Returns:
        ProductItem, or None when the line is malformed
    """
    parts = line.split(FIELD_SEPARATOR)
    while parts and parts[-1] == "":
        parts.pop()

    if len(parts) != PRODUCT_FIELD_COUNT:
        return None

    category, name, description, price = (part.strip() for part in parts)
    return ProductItem(category=category, name=name, description=description, price=price)
