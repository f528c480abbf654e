"""
==============================================================================
Catalog Models Module
==============================================================================

Pydantic models for catalog records and load results.

ProductItem is frozen: once parsed from a line it never changes, and two
items with the same fields compare equal.

==============================================================================
"""

from enum import Enum
from typing import Generic, List, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field


T = TypeVar("T")

FIELD_SEPARATOR = "|"


class ProductItem(BaseModel):
    """
    One catalog record.

    Attributes:
        category: Name of the category the product belongs to
        name: Product display name
        description: Short description shown on the card
        price: Price as free text (e.g. "$5.50", "₱45")
    """

    model_config = ConfigDict(frozen=True)

    category: str
    name: str
    description: str
    price: str

    def to_line(self) -> str:
        """Serialize back to the pipe-delimited file format."""
        return FIELD_SEPARATOR.join(
            (self.category, self.name, self.description, self.price)
        )


class RecordSource(str, Enum):
    """Where a load result was read from."""
    PRIMARY = "primary"
    FALLBACK = "fallback"
    NONE = "none"


class SkippedLine(BaseModel):
    """A source line that was dropped while parsing."""

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(..., ge=1)
    content: str
    reason: str


class LoadResult(BaseModel, Generic[T]):
    """
    Parsed records plus everything that went wrong on the way.

    Attributes:
        items: Parsed records in source order
        source: Which copy of the file was used
        skipped: Lines dropped as malformed
        errors: Read failures that were recovered from
    """

    model_config = ConfigDict(frozen=True)

    items: Tuple[T, ...] = ()
    source: RecordSource = RecordSource.NONE
    skipped: List[SkippedLine] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
