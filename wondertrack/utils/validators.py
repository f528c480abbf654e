"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation for text written into the catalog files.

This module implements:
- RecordFieldValidator: Validates one field of a category or product line

Rules:
------
- Not blank after trimming
- No pipe characters (field separator)
- No line breaks (record separator)
- No slashes in identifiers (category and product names are URL path segments)
- Stored trimmed

These rules only keep the line format intact; they say nothing about
what a price or description should look like.

==============================================================================
"""

from __future__ import annotations

from typing import Optional, Tuple

from wondertrack.catalog.models import FIELD_SEPARATOR


class RecordFieldValidator:
    """
    Validator for catalog record fields.

    Example:
        >>> validator = RecordFieldValidator()
        >>> is_valid, normalized, error = validator.validate("  Sweet ")
        >>> normalized
        'Sweet'
    """

    MAX_LENGTH = 200
    PATH_SEPARATOR = "/"

    def validate(
        self,
        value: Optional[str],
        identifier: bool = False
    ) -> Tuple[bool, Optional[str], Optional[str]]:
        """
        Validate and normalize one field.

        Args:
            value: Raw field text
            identifier: Field names a category or product and must not contain "/"

        Returns:
            Tuple of (is_valid, normalized_value, error_message)
        """
        if value is None:
            return False, None, "value is required"

        normalized = value.strip()

        if not normalized:
            return False, None, "value cannot be blank"

        if FIELD_SEPARATOR in normalized:
            return False, None, f"value cannot contain '{FIELD_SEPARATOR}'"

        if len(normalized.splitlines()) > 1:
            return False, None, "value cannot contain line breaks"

        if identifier and self.PATH_SEPARATOR in normalized:
            return False, None, f"value cannot contain '{self.PATH_SEPARATOR}'"

        if len(normalized) > self.MAX_LENGTH:
            return False, None, f"value must be at most {self.MAX_LENGTH} characters"

        return True, normalized, None

    def is_valid(self, value: Optional[str], identifier: bool = False) -> bool:
        """Quick validation check."""
        is_valid, _, _ = self.validate(value, identifier)
        return is_valid
