"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the application.

Modules:
--------
- validators: Catalog record field validation

==============================================================================
"""

from .validators import RecordFieldValidator

__all__ = [
    "RecordFieldValidator",
]
