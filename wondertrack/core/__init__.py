"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the application.

Modules:
--------
- exceptions: AppException class and error factory functions
- dependencies: FastAPI providers for the services held on app.state

Usage:
------
    from wondertrack.core import exceptions
    raise exceptions.category_not_found("Sweet")

The dependency providers import the service layer, so import them from
wondertrack.core.dependencies directly.

==============================================================================
"""

from .exceptions import (
    AppException,
    CatalogLoadError,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "CatalogLoadError",
    "register_exception_handlers",
]
