"""
Catalog error types and their JSON rendering.

Every error leaves the API as {"success": false, "error": {code, message, ...}}.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class AppException(Exception):
    """
    Error with a machine-readable code and an HTTP status.

    Codes in use: CATALOG_LOAD_FAILED (500), CATEGORY_NOT_FOUND (404),
    CATEGORY_EXISTS (409), PRODUCT_NOT_FOUND (404), INVALID_FIELD (400),
    VALIDATION_ERROR (422), INTERNAL_ERROR (500).
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        error_dict = {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "timestamp": self.timestamp
            }
        }

        if self.details:
            error_dict["error"]["details"] = self.details

        return error_dict


class CatalogLoadError(AppException):
    """A catalog file exists but could not be read from any source."""

    def __init__(self, resource: str, reason: str):
        super().__init__(
            f"Failed to load {resource}: {reason}",
            "CATALOG_LOAD_FAILED",
            500,
            {"resource": resource, "reason": reason}
        )
        self.resource = resource
        self.reason = reason


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    FastAPI exception handler for AppException.

    Converts AppException to consistent JSON error response.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(AppException, app_exception_handler)


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def category_not_found(name: str) -> AppException:
    """Create category not found exception."""
    return AppException(
        f"Category '{name}' not found",
        "CATEGORY_NOT_FOUND",
        404,
        {"category": name}
    )


def category_exists(name: str) -> AppException:
    """Create category already exists exception."""
    return AppException(
        f"Category '{name}' already exists",
        "CATEGORY_EXISTS",
        409,
        {"category": name}
    )


def product_not_found(category: str, name: str) -> AppException:
    """Create product not found exception."""
    return AppException(
        f"Product '{name}' not found in category '{category}'",
        "PRODUCT_NOT_FOUND",
        404,
        {"category": category, "name": name}
    )


def invalid_field(field: str, reason: str) -> AppException:
    """Create invalid record field exception."""
    return AppException(
        f"Invalid {field}: {reason}",
        "INVALID_FIELD",
        400,
        {"field": field, "reason": reason}
    )


def validation_error(message: str, details: Optional[Dict[str, Any]] = None) -> AppException:
    """Create validation error exception."""
    return AppException(message, "VALIDATION_ERROR", 422, details)


def internal_error(message: str = "Internal server error") -> AppException:
    """Create internal server error exception."""
    return AppException(message, "INTERNAL_ERROR", 500)
