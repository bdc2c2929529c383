# =============================================================================
# app/exceptions.py - Error Taxonomy and Exception Handlers
# =============================================================================
# Every storefront error carries a human-readable message plus a machine code.
# Pipelines reduce these to a single message string for the form; everywhere
# else the FastAPI handler below renders them as JSON.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class StorefrontException(Exception):
    """
    Base exception for the storefront API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "STOREFRONT_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Validation
# =============================================================================

class ValidationError(StorefrontException):
    """Raised when input fails schema validation. Carries every field message."""

    def __init__(self, messages: list[str]):
        super().__init__(
            message=", ".join(messages),
            code="VALIDATION_ERROR",
            status_code=400,
            details={"errors": messages},
        )
        self.messages = messages


# =============================================================================
# Storage
# =============================================================================

class StorageError(StorefrontException):
    """Raised when the storage provider rejects an upload or delete."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Storage Error: {error}",
            code="STORAGE_ERROR",
            status_code=502,
            suggestion="Try again later or contact support if the issue persists",
            details={"error": error},
        )


class InvalidReferenceError(StorefrontException):
    """Raised when an image URL has no object name to act on."""

    def __init__(self, url: str):
        super().__init__(
            message="Invalid URL",
            code="INVALID_REFERENCE",
            status_code=400,
            suggestion="Pass the public URL returned by the image upload",
            details={"url": url},
        )


# =============================================================================
# Persistence
# =============================================================================

class PersistenceError(StorefrontException):
    """Raised when the database rejects a query or write."""

    def __init__(self, error: str, operation: str | None = None):
        super().__init__(
            message=error,
            code="PERSISTENCE_ERROR",
            status_code=500,
            details={"operation": operation} if operation else None,
        )


class NotFoundError(StorefrontException):
    """
    A product ID that doesn't exist, as a renderable error.

    Not raised by the storefront routes: a missing product comes back from
    CatalogService as NotFound and the route redirects to the listing. Kept
    so code outside the read pipeline can report a missing product with the
    same code and shape.
    """

    def __init__(self, product_id: str):
        super().__init__(
            message=f"Product not found: {product_id}",
            code="PRODUCT_NOT_FOUND",
            status_code=404,
            suggestion="Browse /products for available items",
            details={"product_id": product_id},
        )


# =============================================================================
# Authentication
# =============================================================================

class AuthenticationRequired(StorefrontException):
    """
    A signed-in user is required, as a renderable error.

    Not raised by the create route: a missing user comes back from the
    pipeline as Unauthenticated and the route redirects home. Bearer-only
    endpoints reject with HTTPException from app.auth instead.
    """

    def __init__(self):
        super().__init__(
            message="Authentication required",
            code="AUTHENTICATION_REQUIRED",
            status_code=401,
            suggestion="Sign in and retry with a Bearer token",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def storefront_exception_handler(
    request: Request,
    exc: StorefrontException
) -> JSONResponse:
    """
    Convert StorefrontException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
