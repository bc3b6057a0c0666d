"""API models package."""

from .errors import (
    ErrorResponse,
    ValidationErrorDetails,
    ValidationErrorResponse,
    INTERNAL_ERROR_BODY,
)

__all__ = [
    "ErrorResponse",
    "ValidationErrorDetails",
    "ValidationErrorResponse",
    "INTERNAL_ERROR_BODY",
]
