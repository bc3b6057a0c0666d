"""
Error response models.

Standardized error responses for the API. Every error body has the
shape produced by BlogError.to_dict().
"""

from pydantic import BaseModel, Field
from typing import Any


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable message")
    details: dict[str, Any] = Field(default_factory=dict)


class ValidationErrorDetails(BaseModel):
    """Details of a validation error: one message per offending field."""

    fields: dict[str, str]


class ValidationErrorResponse(BaseModel):
    """Validation error response format."""

    error: str = "VALIDATION_ERROR"
    message: str = "Validation error"
    details: ValidationErrorDetails


INTERNAL_ERROR_BODY = ErrorResponse(
    error="INTERNAL_ERROR",
    message="Internal server error",
).model_dump()
