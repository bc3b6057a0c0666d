"""
Base exception classes for the blog backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to one HTTP status code, so picking the
right parent is all a module needs to do to get a consistent error response.
"""

from typing import Optional, Any


class BlogError(Exception):
    """
    Base exception for all blog errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(BlogError):
    """Input validation failed."""

    def __init__(
        self,
        message: str = "Validation error",
        fields: Optional[dict[str, str]] = None,
        code: Optional[str] = None,
    ):
        super().__init__(
            message,
            code=code or "VALIDATION_ERROR",
            details={"fields": fields or {}},
        )
        self.fields = fields or {}


class ConflictError(BlogError):
    """Resource already exists."""

    pass


class NotFoundError(BlogError):
    """Resource not found."""

    pass


class AuthenticationError(BlogError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(BlogError):
    """Authorization failed (caller does not own the resource)."""

    pass


class InternalError(BlogError):
    """
    Unexpected failure while serving a request.

    The message and details are for server-side logs only; the API layer
    never sends them to the client.
    """

    def __init__(
        self,
        message: str = "Internal server error",
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code or "INTERNAL_ERROR", details)


class StoreError(InternalError):
    """Error communicating with the credential store."""

    def __init__(
        self,
        message: str,
        operation: str,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, "STORE_ERROR", details)
        self.operation = operation
        self.details["operation"] = operation
