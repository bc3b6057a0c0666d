"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, ConflictError, InternalError


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidTokenError(AuthenticationError):
    """
    Raised when a bearer token fails verification.

    Malformed, expired and badly signed tokens all raise this same error.
    """

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """Raised when signin fails, whether the email is unknown or the password is wrong."""

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when signing up with an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "User already exists",
            code="USER_ALREADY_EXISTS",
            details={"email": email},
        )


class PasswordHashingError(InternalError):
    """Raised when the password hasher cannot produce a digest."""

    def __init__(self, reason: str):
        super().__init__(
            f"Password hashing failed: {reason}",
            code="PASSWORD_HASHING_FAILED",
        )
