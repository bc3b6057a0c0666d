"""
Exception handlers.

Maps the exception hierarchy in shared.exceptions onto HTTP responses:

    ValidationError      400
    ConflictError        400
    AuthenticationError  401
    AuthorizationError   403
    NotFoundError        404
    InternalError        500  (details logged, never sent)

FastAPI's own request validation errors are reported as ValidationError
with one message per field. Anything else that escapes a route is logged
and answered with a generic 500.
"""

import logging
from http import HTTPStatus
from typing import Any, Iterable

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BlogError,
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from .models.errors import INTERNAL_ERROR_BODY

logger = logging.getLogger(__name__)

STATUS_CODES: list[tuple[type[BlogError], int]] = [
    (ValidationError, 400),
    (ConflictError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (InternalError, 500),
]

# Location prefixes FastAPI puts in front of the field name.
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def status_code_for(exc: BlogError) -> int:
    """HTTP status for a BlogError, by its base class."""
    for error_type, status_code in STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 500


def fields_from_errors(errors: Iterable[dict[str, Any]]) -> dict[str, str]:
    """
    Collapse FastAPI validation errors into ``{field: message}``.

    The first message per field wins. Unparseable JSON is reported
    under "body".
    """
    fields: dict[str, str] = {}
    for error in errors:
        if error.get("type") == "json_invalid":
            field = "body"
        else:
            parts = [str(p) for p in error.get("loc", ()) if p not in _LOCATION_PREFIXES]
            field = ".".join(parts) or "body"
        fields.setdefault(field, error.get("msg", "Invalid value"))
    return fields


async def blog_error_handler(request: Request, exc: BlogError) -> JSONResponse:
    status_code = status_code_for(exc)

    if status_code >= 500:
        logger.error(
            "%s %s failed: %s %s",
            request.method,
            request.url.path,
            exc.message,
            exc.details,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    return JSONResponse(status_code=status_code, content=exc.to_dict(), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError(fields=fields_from_errors(exc.errors()))
    return JSONResponse(status_code=400, content=error.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (unknown path, wrong method) in the standard error shape."""
    status = HTTPStatus(exc.status_code)
    message = exc.detail if isinstance(exc.detail, str) else status.phrase
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": status.name, "message": message, "details": {}},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all exception handlers to the app."""
    app.add_exception_handler(BlogError, blog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
