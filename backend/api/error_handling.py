"""
Exception handlers.

Maps domain exceptions to HTTP status codes and renders them in the
error envelope. Handlers are registered by the app factory.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import (
    MovieDBError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
)
from .models.envelope import ErrorResponse

logger = logging.getLogger(__name__)

# Ordered most specific first
_STATUS_BY_ERROR: list[tuple[type[MovieDBError], int]] = [
    (ValidationError, 400),
    (AuthenticationError, 401),
    (NotFoundError, 404),
]


def status_for(exc: MovieDBError) -> int:
    """HTTP status for a domain exception; unknown kinds are server errors."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 500


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(code=code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    """Install envelope-rendering handlers for domain and framework errors."""

    @app.exception_handler(MovieDBError)
    async def handle_domain_error(request: Request, exc: MovieDBError):
        status_code = status_for(exc)
        if status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.code} {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path} -> {status_code} {exc.code}")
        return _error_response(status_code, exc.code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        fields = [".".join(str(p) for p in err.get("loc", ())[1:]) for err in errors]
        fields = [f for f in fields if f]
        message = f"Invalid request: {', '.join(fields)}" if fields else "Invalid request"
        logger.warning(f"{request.method} {request.url.path} -> 400 {message}")
        return _error_response(400, "VALIDATION_FAILED", message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, f"HTTP_{exc.status_code}", str(exc.detail))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error_response(500, "INTERNAL_ERROR", "Internal server error")
