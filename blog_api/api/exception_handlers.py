"""Exception handlers that turn failures into structured JSON error bodies."""

import logging
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.errors import BlogAPIError, InternalError
from blog_api.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"

HTTP_ERROR_CODES = {
    400: "VALIDATION_ERROR",
    401: "AUTHENTICATION_FAILED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
}


def error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        code=code,
        message=message,
        timestamp=datetime.now(UTC),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
        headers=headers,
    )


def blog_api_error_handler(request: Request, exc: BlogAPIError) -> JSONResponse:
    """Handle errors raised by the services."""
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    message = exc.message
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code} {exc.message}")
    if isinstance(exc, InternalError):
        message = GENERIC_ERROR_MESSAGE
    return error_response(request, exc.status_code, exc.code, message, headers)


def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies and parameters as 400s."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        "; ".join(problems) or "Invalid request",
    )


def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle framework-raised HTTP errors such as unknown routes."""
    code = HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    return error_response(request, exc.status_code, code, str(exc.detail), exc.headers)


def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return error_response(
        request, status.HTTP_409_CONFLICT, "CONFLICT", "Request conflicts with existing data"
    )


def operational_error_handler(request: Request, exc: OperationalError) -> JSONResponse:
    """Database connectivity problems are retryable from the caller's side."""
    logger.error(f"Database unavailable on {request.method} {request.url.path}: {exc.orig}")
    return error_response(
        request,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "SERVICE_UNAVAILABLE",
        "Service temporarily unavailable, please retry",
    )


def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures in full, but tell the client nothing about them."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    error = InternalError(GENERIC_ERROR_MESSAGE)
    return error_response(request, error.status_code, error.code, error.message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BlogAPIError, blog_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(OperationalError, operational_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)
