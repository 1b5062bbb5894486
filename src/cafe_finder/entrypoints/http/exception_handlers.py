"""FastAPI exception handlers.

Translates domain errors to plain-text HTTP responses.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from cafe_finder.domain.errors import DomainError

logger = logging.getLogger(__name__)


async def handle_domain_error(request: Request, exc: DomainError) -> PlainTextResponse:
    """Handle domain errors as 400 Bad Request.

    Every domain error (UNKNOWN_CITY, INVALID_COUNT) is a client input
    error. The body is the error message with surrounding whitespace stripped.

    Args:
        request: FastAPI request object
        exc: Domain error to handle

    Returns:
        Plain-text response carrying the error message
    """
    logger.info(
        "Client error",
        extra={
            "error": exc.to_dict(),
            "path": request.url.path,
            "method": request.method,
        },
    )

    return PlainTextResponse(exc.message.strip(), status_code=status.HTTP_400_BAD_REQUEST)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    """Handle FastAPI/Pydantic validation errors raised at the HTTP layer.

    Args:
        request: FastAPI request object
        exc: Pydantic validation error

    Returns:
        Plain-text response with 422 status
    """
    fields = [
        ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query"))
        for error in exc.errors()
    ]

    logger.info(
        "Request validation error",
        extra={
            "fields": fields,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return PlainTextResponse(
        "invalid request parameters",
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> PlainTextResponse:
    """Catch-all handler for unexpected errors.

    Always logged with full traceback for investigation.

    Args:
        request: FastAPI request object
        exc: Unexpected exception

    Returns:
        Plain-text response with 500 status and a generic message
    """
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
    )

    return PlainTextResponse(
        "internal error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.debug("Exception handlers registered")
