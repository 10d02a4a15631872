"""FastAPI exception handlers for domain errors.

Translates domain errors to HTTP responses in the structured error format.
No handler lets a view error escape as an unstructured 500: the product list
degrades to "unchanged state + error body".
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront_lite.domain.errors import DomainError

logger = logging.getLogger(__name__)

STATUS_CODES: dict[str, int] = {
    "VALIDATION_ERROR": 422,  # HTTP_422_UNPROCESSABLE_CONTENT
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "CATALOG_LOAD_FAILED": status.HTTP_502_BAD_GATEWAY,
    "ENQUIRY_SUBMISSION_FAILED": status.HTTP_502_BAD_GATEWAY,
}


def _request_context(request: Request) -> dict[str, Any]:
    return {
        "path": request.url.path,
        "method": request.method,
        "user_id": request.headers.get("x-user-id"),
    }


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Handle all domain errors with HTTP status code mapping.

    Unknown error codes fall back to 400 Bad Request.

    Args:
        request: FastAPI request object
        exc: Domain error to handle

    Returns:
        JSON response with structured error format
    """
    status_code = STATUS_CODES.get(exc.error_code, status.HTTP_400_BAD_REQUEST)
    log_extra = {
        "error_code": exc.error_code,
        "error_message": exc.message,
        **_request_context(request),
    }

    if status_code >= 500:
        logger.error("Domain error occurred", extra={**log_extra, "context": exc.context})
    else:
        logger.info("Client error", extra=log_extra)

    error_dict = exc.to_dict()
    content: dict[str, Any] = {
        "detail": error_dict.get("message", str(exc)),
        "code": exc.error_code,
    }
    if "errors" in error_dict:
        content["errors"] = error_dict["errors"]

    return JSONResponse(status_code=status_code, content=content)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI/Pydantic validation errors.

    Examples:
        - page=abc
        - POST /v1/cart without product_id

    Returns:
        JSON response with 422 status and field-level errors
    """
    errors = [
        {
            # Drop the 'body'/'query' location prefix
            "field": ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query")),
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]

    logger.info(
        "Request validation error",
        extra={"errors": errors, **_request_context(request)},
    )

    return JSONResponse(
        status_code=422,  # HTTP_422_UNPROCESSABLE_CONTENT
        content={
            "detail": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors, logged with traceback."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={"error_type": type(exc).__name__, **_request_context(request)},
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
