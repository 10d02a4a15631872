"""REST API error response models.

Documents the structured error body produced by the exception handlers.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error, used by validation failures."""

    field: str
    message: str
    code: str | None = None


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Unknown product:
            {"detail": "Product with identifier 'p9' not found", "code": "NOT_FOUND"}

        Incomplete enquiry:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [{"field": "email", "message": "Required", "code": "REQUIRED"}]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Product with identifier 'p9' not found", "code": "NOT_FOUND"},
                {"detail": "An enquiry is already open", "code": "CONFLICT"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {"field": "email", "message": "Required", "code": "REQUIRED"},
                        {
                            "field": "quantity",
                            "message": "Must be a positive integer",
                            "code": "INVALID_QUANTITY",
                        },
                    ],
                },
            ]
        }
    )


ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "Missing X-User-Id header"},
    422: {"model": ErrorResponse, "description": "Validation error"},
}
