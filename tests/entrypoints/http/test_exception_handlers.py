"""Tests for FastAPI exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from storefront_lite.domain.errors import (
    CatalogLoadError,
    ConflictError,
    EnquiryStateError,
    EnquirySubmissionError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from storefront_lite.entrypoints.http.exception_handlers import register_exception_handlers


@pytest.fixture
def handler_app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("Validation failed")

    @test_app.get("/validation-error-with-fields")
    def raise_validation_error_with_fields() -> None:
        raise ValidationError(
            errors=[
                {"field": "email", "message": "Required", "code": "REQUIRED"},
                {
                    "field": "quantity",
                    "message": "Must be a positive integer",
                    "code": "INVALID_QUANTITY",
                },
            ]
        )

    @test_app.get("/not-found-error")
    def raise_not_found_error() -> None:
        raise NotFoundError("Product", "p9")

    @test_app.get("/conflict-error")
    def raise_conflict_error() -> None:
        raise ConflictError("Already exists")

    @test_app.get("/enquiry-state-error")
    def raise_enquiry_state_error() -> None:
        raise EnquiryStateError("An enquiry is already open")

    @test_app.get("/unauthorized-error")
    def raise_unauthorized_error() -> None:
        raise UnauthorizedError("Authentication required")

    @test_app.get("/catalog-load-error")
    def raise_catalog_load_error() -> None:
        raise CatalogLoadError("Catalog payload is not a sequence")

    @test_app.get("/enquiry-submission-error")
    def raise_enquiry_submission_error() -> None:
        raise EnquirySubmissionError("Enquiry service unreachable")

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> dict:
        raise RuntimeError("Something went wrong")

    return test_app


@pytest.fixture
def handler_client(handler_app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(handler_app, raise_server_exceptions=False)


class TestValidationErrorHandler:
    """Tests for ValidationError exception handler."""

    def test_simple_validation_error_returns_422(self, handler_client: TestClient) -> None:
        """ValidationError returns 422 with structured error."""
        response = handler_client.get("/validation-error")

        assert response.status_code == 422
        assert response.json() == {
            "detail": "Validation failed",
            "code": "VALIDATION_ERROR",
        }

    def test_validation_error_with_field_errors_returns_422(
        self, handler_client: TestClient
    ) -> None:
        """ValidationError with field errors returns 422 with errors array."""
        response = handler_client.get("/validation-error-with-fields")

        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == "Validation failed"
        assert [error["field"] for error in data["errors"]] == ["email", "quantity"]


class TestDomainErrorHandler:
    """Tests for status code mapping of the other domain errors."""

    @pytest.mark.parametrize(
        ("path", "status_code", "code"),
        [
            ("/not-found-error", 404, "NOT_FOUND"),
            ("/conflict-error", 409, "CONFLICT"),
            ("/enquiry-state-error", 409, "CONFLICT"),
            ("/unauthorized-error", 401, "UNAUTHORIZED"),
            ("/catalog-load-error", 502, "CATALOG_LOAD_FAILED"),
            ("/enquiry-submission-error", 502, "ENQUIRY_SUBMISSION_FAILED"),
        ],
    )
    def test_error_maps_to_status(
        self, handler_client: TestClient, path: str, status_code: int, code: str
    ) -> None:
        response = handler_client.get(path)

        assert response.status_code == status_code
        assert response.json()["code"] == code

    def test_not_found_message(self, handler_client: TestClient) -> None:
        response = handler_client.get("/not-found-error")

        assert response.json() == {
            "detail": "Product with identifier 'p9' not found",
            "code": "NOT_FOUND",
        }

    def test_unexpected_error_returns_500(self, handler_client: TestClient) -> None:
        """Unhandled exceptions become a generic 500 without leaking details."""
        response = handler_client.get("/unexpected-error")

        assert response.status_code == 500


class TestPydanticValidationErrors:
    """Tests for Pydantic/FastAPI validation error handling."""

    def test_query_validation_error_returns_422(self) -> None:
        from fastapi import Query

        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/test")
        def test_route(page: int = Query(default=1)) -> dict:
            return {"page": page}

        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/test?page=abc")

        assert response.status_code == 422
        data = response.json()
        assert data["detail"] == "Invalid request parameters"
        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"][0]["field"] == "page"

    def test_missing_body_field_returns_422(self) -> None:
        from pydantic import BaseModel

        app = FastAPI()
        register_exception_handlers(app)

        class RequestBody(BaseModel):
            product_id: str

        @app.post("/test")
        def test_route(body: RequestBody) -> dict:
            return {"product_id": body.product_id}

        client = TestClient(app, raise_server_exceptions=False)

        response = client.post("/test", json={})

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "product_id"
