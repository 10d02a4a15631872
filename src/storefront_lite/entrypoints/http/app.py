from fastapi import FastAPI

from storefront_lite.entrypoints.http.dependencies import build_shopper_session
from storefront_lite.entrypoints.http.error_responses import ERROR_RESPONSES
from storefront_lite.entrypoints.http.exception_handlers import register_exception_handlers
from storefront_lite.entrypoints.http.routes.enquiry import router as enquiry_router
from storefront_lite.entrypoints.http.routes.health import router as health_router
from storefront_lite.entrypoints.http.routes.products import router as products_router
from storefront_lite.entrypoints.http.routes.session import router as session_router
from storefront_lite.entrypoints.http.view_registry import ViewRegistry
from storefront_lite.infra.config import max_shopper_sessions


def build_app(view_registry: ViewRegistry | None = None) -> FastAPI:
    app = FastAPI(
        title="Storefront Lite API",
        description="""
        Product list screen for authenticated shoppers.

        ## Features
        - Browse the catalog by category and type, 20 products per page
        - Send a product enquiry and get a link to the stored query
        - Add products to the cart

        ## Authentication
        Resolved upstream; every request carries the shopper id in `X-User-Id`.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        license_info={
            "name": "Proprietary",
        },
    )

    if view_registry is None:
        view_registry = ViewRegistry(build_shopper_session, max_sessions=max_shopper_sessions())
    app.state.view_registry = view_registry

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(products_router, prefix="/v1", responses=ERROR_RESPONSES)
    app.include_router(enquiry_router, prefix="/v1", responses=ERROR_RESPONSES)
    app.include_router(session_router, prefix="/v1", responses=ERROR_RESPONSES)

    return app


app = build_app()
