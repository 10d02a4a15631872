"""
Dependency injection for FastAPI routes.

Key principle: collaborators are chosen from configuration once per shopper
session; the shopper id itself is resolved per request from the X-User-Id
header set by the authenticating proxy.
"""

from __future__ import annotations

import logging

from fastapi import Depends, Header, Request

from storefront_lite.adapters.http_catalog_source import HttpCatalogSource
from storefront_lite.adapters.http_enquiry_gateway import HttpEnquiryGateway
from storefront_lite.adapters.in_memory_cart import InMemoryCart
from storefront_lite.adapters.in_memory_catalog_source import InMemoryCatalogSource
from storefront_lite.adapters.in_memory_enquiry_gateway import InMemoryEnquiryGateway
from storefront_lite.adapters.in_memory_notifier import InMemoryNotifier
from storefront_lite.adapters.postgres_catalog_source import PostgresCatalogSource
from storefront_lite.domain.errors import UnauthorizedError
from storefront_lite.entrypoints.http.view_registry import ShopperSession, ViewRegistry
from storefront_lite.infra.config import (
    catalog_api_url,
    enquiry_api_url,
    http_timeout_seconds,
    page_policy_name,
    products_page_size,
)
from storefront_lite.infra.db.config import database_configured
from storefront_lite.ports.catalog_source import CatalogSource
from storefront_lite.ports.enquiry_gateway import EnquiryGateway
from storefront_lite.use_cases.add_to_cart import AddProductToCart
from storefront_lite.use_cases.catalog_store import CatalogStore
from storefront_lite.use_cases.enquiry_workflow import EnquiryWorkflow
from storefront_lite.use_cases.product_list_view import PagePolicy, ProductListView

logger = logging.getLogger(__name__)


def build_catalog_source() -> CatalogSource:
    """
    Pick the catalog source from configuration.

    Precedence: CATALOG_API_URL, then DATABASE_URL, then an empty in-memory catalog.
    """
    url = catalog_api_url()
    if url:
        return HttpCatalogSource(url, timeout_seconds=http_timeout_seconds())
    if database_configured():
        return PostgresCatalogSource()

    logger.warning("No catalog source configured; serving an empty catalog")
    return InMemoryCatalogSource()


def build_enquiry_gateway() -> EnquiryGateway:
    url = enquiry_api_url()
    if url:
        return HttpEnquiryGateway(url, timeout_seconds=http_timeout_seconds())

    logger.warning("No enquiry service configured; enquiries are kept in memory")
    return InMemoryEnquiryGateway()


def build_page_policy() -> PagePolicy:
    name = page_policy_name()
    try:
        return PagePolicy(name)
    except ValueError:
        raise RuntimeError(
            f"PAGE_POLICY must be one of {[policy.value for policy in PagePolicy]}, got {name!r}"
        )


def build_shopper_session(user_id: str) -> ShopperSession:
    """
    Wire a fresh product list view for one shopper.

    Args:
        user_id: Authenticated shopper identifier

    Returns:
        ShopperSession with its own view, notification queue and cart
    """
    notifier = InMemoryNotifier()
    cart = InMemoryCart()

    view = ProductListView(
        catalog_store=CatalogStore(build_catalog_source()),
        enquiry_workflow=EnquiryWorkflow(
            submitter_id=user_id,
            enquiry_gateway=build_enquiry_gateway(),
            notifier=notifier,
        ),
        add_to_cart=AddProductToCart(cart_gateway=cart, notifier=notifier),
        page_size=products_page_size(),
        page_policy=build_page_policy(),
    )
    return ShopperSession(user_id=user_id, view=view, notifier=notifier, cart=cart)


def get_view_registry(request: Request) -> ViewRegistry:
    return request.app.state.view_registry


def get_current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """
    Resolve the authenticated shopper.

    Raises:
        UnauthorizedError: If the X-User-Id header is missing or blank
    """
    if not x_user_id or not x_user_id.strip():
        raise UnauthorizedError("Authentication required")
    return x_user_id.strip()


def get_shopper_session(
    user_id: str = Depends(get_current_user_id),
    registry: ViewRegistry = Depends(get_view_registry),
) -> ShopperSession:
    return registry.get_or_create(user_id)
