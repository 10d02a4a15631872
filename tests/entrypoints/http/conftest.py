"""Fixtures for HTTP entrypoint tests: a real app wired to in-memory collaborators."""

from __future__ import annotations

from typing import Any, Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from storefront_lite.adapters.in_memory_cart import InMemoryCart
from storefront_lite.adapters.in_memory_catalog_source import InMemoryCatalogSource
from storefront_lite.adapters.in_memory_enquiry_gateway import InMemoryEnquiryGateway
from storefront_lite.adapters.in_memory_notifier import InMemoryNotifier
from storefront_lite.entrypoints.http.app import build_app
from storefront_lite.entrypoints.http.view_registry import ShopperSession, ViewRegistry
from storefront_lite.ports.enquiry_gateway import EnquiryGateway
from storefront_lite.use_cases.add_to_cart import AddProductToCart
from storefront_lite.use_cases.catalog_store import CatalogStore
from storefront_lite.use_cases.enquiry_workflow import EnquiryWorkflow
from storefront_lite.use_cases.product_list_view import ProductListView

SessionFactory = Callable[[str], ShopperSession]


@pytest.fixture()
def make_session_factory() -> Callable[[Any, EnquiryGateway], SessionFactory]:
    """Build a per-shopper session factory over the given collaborators."""

    def _make(catalog_payload: Any, enquiry_gateway: EnquiryGateway) -> SessionFactory:
        def _build(user_id: str) -> ShopperSession:
            notifier = InMemoryNotifier()
            cart = InMemoryCart()
            view = ProductListView(
                catalog_store=CatalogStore(InMemoryCatalogSource(catalog_payload)),
                enquiry_workflow=EnquiryWorkflow(user_id, enquiry_gateway, notifier),
                add_to_cart=AddProductToCart(cart, notifier),
            )
            return ShopperSession(user_id=user_id, view=view, notifier=notifier, cart=cart)

        return _build

    return _make


@pytest.fixture()
def enquiry_gateway() -> EnquiryGateway:
    return InMemoryEnquiryGateway()


@pytest.fixture()
def registry(
    make_session_factory: Callable[[Any, EnquiryGateway], SessionFactory],
    catalog_payload: list[dict[str, Any]],
    enquiry_gateway: EnquiryGateway,
) -> ViewRegistry:
    return ViewRegistry(make_session_factory(catalog_payload, enquiry_gateway))


@pytest.fixture()
def app(registry: ViewRegistry) -> FastAPI:
    return build_app(view_registry=registry)


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture()
def loaded_client(client: TestClient) -> TestClient:
    """Client whose shopper view has already loaded the catalog."""
    response = client.post("/v1/catalog/load", headers={"X-User-Id": "u1"})
    assert response.status_code == 200
    return client
