"""Shared fixtures for storefront tests."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable

import pytest

from storefront_lite.domain.product import Inventory, Product


@pytest.fixture()
def make_product() -> Callable[..., Product]:
    """Factory for products with sensible defaults; override any field by keyword."""

    def _make(id: str = "p1", **overrides: Any) -> Product:
        fields: dict[str, Any] = {
            "id": id,
            "name": f"Product {id}",
            "price": Decimal("10.00"),
            "category": "Tools",
            "type": "Hand",
            "description": "A useful product",
            "manufacturer": "Acme",
            "product_img": f"{id}.png",
            "inventory": Inventory(quantity=3, in_stock=True),
        }
        fields.update(overrides)
        return Product(**fields)

    return _make


@pytest.fixture()
def catalog_payload() -> list[dict[str, Any]]:
    """Catalog service payload as returned by GET /products."""
    return [
        {
            "_id": "p1",
            "name": "Widget",
            "description": "Hand widget",
            "price": 12.5,
            "category": "Tools",
            "type": "Hand",
            "manufacturer": "Acme",
            "productImg": "widget.png",
            "inventory": {"quantity": 4, "inStock": True},
        },
        {
            "_id": "p2",
            "name": "Bolt",
            "description": "M6 bolt",
            "price": 5,
            "category": "Hardware",
            "manufacturer": "Boltco",
            "productImg": "img.png",
            "inventory": {"quantity": 0, "inStock": False},
        },
    ]
