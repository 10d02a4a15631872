"""PostgreSQL implementation of CatalogSource."""

from __future__ import annotations

import asyncio
from contextlib import AbstractContextManager
from typing import Any, Callable

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront_lite.infra.db.models.product import ProductRow
from storefront_lite.infra.db.session import get_read_session
from storefront_lite.ports.catalog_source import CatalogSource


class PostgresCatalogSource(CatalogSource):
    """
    Reads the catalog straight from the catalog collaborator's database.

    - Uses SQLAlchemy ORM for database access
    - Opens one read-only session per fetch
    - Runs the blocking query in a worker thread so the event loop keeps serving
    - Emits records in the same shape the catalog service returns
    """

    def __init__(
        self,
        session_factory: Callable[[], AbstractContextManager[Session]] = get_read_session,
    ) -> None:
        """
        Initialize source with a session factory.

        Args:
            session_factory: Context manager factory yielding a SQLAlchemy session
        """
        self._session_factory = session_factory

    async def fetch_products(self) -> list[dict[str, Any]]:
        return await asyncio.to_thread(self._fetch_records)

    def _fetch_records(self) -> list[dict[str, Any]]:
        query = select(ProductRow).order_by(ProductRow.position, ProductRow.id)

        with self._session_factory() as session:
            rows = session.execute(query).scalars().all()
            return [self._to_record(row) for row in rows]

    def _to_record(self, row: ProductRow) -> dict[str, Any]:
        """
        Convert database model (ProductRow) to a catalog record.

        Args:
            row: SQLAlchemy ProductRow model

        Returns:
            Record keyed like the catalog service payload
        """
        return {
            "_id": row.id,
            "name": row.name,
            "description": row.description or "",
            "price": row.price,  # Already Decimal from NUMERIC column
            "category": row.category,
            "type": row.type,
            "manufacturer": row.manufacturer or "",
            "productImg": row.product_img or "",
            "inventory": {
                "quantity": row.inventory_quantity,
                "inStock": row.in_stock,
            },
        }
