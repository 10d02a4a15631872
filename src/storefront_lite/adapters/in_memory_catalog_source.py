from __future__ import annotations

from typing import Any

from storefront_lite.ports.catalog_source import CatalogSource


class InMemoryCatalogSource(CatalogSource):
    """
    Canonical contract implementation for tests and local runs.

    - Returns the configured payload unchanged (malformed payloads included)
    - Counts fetches so tests can assert the single-attempt rule
    """

    def __init__(self, payload: Any = None) -> None:
        self._payload = [] if payload is None else payload
        self.fetch_count = 0

    async def fetch_products(self) -> Any:
        self.fetch_count += 1
        return self._payload
