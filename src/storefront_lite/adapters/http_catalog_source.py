"""HTTP implementation of CatalogSource."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from storefront_lite.infra.config import DEFAULT_HTTP_TIMEOUT_SECONDS
from storefront_lite.ports.catalog_source import CatalogSource

logger = logging.getLogger(__name__)


class HttpCatalogSource(CatalogSource):
    """
    Reads the catalog from the catalog service.

    - GET {base_url}/products, no parameters
    - Returns the decoded JSON body untouched
    - HTTP and transport errors propagate as httpx exceptions
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the catalog client.

        Args:
            base_url: Catalog service root, e.g. "https://api.example.com/api"
            timeout_seconds: Per-request timeout
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def fetch_products(self) -> Any:
        url = f"{self._base_url}/products"
        logger.debug("Fetching catalog", extra={"url": url})

        async with httpx.AsyncClient(
            timeout=self._timeout_seconds, transport=self._transport
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.json()
