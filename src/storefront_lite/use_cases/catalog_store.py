from __future__ import annotations

import logging

from storefront_lite.domain.errors import CatalogLoadError
from storefront_lite.domain.product import Product
from storefront_lite.payloads.catalog import CatalogPayloadMapper
from storefront_lite.ports.catalog_source import CatalogSource

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Holds the product collection fetched for the current view.

    Responsibilities:
    - Fetch the catalog once per activation (no retry)
    - Validate the payload into Product records
    - Keep the previous collection when the fetch or validation fails
    """

    def __init__(self, catalog_source: CatalogSource) -> None:
        self._source = catalog_source
        self._products: tuple[Product, ...] = ()

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    async def load(self) -> bool:
        """
        Fetch the catalog and replace the held collection.

        Failures never propagate: a malformed payload or a failing source is
        logged and the collection is left unchanged.

        Returns:
            True if the collection was replaced, False otherwise
        """
        try:
            products = await self._fetch()
        except CatalogLoadError as exc:
            logger.warning(
                "Catalog load failed; keeping current collection",
                extra={"reason": exc.message, "context": exc.context, "kept": len(self._products)},
            )
            return False

        self._products = tuple(products)
        logger.info("Catalog loaded", extra={"product_count": len(self._products)})
        return True

    async def _fetch(self) -> list[Product]:
        try:
            payload = await self._source.fetch_products()
        except Exception as exc:
            raise CatalogLoadError(
                "Catalog source failed", error_type=type(exc).__name__
            ) from exc

        return CatalogPayloadMapper.to_domain_products(payload)

    def find(self, product_id: str) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None
