from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class CatalogSource(ABC):
    """
    Port for the catalog collaborator.

    Implementations return the raw catalog payload exactly as received. Shape
    validation happens in the catalog store, so a malformed payload from any
    source is handled the same way.

    Contract:
        - One call per catalog activation, no retries
        - Transport failures propagate as exceptions
    """

    @abstractmethod
    async def fetch_products(self) -> Any:
        """
        Fetch the full product catalog.

        Returns:
            Raw payload, expected to be a sequence of product records
        """
        ...
