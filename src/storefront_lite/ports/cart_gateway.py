from __future__ import annotations

from abc import ABC, abstractmethod

from storefront_lite.domain.cart import CartLineRequest


class CartGateway(ABC):
    """Port for the cart collaborator. Fire-and-forget: no result is consumed."""

    @abstractmethod
    def add_item(self, line: CartLineRequest) -> None: ...
