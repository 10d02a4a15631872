from __future__ import annotations

from storefront_lite.domain.cart import CartLineRequest
from storefront_lite.ports.cart_gateway import CartGateway


class InMemoryCart(CartGateway):
    """Keeps cart lines in insertion order. Lines are snapshots and never merged."""

    def __init__(self) -> None:
        self._lines: list[CartLineRequest] = []

    def add_item(self, line: CartLineRequest) -> None:
        self._lines.append(line)

    @property
    def lines(self) -> tuple[CartLineRequest, ...]:
        return tuple(self._lines)
