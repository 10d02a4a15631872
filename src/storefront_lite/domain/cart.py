from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from storefront_lite.domain.product import Product


@dataclass(frozen=True, slots=True)
class CartLineRequest:
    """Snapshot of a product at the time it was added to the cart."""

    product_id: str
    name: str
    price: Decimal
    product_img: str
    quantity: int = 1

    @classmethod
    def from_product(cls, product: Product) -> CartLineRequest:
        return cls(
            product_id=product.id,
            name=product.name,
            price=product.price,
            product_img=product.product_img,
        )
