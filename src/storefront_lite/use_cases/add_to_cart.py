from __future__ import annotations

import logging

from storefront_lite.domain.cart import CartLineRequest
from storefront_lite.domain.notification import Notification
from storefront_lite.domain.product import Product
from storefront_lite.ports.cart_gateway import CartGateway
from storefront_lite.ports.notifier import Notifier

logger = logging.getLogger(__name__)


class AddProductToCart:
    """
    Forward a one-unit cart line for a product and confirm it to the shopper.

    Fire-and-forget: the cart collaborator's outcome is not inspected and the
    confirmation is always emitted.
    """

    def __init__(self, cart_gateway: CartGateway, notifier: Notifier) -> None:
        self._cart = cart_gateway
        self._notifier = notifier

    def execute(self, product: Product) -> CartLineRequest:
        line = CartLineRequest.from_product(product)

        try:
            self._cart.add_item(line)
        except Exception:
            logger.exception("Cart collaborator failed", extra={"product_id": product.id})

        self._notifier.notify(Notification.success(f"{product.name} added to the cart."))
        return line
