from __future__ import annotations

from storefront_lite.domain.cart import CartLineRequest
from storefront_lite.domain.notification import Notification
from storefront_lite.entrypoints.http.dtos.cart import CartLineResponseDTO
from storefront_lite.entrypoints.http.dtos.notifications import (
    NotificationResponseDTO,
    NotificationsResponseDTO,
)


class CartMapper:
    @staticmethod
    def to_line_response(line: CartLineRequest) -> CartLineResponseDTO:
        return CartLineResponseDTO(
            product_id=line.product_id,
            name=line.name,
            quantity=line.quantity,
            price=str(line.price),  # Decimal → str at boundary
            product_img=line.product_img,
        )


class NotificationMapper:
    @staticmethod
    def to_response(notifications: list[Notification]) -> NotificationsResponseDTO:
        return NotificationsResponseDTO(
            notifications=[
                NotificationResponseDTO(
                    level=notification.level.value,
                    message=notification.message,
                    path=notification.path,
                )
                for notification in notifications
            ]
        )
