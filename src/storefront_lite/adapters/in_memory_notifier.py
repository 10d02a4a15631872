from __future__ import annotations

from storefront_lite.domain.notification import Notification
from storefront_lite.ports.notifier import Notifier


class InMemoryNotifier(Notifier):
    """Queues notifications until the UI drains them."""

    def __init__(self) -> None:
        self._pending: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self._pending.append(notification)

    @property
    def pending(self) -> tuple[Notification, ...]:
        return tuple(self._pending)

    def drain(self) -> list[Notification]:
        drained, self._pending = self._pending, []
        return drained
