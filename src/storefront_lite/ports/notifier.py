from __future__ import annotations

from abc import ABC, abstractmethod

from storefront_lite.domain.notification import Notification


class Notifier(ABC):
    @abstractmethod
    def notify(self, notification: Notification) -> None: ...
