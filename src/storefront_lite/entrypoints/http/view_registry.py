"""Per-shopper product list views for the HTTP entrypoint.

A view holds screen state (page, enquiry draft, loaded catalog), so it has to
outlive a single request. The registry keeps one session per shopper id, up to
a fixed number of sessions; the least recently used one is evicted first.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable

from storefront_lite.adapters.in_memory_cart import InMemoryCart
from storefront_lite.adapters.in_memory_notifier import InMemoryNotifier
from storefront_lite.use_cases.product_list_view import ProductListView

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 1000


@dataclass(frozen=True, slots=True)
class ShopperSession:
    user_id: str
    view: ProductListView
    notifier: InMemoryNotifier
    cart: InMemoryCart


class ViewRegistry:
    def __init__(
        self,
        session_factory: Callable[[str], ShopperSession],
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1")

        self._session_factory = session_factory
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, ShopperSession] = OrderedDict()

    def get_or_create(self, user_id: str) -> ShopperSession:
        session = self._sessions.get(user_id)
        if session is not None:
            self._sessions.move_to_end(user_id)
            return session

        session = self._session_factory(user_id)
        self._sessions[user_id] = session

        while len(self._sessions) > self._max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("Evicted idle shopper session", extra={"user_id": evicted_id})

        return session

    def discard(self, user_id: str) -> bool:
        """Drop a shopper's session. Returns whether one was held."""
        return self._sessions.pop(user_id, None) is not None

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
