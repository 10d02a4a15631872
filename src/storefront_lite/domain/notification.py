from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Notification:
    """User-facing signal; presentation is left to the UI."""

    level: NotificationLevel
    message: str
    path: str | None = None  # Navigable reference, when there is something to link to

    @classmethod
    def success(cls, message: str, path: str | None = None) -> Notification:
        return cls(level=NotificationLevel.SUCCESS, message=message, path=path)

    @classmethod
    def error(cls, message: str) -> Notification:
        return cls(level=NotificationLevel.ERROR, message=message)
