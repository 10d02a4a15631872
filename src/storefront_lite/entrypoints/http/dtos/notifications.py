from pydantic import BaseModel


class NotificationResponseDTO(BaseModel):
    level: str
    message: str
    path: str | None = None


class NotificationsResponseDTO(BaseModel):
    notifications: list[NotificationResponseDTO]
