from enum import Enum
from pydantic import BaseModel


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class Notification(BaseModel):
    level: NotificationLevel
    message: str

    @classmethod
    def success(cls, message: str) -> "Notification":
        return cls(level=NotificationLevel.SUCCESS, message=message)

    @classmethod
    def error(cls, message: str) -> "Notification":
        return cls(level=NotificationLevel.ERROR, message=message)
