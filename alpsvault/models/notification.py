"""
User notification message sent to the external notification sink.
"""

from enum import Enum

from pydantic import BaseModel


class NotificationKind(str, Enum):
    INFO = "info"
    ERROR = "error"


class Notification(BaseModel):
    """One-way, fire-and-forget user message."""

    kind: NotificationKind = NotificationKind.INFO
    title: str
    description: str | None = None
