"""
User notification sink.

Notifications are fire-and-forget: the core never waits on the sink and a
failing sink never changes the outcome of the operation that notified.
"""

from abc import ABC, abstractmethod

from alpsvault.models.notification import Notification, NotificationKind
from alpsvault.utils.logger import get_logger

logger = get_logger(__name__)


class NotificationSink(ABC):
    """Receives user-facing messages (toasts, banners, system notifications)."""

    @abstractmethod
    def send(self, notification: Notification) -> None:
        pass


class LogNotificationSink(NotificationSink):
    """Sink that writes notifications to the log; used when no UI is attached."""

    def send(self, notification: Notification) -> None:
        message = notification.title
        if notification.description:
            message = f"{message}: {notification.description}"
        if notification.kind == NotificationKind.ERROR:
            logger.warning(f"[notify] {message}")
        else:
            logger.info(f"[notify] {message}")


class RecordingNotificationSink(NotificationSink):
    """Keeps every notification in memory, in order."""

    def __init__(self):
        self.notifications: list[Notification] = []

    def send(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def titles(self) -> list[str]:
        return [n.title for n in self.notifications]


def notify(
    sink: NotificationSink | None,
    title: str,
    description: str | None = None,
    kind: NotificationKind = NotificationKind.INFO,
) -> None:
    """Send one notification, logging (never raising) sink failures."""
    if sink is None:
        return
    try:
        sink.send(Notification(kind=kind, title=title, description=description))
    except Exception as e:
        logger.error(f"Notification sink failed for '{title}': {e}")


def notify_error(sink: NotificationSink | None, title: str, description: str | None = None) -> None:
    notify(sink, title, description, kind=NotificationKind.ERROR)
