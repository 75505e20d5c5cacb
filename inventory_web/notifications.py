"""
Transient user notifications (snack bars).
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from .config import NOTIFICATION_DURATION_MS

logger = logging.getLogger(__name__)


@dataclass
class Notification:
    message: str
    action: str = "Close"
    duration_ms: int = NOTIFICATION_DURATION_MS
    dismissed: bool = False


class Notifier:
    """Keeps the notifications shown to the user; the UI decides how to render and expire them."""

    def __init__(self):
        self.history: List[Notification] = []

    def open(self, message: str, action: str = "Close", duration_ms: int = NOTIFICATION_DURATION_MS) -> Notification:
        notification = Notification(message=message, action=action, duration_ms=duration_ms)
        self.history.append(notification)
        logger.info(f"Notification: {message}")
        return notification

    def dismiss(self, notification: Notification) -> None:
        notification.dismissed = True

    @property
    def active(self) -> List[Notification]:
        return [n for n in self.history if not n.dismissed]

    @property
    def last(self) -> Optional[Notification]:
        return self.history[-1] if self.history else None

    @property
    def messages(self) -> List[str]:
        return [n.message for n in self.history]
