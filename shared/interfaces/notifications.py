"""
User-facing notifications.

Operations never let domain errors escape to the caller. They report them
here instead, and whatever renders the storefront subscribes to show toasts.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional

from django.utils import timezone

logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    """A single message for the user."""
    level: NotificationLevel
    message: str
    code: Optional[str] = None
    created_at: datetime = field(default_factory=timezone.now)


Subscriber = Callable[[Notification], None]


class Notifier:
    """Collects notifications and forwards them to subscribers."""

    _LOG_LEVELS = {
        NotificationLevel.SUCCESS: logging.INFO,
        NotificationLevel.INFO: logging.INFO,
        NotificationLevel.WARNING: logging.WARNING,
        NotificationLevel.ERROR: logging.ERROR,
    }

    def __init__(self, history_limit: int = 50):
        self.history_limit = history_limit
        self.history: List[Notification] = []
        self._subscribers: List[Subscriber] = []

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback. Returns a function that unsubscribes it."""
        self._subscribers.append(callback)
        return lambda: self._subscribers.remove(callback)

    def notify(self, level: NotificationLevel, message: str, code: str = None) -> Notification:
        notification = Notification(level=level, message=message, code=code)
        logger.log(self._LOG_LEVELS[level], f"[{level.value}] {message}")

        self.history.append(notification)
        del self.history[:-self.history_limit]

        for callback in list(self._subscribers):
            try:
                callback(notification)
            except Exception:
                logger.exception("Notification subscriber failed")
        return notification

    def success(self, message: str, code: str = None) -> Notification:
        return self.notify(NotificationLevel.SUCCESS, message, code)

    def error(self, message: str, code: str = None) -> Notification:
        return self.notify(NotificationLevel.ERROR, message, code)

    def warning(self, message: str, code: str = None) -> Notification:
        return self.notify(NotificationLevel.WARNING, message, code)

    def info(self, message: str, code: str = None) -> Notification:
        return self.notify(NotificationLevel.INFO, message, code)

    @property
    def last(self) -> Optional[Notification]:
        return self.history[-1] if self.history else None
