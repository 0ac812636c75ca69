from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Deque, List

logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class Notification:
    level: NotificationLevel
    message: str
    created_at: datetime = field(default_factory=datetime.now)


Listener = Callable[[Notification], None]


class Notifier:
    """Fan-out of user-visible notifications with a short history."""

    def __init__(self, *, history_size: int = 50) -> None:
        self._listeners: List[Listener] = []
        self._history: Deque[Notification] = deque(maxlen=history_size)
        self._lock = threading.Lock()

    @property
    def history(self) -> List[Notification]:
        with self._lock:
            return list(self._history)

    def subscribe(self, listener: Listener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def publish(self, level: NotificationLevel, message: str) -> Notification:
        notification = Notification(level=level, message=message)
        with self._lock:
            self._history.append(notification)
            listeners = list(self._listeners)
        logger.log(logging.WARNING if level is NotificationLevel.ERROR else logging.INFO, "[%s] %s", level.value, message)
        for listener in listeners:
            listener(notification)
        return notification

    def success(self, message: str) -> Notification:
        return self.publish(NotificationLevel.SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self.publish(NotificationLevel.ERROR, message)

    def warning(self, message: str) -> Notification:
        return self.publish(NotificationLevel.WARNING, message)

    def info(self, message: str) -> Notification:
        return self.publish(NotificationLevel.INFO, message)
