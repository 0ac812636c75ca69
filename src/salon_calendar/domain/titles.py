"""Display titles derived from the contract holder and the time range."""

from __future__ import annotations

import threading
from datetime import time
from typing import Callable, List, Optional, Union

from .models import format_time

NARROW_VIEWPORT_PX = 768

TimeValue = Union[time, str, None]


def _time_text(value: TimeValue) -> str:
    if isinstance(value, time):
        return format_time(value)
    return (value or "").strip()


def derive_title(
    hosted_name_surname: Optional[str],
    time_start: TimeValue,
    time_finish: TimeValue,
    is_narrow_viewport: bool = False,
) -> str:
    """Two-line title: host name, then ``"{start} - {finish}"`` when both times are set.

    Narrow viewports only show the host's first name.
    """

    name = (hosted_name_surname or "").strip()
    if is_narrow_viewport and name:
        name = name.split()[0]
    start = _time_text(time_start)
    finish = _time_text(time_finish)
    schedule = f"{start} - {finish}" if start and finish else ""
    return f"{name}\n{schedule}".rstrip()


class Viewport:
    """Observable viewport width fed by the UI and read by title derivation."""

    def __init__(self, width: int = 1280, *, narrow_threshold: int = NARROW_VIEWPORT_PX) -> None:
        self._width = width
        self.narrow_threshold = narrow_threshold
        self._listeners: List[Callable[["Viewport"], None]] = []
        self._lock = threading.Lock()

    @property
    def width(self) -> int:
        return self._width

    @property
    def is_narrow(self) -> bool:
        return self._width <= self.narrow_threshold

    def resize(self, width: int) -> None:
        with self._lock:
            was_narrow = self.is_narrow
            self._width = width
            changed = was_narrow != self.is_narrow
            listeners = list(self._listeners)
        if changed:
            for listener in listeners:
                listener(self)

    def subscribe(self, listener: Callable[["Viewport"], None]) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe
