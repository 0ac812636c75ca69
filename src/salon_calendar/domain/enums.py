from __future__ import annotations

from enum import IntEnum


class EventType(IntEnum):
    WEDDING = 0
    ENGAGEMENT = 1
    HENNA_NIGHT = 2
