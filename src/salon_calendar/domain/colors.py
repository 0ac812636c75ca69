from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .enums import EventType


@dataclass(frozen=True, slots=True)
class EventColors:
    background: str
    text: str
    border: str


_EVENT_COLORS: Dict[EventType, EventColors] = {
    EventType.WEDDING: EventColors(background="#DC2626", text="white", border="#B91C1C"),
    EventType.ENGAGEMENT: EventColors(background="#7C3AED", text="white", border="#6D28D9"),
    EventType.HENNA_NIGHT: EventColors(background="#2563EB", text="white", border="#1D4ED8"),
}

DEFAULT_COLORS = EventColors(background="#4F46E5", text="white", border="#4338CA")


def colors_for(event_type: Any) -> EventColors:
    """Display colors for a category; unknown values get :data:`DEFAULT_COLORS`."""

    if isinstance(event_type, bool):
        return DEFAULT_COLORS
    try:
        key = EventType(event_type)
    except (TypeError, ValueError):
        return DEFAULT_COLORS
    return _EVENT_COLORS[key]
