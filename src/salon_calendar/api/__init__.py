"""Payload models shared by the calendar display, the CLI and the dev server."""

from __future__ import annotations

from .models import CalendarItem, EventPayload
from .serializers import serialize_calendar, serialize_event, to_calendar_item

__all__ = ["CalendarItem", "EventPayload", "serialize_calendar", "serialize_event", "to_calendar_item"]
