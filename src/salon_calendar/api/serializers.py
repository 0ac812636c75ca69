from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..domain import Event, derive_title
from .models import CalendarItem, EventPayload


def serialize_event(event: Event) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump(by_alias=True)


def to_calendar_item(event: Event, *, narrow: bool = False) -> CalendarItem:
    title = derive_title(event.hosted_name_surname, event.event_time_start, event.event_time_finish, narrow)
    return CalendarItem.from_domain(event, title=title)


def serialize_calendar(events: Iterable[Event], *, narrow: bool = False) -> List[Dict[str, Any]]:
    return [to_calendar_item(event, narrow=narrow).model_dump(by_alias=True) for event in events]
