from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import Event, colors_for


class EventPayload(BaseModel):
    """Wire shape of a persisted event (camelCase aliases)."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None)
    bride_name: str = Field(alias="brideName")
    bride_surname: str = Field(alias="brideSurname")
    groom_name: str = Field(alias="groomName")
    groom_surname: str = Field(alias="groomSurname")
    event_date: str = Field(alias="eventDate")
    event_time_start: str = Field(alias="eventTimeStart")
    event_time_finish: str = Field(alias="eventTimeFinish")
    event_type: int = Field(alias="eventType")
    hosted_name_surname: str = Field(alias="hostedNameSurname")
    phone: str
    number_of_guests: int = Field(alias="numberOfGuests")
    description: str = Field(default="")
    title: str = Field(default="")
    customer_id: Optional[str] = Field(default=None, alias="customerId")
    created_date: Optional[str] = Field(default=None, alias="createdDate")
    updated_date: Optional[str] = Field(default=None, alias="updatedDate")

    @classmethod
    def from_domain(cls, event: Event) -> "EventPayload":
        return cls(
            id=event.id,
            created_date=_iso(event.created_date),
            updated_date=_iso(event.updated_date),
            **event.to_record(include_id=False),
        )


class CalendarItem(BaseModel):
    """One entry handed to the calendar renderer; the renderer never mutates it."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    title: str
    date: str
    background_color: str = Field(alias="backgroundColor")
    text_color: str = Field(alias="textColor")
    border_color: str = Field(alias="borderColor")
    all_day: bool = Field(default=True, alias="allDay")

    @classmethod
    def from_domain(cls, event: Event, *, title: str) -> "CalendarItem":
        colors = colors_for(event.event_type)
        return cls(
            id=event.id or "",
            title=title,
            date=event.event_date.isoformat(),
            background_color=colors.background,
            text_color=colors.text,
            border_color=colors.border,
        )


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
