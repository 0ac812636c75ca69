from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import date, datetime, time
from typing import Any, Dict, Optional

from .enums import EventType

# Wire (camelCase) name -> attribute name for every form-editable field.
FIELD_NAMES: Dict[str, str] = {
    "brideName": "bride_name",
    "brideSurname": "bride_surname",
    "groomName": "groom_name",
    "groomSurname": "groom_surname",
    "eventDate": "event_date",
    "eventTimeStart": "event_time_start",
    "eventTimeFinish": "event_time_finish",
    "eventType": "event_type",
    "hostedNameSurname": "hosted_name_surname",
    "phone": "phone",
    "numberOfGuests": "number_of_guests",
    "description": "description",
}


def normalize_field_name(name: str) -> str:
    """Map a server-reported field key (``Phone``, ``phone``) onto its wire name."""

    cleaned = name.strip().lstrip("$.")
    if cleaned in FIELD_NAMES:
        return cleaned
    camel = cleaned[:1].lower() + cleaned[1:]
    return camel if camel in FIELD_NAMES else cleaned


def parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


def parse_time(value: Any) -> time:
    if isinstance(value, time):
        return value
    if isinstance(value, str):
        return time.fromisoformat(value.strip())
    raise ValueError(f"Unsupported time value: {value!r}")


def _parse_datetime(value: Any) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def format_time(value: Optional[time]) -> str:
    return value.strftime("%H:%M") if value else ""


@dataclass(frozen=True, slots=True)
class FieldError:
    field: str
    message: str


@dataclass(slots=True)
class Event:
    id: Optional[str]
    bride_name: str
    bride_surname: str
    groom_name: str
    groom_surname: str
    event_date: date
    event_time_start: time
    event_time_finish: time
    event_type: EventType
    hosted_name_surname: str
    phone: str
    number_of_guests: int
    description: str = ""
    title: str = ""
    customer_id: Optional[str] = None
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Event":
        # Display colors and allDay may come back from the server; they are
        # always re-derived locally, so they are not read here.
        identifier = record.get("id")
        return cls(
            id=str(identifier) if identifier is not None else None,
            bride_name=str(record.get("brideName") or ""),
            bride_surname=str(record.get("brideSurname") or ""),
            groom_name=str(record.get("groomName") or ""),
            groom_surname=str(record.get("groomSurname") or ""),
            event_date=parse_date(record["eventDate"]),
            event_time_start=parse_time(record["eventTimeStart"]),
            event_time_finish=parse_time(record["eventTimeFinish"]),
            event_type=EventType(int(record["eventType"])),
            hosted_name_surname=str(record.get("hostedNameSurname") or ""),
            phone=str(record.get("phone") or ""),
            number_of_guests=int(record.get("numberOfGuests") or 0),
            description=record.get("description") or "",
            title=record.get("title") or "",
            customer_id=record.get("customerId"),
            created_date=_parse_datetime(record.get("createdDate")),
            updated_date=_parse_datetime(record.get("updatedDate")),
        )

    def to_record(self, *, include_id: bool = True) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "brideName": self.bride_name,
            "brideSurname": self.bride_surname,
            "groomName": self.groom_name,
            "groomSurname": self.groom_surname,
            "eventDate": self.event_date.isoformat(),
            "eventTimeStart": format_time(self.event_time_start),
            "eventTimeFinish": format_time(self.event_time_finish),
            "eventType": int(self.event_type),
            "hostedNameSurname": self.hosted_name_surname,
            "phone": self.phone,
            "numberOfGuests": self.number_of_guests,
            "description": self.description,
            "title": self.title,
        }
        if self.customer_id is not None:
            record["customerId"] = self.customer_id
        if include_id and self.id is not None:
            record = {"id": self.id, **record}
        return record


@dataclass(slots=True)
class EventDraft:
    """Possibly incomplete event as held by the form while it is being edited."""

    bride_name: Optional[str] = ""
    bride_surname: Optional[str] = ""
    groom_name: Optional[str] = ""
    groom_surname: Optional[str] = ""
    event_date: Optional[date] = None
    event_time_start: Optional[time] = None
    event_time_finish: Optional[time] = None
    event_type: Optional[int] = None
    hosted_name_surname: Optional[str] = ""
    phone: Optional[str] = ""
    number_of_guests: Optional[int] = 0
    description: Optional[str] = ""
    title: str = ""
    customer_id: Optional[str] = None

    @classmethod
    def from_event(cls, event: Event) -> "EventDraft":
        return cls(
            bride_name=event.bride_name,
            bride_surname=event.bride_surname,
            groom_name=event.groom_name,
            groom_surname=event.groom_surname,
            event_date=event.event_date,
            event_time_start=event.event_time_start,
            event_time_finish=event.event_time_finish,
            event_type=int(event.event_type),
            hosted_name_surname=event.hosted_name_surname,
            phone=event.phone,
            number_of_guests=event.number_of_guests,
            description=event.description,
            title=event.title,
            customer_id=event.customer_id,
        )

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "EventDraft":
        """Lenient parse of an incoming payload; unparseable values become ``None``."""

        draft = cls()
        for wire_name in FIELD_NAMES:
            if wire_name in record:
                draft.set(wire_name, record[wire_name])
        draft.title = str(record.get("title") or "")
        draft.customer_id = record.get("customerId")
        return draft

    def get(self, wire_name: str) -> Any:
        return getattr(self, FIELD_NAMES[wire_name])

    def set(self, wire_name: str, value: Any) -> None:
        attribute = FIELD_NAMES.get(wire_name)
        if attribute is None:
            raise KeyError(f"Unknown event field: {wire_name}")
        setattr(self, attribute, _coerce(attribute, value))

    def to_event(self, *, event_id: Optional[str] = None) -> Event:
        """Build a persisted-shape event; only valid once validation reports no errors."""

        missing = [f.name for f in fields(self) if f.name in _REQUIRED_FOR_EVENT and getattr(self, f.name) is None]
        if missing:
            raise ValueError(f"Draft is incomplete: {', '.join(missing)}")
        return Event(
            id=event_id,
            bride_name=_text(self.bride_name),
            bride_surname=_text(self.bride_surname),
            groom_name=_text(self.groom_name),
            groom_surname=_text(self.groom_surname),
            event_date=self.event_date,
            event_time_start=self.event_time_start,
            event_time_finish=self.event_time_finish,
            event_type=EventType(self.event_type),
            hosted_name_surname=_text(self.hosted_name_surname),
            phone=_text(self.phone),
            number_of_guests=int(self.number_of_guests),
            description=_text(self.description),
            title=self.title,
            customer_id=self.customer_id,
        )


_TEXT_ATTRIBUTES = {
    "bride_name",
    "bride_surname",
    "groom_name",
    "groom_surname",
    "hosted_name_surname",
    "phone",
    "description",
}

_REQUIRED_FOR_EVENT = {"event_date", "event_time_start", "event_time_finish", "event_type", "number_of_guests"}


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _whole_number(value: Any) -> Optional[int]:
    if isinstance(value, bool) or value == "":
        return None
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    return int(value)


def _coerce(attribute: str, value: Any) -> Any:
    if value is None:
        return None
    if attribute in _TEXT_ATTRIBUTES:
        if isinstance(value, str):
            return value
        # numbers are kept as their text so format rules still apply
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return None
    try:
        if attribute == "event_date":
            return parse_date(value) if value != "" else None
        if attribute in {"event_time_start", "event_time_finish"}:
            return parse_time(value) if value != "" else None
        if attribute in {"event_type", "number_of_guests"}:
            return _whole_number(value)
    except (TypeError, ValueError):
        return None
    return value
