from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterable, List, Optional

from ..domain import Event, EventDraft, FieldError, Viewport, derive_title, validate_event

TITLE_INPUTS = frozenset({"hostedNameSurname", "eventTimeStart", "eventTimeFinish"})


def merge_field_errors(local: Iterable[FieldError], remote: Iterable[FieldError]) -> List[FieldError]:
    """Combine local and server errors; server messages replace local ones for the same field."""

    remote = list(remote)
    overridden = {error.field for error in remote}
    merged = [error for error in local if error.field not in overridden]
    merged.extend(remote)
    return merged


@dataclass
class EventForm:
    """Form state for one edit session: the draft, its target id and the displayed errors."""

    draft: EventDraft
    viewport: Viewport
    target_id: Optional[str] = None
    errors: List[FieldError] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.recompute_title()

    @classmethod
    def for_day(cls, day: date, viewport: Viewport) -> "EventForm":
        return cls(draft=EventDraft(event_date=day), viewport=viewport)

    @classmethod
    def for_event(cls, event: Event, viewport: Viewport) -> "EventForm":
        return cls(draft=EventDraft.from_event(event), viewport=viewport, target_id=event.id)

    @property
    def is_edit(self) -> bool:
        return self.target_id is not None

    @property
    def title(self) -> str:
        return self.draft.title

    def value(self, field_name: str) -> Any:
        return self.draft.get(field_name)

    def set(self, field_name: str, value: Any) -> None:
        self.draft.set(field_name, value)
        if field_name in TITLE_INPUTS:
            self.recompute_title()

    def recompute_title(self) -> str:
        self.draft.title = derive_title(
            self.draft.hosted_name_surname,
            self.draft.event_time_start,
            self.draft.event_time_finish,
            self.viewport.is_narrow,
        )
        return self.draft.title

    def validate(self) -> List[FieldError]:
        self.errors = validate_event(self.draft)
        return self.errors

    def clear_errors(self) -> None:
        self.errors = []

    def apply_server_errors(self, remote: Iterable[FieldError], local: Iterable[FieldError] = ()) -> None:
        self.errors = merge_field_errors(local, remote)

    def error_for(self, field_name: str) -> Optional[str]:
        for error in self.errors:
            if error.field == field_name:
                return error.message
        return None

    def errors_by_field(self) -> Dict[str, str]:
        collected: Dict[str, str] = {}
        for error in self.errors:
            collected.setdefault(error.field, error.message)
        return collected

    def to_event(self) -> Event:
        return self.draft.to_event(event_id=self.target_id)
