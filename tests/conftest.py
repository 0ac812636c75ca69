"""Shared fixtures: fixture events, a recording in-memory store and a controller."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, time
from typing import Callable, Dict, List, Optional

import pytest

from salon_calendar.data import EventNotFoundError, StoreError, TokenStore
from salon_calendar.domain import Event, EventDraft, EventType, Viewport
from salon_calendar.services import Notifier, ReconciliationController


def make_event(event_id: Optional[str] = "evt-1", **overrides) -> Event:
    values = dict(
        id=event_id,
        bride_name="Zeynep",
        bride_surname="Kaya",
        groom_name="Mehmet",
        groom_surname="Demir",
        event_date=date(2025, 6, 14),
        event_time_start=time(14, 0),
        event_time_finish=time(18, 0),
        event_type=EventType.WEDDING,
        hosted_name_surname="Ayşe Yılmaz",
        phone="(532) 123 45 67",
        number_of_guests=250,
        description="Bahçe düğünü",
        title="Ayşe Yılmaz\n14:00 - 18:00",
    )
    values.update(overrides)
    return Event(**values)


def make_draft(**overrides) -> EventDraft:
    draft = EventDraft.from_event(make_event(None))
    for name, value in overrides.items():
        setattr(draft, name, value)
    return draft


class RecordingRepository:
    """In-memory store that records every call and can be told to fail."""

    def __init__(self, events: Optional[List[Event]] = None) -> None:
        self.events: Dict[str, Event] = {event.id: event for event in events or []}
        self.calls: List[str] = []
        self.failures: Dict[str, Exception] = {}
        self.hooks: Dict[str, Callable[[], None]] = {}
        self.created: List[Event] = []
        self.updated: List[Event] = []
        self._counter = 0

    def fail(self, operation: str, exc: Exception) -> None:
        self.failures[operation] = exc

    def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        hook = self.hooks.get(operation)
        if hook is not None:
            hook()
        if operation in self.failures:
            raise self.failures[operation]

    def count(self, operation: str) -> int:
        return self.calls.count(operation)

    def list(self) -> List[Event]:
        self._enter("list")
        return list(self.events.values())

    def get(self, event_id: str) -> Event:
        self._enter("get")
        if event_id not in self.events:
            raise EventNotFoundError(event_id)
        return self.events[event_id]

    def create(self, event: Event) -> Event:
        self._enter("create")
        self._counter += 1
        saved = replace(event, id=f"new-{self._counter}", created_date=datetime(2025, 1, 1))
        self.created.append(event)
        self.events[saved.id] = saved
        return saved

    def update(self, event_id: str, event: Event) -> Event:
        self._enter("update")
        if event_id not in self.events:
            raise StoreError("missing")
        saved = replace(event, id=event_id)
        self.updated.append(event)
        self.events[event_id] = saved
        return saved

    def delete(self, event_id: str) -> None:
        self._enter("delete")
        self.events.pop(event_id)


@pytest.fixture
def event() -> Event:
    return make_event()


@pytest.fixture
def repository(event: Event) -> RecordingRepository:
    return RecordingRepository(
        [
            event,
            make_event("evt-2", event_type=EventType.HENNA_NIGHT, hosted_name_surname="Can Öztürk", event_date=date(2025, 6, 20)),
        ]
    )


@pytest.fixture
def notifier() -> Notifier:
    return Notifier()


@pytest.fixture
def viewport() -> Viewport:
    return Viewport(1280)


@pytest.fixture
def controller(repository: RecordingRepository, notifier: Notifier, viewport: Viewport) -> ReconciliationController:
    ctrl = ReconciliationController(repository, notifier, viewport)
    ctrl.mount()
    repository.calls.clear()
    return ctrl


@pytest.fixture
def tokens(tmp_path) -> TokenStore:
    return TokenStore(tmp_path / "token", initial="secret-token")
