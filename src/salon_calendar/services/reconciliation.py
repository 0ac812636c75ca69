"""Keeps the calendar, the event form and the event store consistent.

One controller drives one rendered calendar. Reads flow store -> controller ->
display; writes go form -> validation -> store, and every successful write is
followed by a full ``list()`` so the display always shows what the server has.
"""

from __future__ import annotations

import logging
import threading
from datetime import date
from enum import Enum
from typing import Any, Callable, List, Optional

from ..api.models import CalendarItem
from ..api.serializers import to_calendar_item
from ..data import AuthenticationRequiredError, EventRepository, FieldValidationFailure, StoreError
from ..domain import Event, Viewport
from . import messages
from .forms import EventForm
from .notifications import Notifier

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    LOADING = "loading"
    VIEWING = "viewing"
    COMPOSING = "composing"
    EDITING = "editing"
    SUBMITTING = "submitting"
    CLOSED = "closed"


class InvalidTransitionError(RuntimeError):
    """Raised when an operation is not allowed from the current state."""


StateListener = Callable[[SessionState], None]

_OPEN_STATES = (SessionState.COMPOSING, SessionState.EDITING)


class ReconciliationController:
    def __init__(self, repository: EventRepository, notifier: Notifier, viewport: Viewport) -> None:
        self.repository = repository
        self.notifier = notifier
        self.viewport = viewport
        self._state = SessionState.LOADING
        self._events: List[Event] = []
        self._form: Optional[EventForm] = None
        self._listeners: List[StateListener] = []
        self._lock = threading.RLock()
        self.load_error: Optional[str] = None
        self.requires_login = False
        self.viewport.subscribe(self._on_viewport_changed)

    # ------------------------------------------------------------------ observation

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state is SessionState.LOADING

    @property
    def is_submitting(self) -> bool:
        return self._state is SessionState.SUBMITTING

    @property
    def events(self) -> List[Event]:
        with self._lock:
            return list(self._events)

    @property
    def form(self) -> Optional[EventForm]:
        return self._form

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def calendar_items(self) -> List[CalendarItem]:
        narrow = self.viewport.is_narrow
        return [to_calendar_item(event, narrow=narrow) for event in self.events]

    def find_event(self, event_id: str) -> Optional[Event]:
        for event in self.events:
            if event.id == event_id:
                return event
        return None

    # ------------------------------------------------------------------ reads

    def mount(self) -> List[Event]:
        """First fetch; the controller reports LOADING until it completes."""

        self._transition(SessionState.LOADING)
        self._fetch()
        self._transition(SessionState.VIEWING)
        return self.events

    def refresh(self) -> List[Event]:
        """Reload the authoritative list; on failure the previous list stays displayed."""

        self._fetch()
        return self.events

    def _fetch(self) -> bool:
        try:
            events = self.repository.list()
        except AuthenticationRequiredError as exc:
            self.load_error = exc.message
            self._login_required()
            return False
        except StoreError as exc:
            logger.warning("Event list refresh failed: %s", exc.message)
            self.load_error = exc.message
            self.notifier.error(messages.LOAD_FAILED)
            return False
        with self._lock:
            self._events = events
        self.load_error = None
        logger.debug("Loaded %d events", len(events))
        return True

    # ------------------------------------------------------------------ session

    def open_day(self, day: date) -> EventForm:
        self._require(SessionState.VIEWING)
        self._form = EventForm.for_day(day, self.viewport)
        self._transition(SessionState.COMPOSING)
        return self._form

    def open_event(self, event_id: str) -> EventForm:
        self._require(SessionState.VIEWING)
        event = self.find_event(event_id)
        if event is None:
            raise KeyError(f"Event {event_id} is not in the displayed list")
        self._form = EventForm.for_event(event, self.viewport)
        self._transition(SessionState.EDITING)
        return self._form

    def edit(self, field_name: str, value: Any) -> EventForm:
        self._require(*_OPEN_STATES)
        form = self._active_form()
        form.set(field_name, value)
        return form

    def close(self) -> None:
        self._require(SessionState.VIEWING, *_OPEN_STATES)
        self._form = None
        self._transition(SessionState.CLOSED)
        self._transition(SessionState.VIEWING)

    # ------------------------------------------------------------------ writes

    def submit(self) -> bool:
        """Validate locally, then create or update; returns ``True`` on success."""

        self._require(*_OPEN_STATES)
        form = self._active_form()
        origin = self._state
        form.clear_errors()
        form.recompute_title()
        local_errors = form.validate()
        if local_errors:
            logger.info("Submission blocked by %d local errors", len(local_errors))
            return False

        event = form.to_event()
        editing = origin is SessionState.EDITING
        self._begin_submit(origin)
        try:
            if editing:
                self.repository.update(form.target_id, event)
            else:
                self.repository.create(event)
        except AuthenticationRequiredError:
            self._form = None
            self._transition(SessionState.VIEWING)
            self._login_required()
            return False
        except FieldValidationFailure as exc:
            form.apply_server_errors(exc.errors, local_errors)
            self._transition(origin)
            return False
        except StoreError as exc:
            logger.warning("Event %s failed: %s", "update" if editing else "create", exc.message)
            self.notifier.error(messages.UPDATE_FAILED if editing else messages.CREATE_FAILED)
            self._transition(origin)
            return False
        except Exception:
            self._transition(origin)
            raise

        self._finish_mutation(messages.UPDATED if editing else messages.CREATED)
        return True

    def delete(self) -> bool:
        self._require(SessionState.EDITING)
        form = self._active_form()
        self._begin_submit(SessionState.EDITING)
        try:
            self.repository.delete(form.target_id)
        except AuthenticationRequiredError:
            self._form = None
            self._transition(SessionState.VIEWING)
            self._login_required()
            return False
        except StoreError as exc:
            logger.warning("Event delete failed: %s", exc.message)
            self.notifier.error(messages.DELETE_FAILED)
            self._transition(SessionState.EDITING)
            return False
        except Exception:
            self._transition(SessionState.EDITING)
            raise

        self._finish_mutation(messages.DELETED)
        return True

    # ------------------------------------------------------------------ internals

    def _finish_mutation(self, success_message: str) -> None:
        self._form = None
        self._transition(SessionState.VIEWING)
        self._fetch()
        self.notifier.success(success_message)

    def _login_required(self) -> None:
        self.requires_login = True
        self.notifier.warning(messages.SESSION_EXPIRED)

    def _active_form(self) -> EventForm:
        if self._form is None:
            raise InvalidTransitionError("No event form is open")
        return self._form

    def _require(self, *allowed: SessionState) -> None:
        if self._state not in allowed:
            names = ", ".join(state.value for state in allowed)
            raise InvalidTransitionError(f"Cannot do this while {self._state.value} (allowed: {names})")

    def _begin_submit(self, origin: SessionState) -> None:
        # SUBMITTING is exclusive: a second submit for the same session is rejected.
        with self._lock:
            if self._state is not origin:
                raise InvalidTransitionError(f"Cannot submit while {self._state.value}")
            self._state = SessionState.SUBMITTING
        logger.debug("Session %s -> %s", origin.value, SessionState.SUBMITTING.value)
        self._notify(SessionState.SUBMITTING)

    def _transition(self, state: SessionState) -> None:
        with self._lock:
            previous, self._state = self._state, state
        if previous is not state:
            logger.debug("Session %s -> %s", previous.value, state.value)
        self._notify(state)

    def _notify(self, state: SessionState) -> None:
        for listener in list(self._listeners):
            listener(state)

    def _on_viewport_changed(self, _viewport: Viewport) -> None:
        if self._form is not None:
            self._form.recompute_title()
