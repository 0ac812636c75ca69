from __future__ import annotations

from datetime import date

from salon_calendar.domain import FieldError, Viewport
from salon_calendar.services import EventForm, merge_field_errors

from conftest import make_event


def test_server_errors_override_local_for_same_field():
    local = [FieldError("phone", "local phone"), FieldError("brideName", "local bride")]
    remote = [FieldError("phone", "server phone")]

    merged = merge_field_errors(local, remote)

    assert merged == [FieldError("brideName", "local bride"), FieldError("phone", "server phone")]


def test_title_recomputed_on_every_title_input():
    form = EventForm.for_day(date(2025, 6, 14), Viewport(1280))
    assert form.title == ""

    form.set("hostedNameSurname", "Ayşe Yılmaz")
    assert form.title == "Ayşe Yılmaz"

    form.set("eventTimeStart", "14:00")
    assert form.title == "Ayşe Yılmaz"

    form.set("eventTimeFinish", "18:00")
    assert form.title == "Ayşe Yılmaz\n14:00 - 18:00"

    form.set("hostedNameSurname", "Fatma Şahin")
    assert form.title == "Fatma Şahin\n14:00 - 18:00"


def test_title_ignores_stale_stored_value():
    form = EventForm.for_event(make_event(title="stale"), Viewport(1280))

    assert form.title == "Ayşe Yılmaz\n14:00 - 18:00"


def test_narrow_viewport_title():
    form = EventForm.for_event(make_event(), Viewport(400))

    assert form.title == "Ayşe\n14:00 - 18:00"


def test_compose_form_defaults():
    form = EventForm.for_day(date(2025, 7, 1), Viewport())

    assert not form.is_edit
    assert form.value("eventDate") == date(2025, 7, 1)
    assert form.value("eventType") is None
    assert form.value("numberOfGuests") == 0


def test_error_lookup_returns_first_message():
    form = EventForm.for_day(date(2025, 7, 1), Viewport())
    form.apply_server_errors([FieldError("phone", "first"), FieldError("phone", "second")])

    assert form.error_for("phone") == "first"
    assert form.errors_by_field() == {"phone": "first"}
    assert form.error_for("brideName") is None
