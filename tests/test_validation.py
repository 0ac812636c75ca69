from __future__ import annotations

import pytest

from salon_calendar.domain import EventDraft, is_valid_phone, validate_event
from salon_calendar.domain.validation import REQUIRED_FIELDS

from conftest import make_draft


def _fields(errors):
    return {error.field for error in errors}


def test_valid_fixture_has_no_errors():
    assert validate_event(make_draft()) == []


@pytest.mark.parametrize("field_name", [name for name, _message in REQUIRED_FIELDS])
def test_missing_required_field_is_reported(field_name):
    draft = make_draft()
    draft.set(field_name, None)

    errors = validate_event(draft)

    assert field_name in _fields(errors)


@pytest.mark.parametrize("field_name", ["brideName", "groomSurname", "hostedNameSurname", "phone"])
def test_whitespace_only_counts_as_missing(field_name):
    draft = make_draft()
    draft.set(field_name, "   ")

    assert field_name in _fields(validate_event(draft))


def test_all_violations_reported_together():
    errors = validate_event(EventDraft(number_of_guests=None))

    assert _fields(errors) == {
        "brideName",
        "brideSurname",
        "groomName",
        "groomSurname",
        "hostedNameSurname",
        "eventDate",
        "eventTimeStart",
        "eventTimeFinish",
        "phone",
        "eventType",
        "numberOfGuests",
    }


@pytest.mark.parametrize("event_type", [None, 3, -1, True])
def test_event_type_must_be_selected(event_type):
    draft = make_draft(event_type=event_type)

    assert "eventType" in _fields(validate_event(draft))


@pytest.mark.parametrize("event_type", [0, 1, 2])
def test_known_event_types_pass(event_type):
    assert validate_event(make_draft(event_type=event_type)) == []


def test_phone_format():
    assert is_valid_phone("(532) 123 45 67")
    assert not is_valid_phone("532 123 4567")
    assert not is_valid_phone("")
    assert not is_valid_phone("(532) 1234567")


def test_badly_formatted_phone_reports_format_message():
    errors = validate_event(make_draft(phone="532 123 4567"))

    assert [(e.field, e.message) for e in errors] == [("phone", "Geçerli bir telefon numarası giriniz")]


def test_empty_phone_reports_only_required_message():
    errors = [e for e in validate_event(make_draft(phone="")) if e.field == "phone"]

    assert [e.message for e in errors] == ["Telefon numarası zorunludur"]


@pytest.mark.parametrize("guests", [None, -1])
def test_number_of_guests_must_be_non_negative(guests):
    assert "numberOfGuests" in _fields(validate_event(make_draft(number_of_guests=guests)))


def test_zero_guests_is_allowed():
    assert validate_event(make_draft(number_of_guests=0)) == []


def test_finish_before_start_is_not_rejected():
    draft = make_draft()
    draft.set("eventTimeStart", "20:00")
    draft.set("eventTimeFinish", "10:00")

    assert validate_event(draft) == []


def test_non_text_phone_is_a_format_error():
    errors = validate_event(make_draft(phone=5321234567))

    assert _fields(errors) == {"phone"}
    assert errors[0].message == "Geçerli bir telefon numarası giriniz"


def test_numeric_text_values_are_kept_as_text():
    draft = make_draft()
    draft.set("phone", 5321234567)
    draft.set("brideName", 7)

    assert draft.phone == "5321234567"
    assert _fields(validate_event(draft)) == {"phone"}
    assert draft.to_event().bride_name == "7"


@pytest.mark.parametrize("guests", [3.7, "3.7"])
def test_fractional_guest_count_is_rejected(guests):
    draft = make_draft()
    draft.set("numberOfGuests", guests)

    assert draft.number_of_guests is None
    assert _fields(validate_event(draft)) == {"numberOfGuests"}


def test_whole_float_guest_count_is_accepted():
    draft = make_draft()
    draft.set("numberOfGuests", 40.0)

    assert draft.number_of_guests == 40
    assert validate_event(draft) == []
