"""Local validation for event form data.

Every rule runs independently so the form can highlight all invalid fields
after a single submission attempt.
"""

from __future__ import annotations

import re
from typing import Any, List

from . import messages
from .enums import EventType
from .models import EventDraft, FieldError

PHONE_PATTERN = re.compile(r"\(\d{3}\) \d{3} \d{2} \d{2}")

REQUIRED_FIELDS = (
    ("brideName", messages.BRIDE_NAME_REQUIRED),
    ("brideSurname", messages.BRIDE_SURNAME_REQUIRED),
    ("groomName", messages.GROOM_NAME_REQUIRED),
    ("groomSurname", messages.GROOM_SURNAME_REQUIRED),
    ("hostedNameSurname", messages.HOSTED_NAME_REQUIRED),
    ("eventDate", messages.EVENT_DATE_REQUIRED),
    ("eventTimeStart", messages.TIME_START_REQUIRED),
    ("eventTimeFinish", messages.TIME_FINISH_REQUIRED),
    ("phone", messages.PHONE_REQUIRED),
)

_VALID_EVENT_TYPES = {member.value for member in EventType}


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def is_valid_phone(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return PHONE_PATTERN.fullmatch(value.strip()) is not None


def validate_event(draft: EventDraft) -> List[FieldError]:
    errors: List[FieldError] = []

    for field, message in REQUIRED_FIELDS:
        if _is_blank(draft.get(field)):
            errors.append(FieldError(field, message))

    event_type = draft.event_type
    if isinstance(event_type, bool) or event_type not in _VALID_EVENT_TYPES:
        errors.append(FieldError("eventType", messages.EVENT_TYPE_REQUIRED))

    phone = draft.phone
    if not _is_blank(phone) and not is_valid_phone(phone):
        errors.append(FieldError("phone", messages.PHONE_INVALID))

    guests = draft.number_of_guests
    if isinstance(guests, bool) or not isinstance(guests, int) or guests < 0:
        errors.append(FieldError("numberOfGuests", messages.GUESTS_INVALID))

    return errors
