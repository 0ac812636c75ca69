"""Domain models and pure rules for salon events."""

from __future__ import annotations

from .colors import DEFAULT_COLORS, EventColors, colors_for
from .enums import EventType
from .models import FIELD_NAMES, Event, EventDraft, FieldError, normalize_field_name
from .titles import NARROW_VIEWPORT_PX, Viewport, derive_title
from .validation import is_valid_phone, validate_event

__all__ = [
    "DEFAULT_COLORS",
    "Event",
    "EventColors",
    "EventDraft",
    "EventType",
    "FIELD_NAMES",
    "FieldError",
    "NARROW_VIEWPORT_PX",
    "Viewport",
    "colors_for",
    "derive_title",
    "is_valid_phone",
    "normalize_field_name",
    "validate_event",
]
