from __future__ import annotations

from datetime import time

import pytest

from salon_calendar.domain import DEFAULT_COLORS, EventType, Viewport, colors_for, derive_title


def test_colors_are_deterministic_per_type():
    for event_type in EventType:
        assert colors_for(event_type) == colors_for(int(event_type))
        assert colors_for(event_type) is colors_for(event_type)


def test_each_type_has_its_own_colors():
    backgrounds = {colors_for(event_type).background for event_type in EventType}

    assert len(backgrounds) == 3
    assert DEFAULT_COLORS.background not in backgrounds


def test_wedding_colors():
    colors = colors_for(EventType.WEDDING)

    assert (colors.background, colors.text, colors.border) == ("#DC2626", "white", "#B91C1C")


@pytest.mark.parametrize("value", [None, 7, -1, "wedding", True, 1.5])
def test_unknown_types_fall_back_to_default(value):
    assert colors_for(value) == DEFAULT_COLORS


def test_wide_title():
    assert derive_title("Ayşe Yılmaz", "14:00", "18:00", False) == "Ayşe Yılmaz\n14:00 - 18:00"


def test_narrow_title_uses_first_name():
    assert derive_title("Ayşe Yılmaz", "14:00", "18:00", True) == "Ayşe\n14:00 - 18:00"


def test_title_accepts_time_values():
    assert derive_title("Ayşe Yılmaz", time(9, 5), time(12, 30)) == "Ayşe Yılmaz\n09:05 - 12:30"


@pytest.mark.parametrize("start, finish", [("14:00", None), (None, "18:00"), ("", "")])
def test_title_without_both_times_has_no_schedule_line(start, finish):
    assert derive_title("Ayşe Yılmaz ", start, finish) == "Ayşe Yılmaz"


def test_title_with_no_name_keeps_schedule():
    assert derive_title("", "14:00", "18:00", True) == "\n14:00 - 18:00"


def test_viewport_threshold_and_notifications():
    viewport = Viewport(1024)
    seen = []
    viewport.subscribe(lambda vp: seen.append(vp.is_narrow))

    viewport.resize(900)
    viewport.resize(768)
    viewport.resize(500)
    viewport.resize(769)

    assert seen == [True, False]
    assert not viewport.is_narrow


def test_viewport_unsubscribe():
    viewport = Viewport(1024)
    seen = []
    unsubscribe = viewport.subscribe(lambda vp: seen.append(vp.width))
    unsubscribe()

    viewport.resize(320)

    assert seen == []
