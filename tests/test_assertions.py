"""Tests for itipcheck.ics.assertions."""

from __future__ import annotations

from icalendar import Alarm, Timezone

from itipcheck.ics import RELAXED, STRICT, ValidationResult, assert_none, assert_one, assert_one_or_less, property_items
from itipcheck.ics.assertions import component_kinds, count_kind, kind_of

from conftest import make_calendar


def test_assert_none_passes_without_matches() -> None:
    calendar = make_calendar("VEVENT")
    result = ValidationResult()
    assert assert_none("VTODO", calendar.subcomponents, False, result, STRICT) is True
    assert result.errors == []
    assert result.warnings == []


def test_assert_none_records_error_naming_kind_and_context() -> None:
    calendar = make_calendar("VEVENT", "VTODO")
    result = ValidationResult()
    assert assert_none("VTODO", calendar.subcomponents, False, result, STRICT) is False
    assert result.errors == ["Component [VTODO] is not applicable in VCALENDAR"]


def test_prefer_warning_needs_relaxed_mode() -> None:
    calendar = make_calendar("VEVENT", "VTODO")
    strict = ValidationResult()
    assert_none("VTODO", calendar.subcomponents, True, strict, STRICT)
    assert len(strict.errors) == 1
    assert strict.warnings == []

    relaxed = ValidationResult()
    assert_none("VTODO", calendar.subcomponents, True, relaxed, RELAXED)
    assert relaxed.errors == []
    assert relaxed.warnings == ["Component [VTODO] is not applicable in VCALENDAR"]


def test_hard_assertion_ignores_relaxed_mode() -> None:
    calendar = make_calendar("VFREEBUSY", "VTODO")
    result = ValidationResult()
    assert_none("VTODO", calendar.subcomponents, False, result, RELAXED)
    assert len(result.errors) == 1
    assert result.warnings == []


def test_assert_one_or_less() -> None:
    calendar = make_calendar("VEVENT", "VTIMEZONE")
    result = ValidationResult()
    assert assert_one_or_less("VTIMEZONE", calendar.subcomponents, False, result, STRICT) is True
    assert result.errors == []

    calendar.add_component(Timezone())
    assert assert_one_or_less("VTIMEZONE", calendar.subcomponents, False, result, STRICT) is False
    assert result.errors == ["Component [VTIMEZONE] must only be specified once in VCALENDAR"]


def test_assert_one_on_properties() -> None:
    alarm = Alarm()
    result = ValidationResult()
    assert assert_one("ATTACH", property_items(alarm), False, result, STRICT, context="VALARM") is False
    assert result.errors == ["Property [ATTACH] must be specified once in VALARM"]

    alarm.add("attach", "ftp://example.com/a.exe")
    result = ValidationResult()
    assert assert_one("attach", property_items(alarm), False, result, STRICT, context="VALARM") is True
    assert result.errors == []


def test_assertions_do_not_mutate_input() -> None:
    calendar = make_calendar("VEVENT", "VTODO", "VTODO")
    components = list(calendar.subcomponents)
    result = ValidationResult()
    assert_none("VTODO", components, False, result, STRICT)
    assert_one_or_less("VTODO", components, False, result, STRICT)
    assert [kind_of(component) for component in components] == ["VEVENT", "VTODO", "VTODO"]
    assert len(calendar.subcomponents) == 3


def test_property_items_flattens_repeated_properties() -> None:
    alarm = Alarm()
    alarm.add("description", "first")
    alarm.add("description", "second")
    alarm.add("action", "DISPLAY")
    names = [name for name, _value in property_items(alarm)]
    assert names.count("DESCRIPTION") == 2
    assert count_kind("description", property_items(alarm)) == 2
    assert "ACTION" in names


def test_component_kinds() -> None:
    calendar = make_calendar("VEVENT", "VTIMEZONE")
    assert component_kinds(calendar) == ["VEVENT", "VTIMEZONE"]
