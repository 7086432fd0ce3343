"""Shared calendar builders for the itipcheck test suite."""

from __future__ import annotations

import pytest
from icalendar import Alarm, Calendar, Component, Event, FreeBusy, Journal, Timezone, Todo

from itipcheck.ics import RELAXED, STRICT, CalendarValidator

COMPONENT_FACTORIES = {
    "VEVENT": Event,
    "VTODO": Todo,
    "VJOURNAL": Journal,
    "VFREEBUSY": FreeBusy,
    "VTIMEZONE": Timezone,
    "VALARM": Alarm,
}


def make_component(kind: str) -> Component:
    return COMPONENT_FACTORIES[kind]()


def make_calendar(
    *kinds: str,
    method: str | None = None,
    version: str | None = "2.0",
    prodid: str | None = "-//itipcheck//tests//EN",
) -> Calendar:
    calendar = Calendar()
    if prodid is not None:
        calendar.add("prodid", prodid)
    if version is not None:
        calendar.add("version", version)
    if method is not None:
        calendar.add("method", method)
    for kind in kinds:
        calendar.add_component(make_component(kind))
    return calendar


def make_procedure_alarm(attach: int = 1, descriptions: int = 0) -> Alarm:
    alarm = Alarm()
    alarm.add("action", "PROCEDURE")
    for index in range(attach):
        alarm.add("attach", f"ftp://example.com/pub/proc{index}.exe")
    for index in range(descriptions):
        alarm.add("description", f"Run procedure {index}")
    return alarm


@pytest.fixture
def strict_validator() -> CalendarValidator:
    return CalendarValidator(config=STRICT)


@pytest.fixture
def relaxed_validator() -> CalendarValidator:
    return CalendarValidator(config=RELAXED)
