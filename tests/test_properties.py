"""Tests for itipcheck.ics.properties."""

from __future__ import annotations

from icalendar import Alarm

from itipcheck.ics import RELAXED, PropertyValidator, ValidationResult, validate_procedure_alarm

from conftest import make_procedure_alarm


def test_procedure_alarm_with_one_attach_is_valid() -> None:
    result = validate_procedure_alarm(make_procedure_alarm(attach=1, descriptions=1))
    assert result.valid
    assert result.warnings == []


def test_procedure_alarm_without_attach_fails() -> None:
    result = validate_procedure_alarm(make_procedure_alarm(attach=0))
    assert result.errors == ["Property [ATTACH] must be specified once in VALARM"]


def test_procedure_alarm_with_two_attach_fails() -> None:
    result = validate_procedure_alarm(make_procedure_alarm(attach=2))
    assert result.errors == ["Property [ATTACH] must be specified once in VALARM"]


def test_procedure_alarm_fails_only_on_description_cardinality() -> None:
    result = validate_procedure_alarm(make_procedure_alarm(attach=1, descriptions=2))
    assert result.errors == ["Property [DESCRIPTION] must only be specified once in VALARM"]


def test_property_checks_stay_errors_in_relaxed_mode() -> None:
    result = validate_procedure_alarm(make_procedure_alarm(attach=0), RELAXED)
    assert len(result.errors) == 1
    assert result.warnings == []


def test_property_validator_assert_none() -> None:
    alarm = Alarm()
    alarm.add("repeat", 2)
    validator = PropertyValidator()
    result = ValidationResult()
    assert validator.assert_none("DURATION", alarm, result) is True
    assert validator.assert_none("REPEAT", alarm, result) is False
    assert result.errors == ["Property [REPEAT] is not applicable in VALARM"]
