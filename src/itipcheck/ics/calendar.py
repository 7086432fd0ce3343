"""Calendar-level structural validation and .ics loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from icalendar import Calendar

from .assertions import property_items
from .components import ComponentValidator, component_validator_for
from .config import ValidationConfig, load_config
from .constants import CALENDAR_PROPERTIES, EXTENSION_PREFIX, METHOD, SUPPORTED_VERSION, VERSION, Method
from .errors import ICSFileError, ICSParseError, ICSStructureError
from .methods import validate_method_structure
from .result import ValidationResult
from .rules import ValidationRule, default_rules

logger = logging.getLogger(__name__)


def _first(value: Any) -> Any:
    if isinstance(value, list):
        return value[0] if value else None
    return value


def is_calendar_property(name: str) -> bool:
    upper = name.upper()
    return upper.startswith(EXTENSION_PREFIX) or upper in CALENDAR_PROPERTIES


class CalendarValidator:
    """Validates the structure of a calendar and, when it declares a METHOD, its iTIP shape.

    Every check runs to completion and contributes to one ``ValidationResult``;
    ``validate`` raises a single ``ICSStructureError`` afterwards if anything
    failed. Per-component validation runs through ``component_validator``;
    each component that raises is recorded in ``component_failures``, apart from
    the calendar-level errors, and the remaining components are still checked.
    """

    def __init__(
        self,
        rules: Iterable[ValidationRule] = (),
        config: Optional[ValidationConfig] = None,
        component_validator: Optional[ComponentValidator] = None,
    ) -> None:
        self.rules = tuple(rules)
        self.config = config or load_config()
        self.component_validator = component_validator or component_validator_for(self.config)

    def check(self, calendar: Calendar) -> ValidationResult:
        result = ValidationResult()

        for rule in self.rules:
            warn_only = self.config.relaxed and rule.relaxed_mode_supported
            result.extend(rule.apply(calendar), warn_only=warn_only)

        if not self.config.relaxed:
            version = _first(calendar.get(VERSION))
            if version is not None and str(version) != SUPPORTED_VERSION:
                result.add(f"Unsupported Version: {version}")

        if not calendar.subcomponents:
            result.add("Calendar must contain at least one component")

        for name, _value in property_items(calendar):
            if not is_calendar_property(name):
                result.add(f"Invalid property: {name}")

        raw_method = _first(calendar.get(METHOD))
        if raw_method is not None:
            self._check_method(calendar, raw_method, result)

        logger.debug(
            "Calendar validation finished",
            extra={
                "errors": len(result.errors),
                "warnings": len(result.warnings),
                "component_failures": len(result.component_failures),
            },
        )
        return result

    def _check_method(self, calendar: Calendar, raw_method: Any, result: ValidationResult) -> None:
        method = Method.parse(raw_method)
        if method is None:
            logger.debug("No iTIP rules for method", extra={"method": str(raw_method)})
        else:
            result.merge(validate_method_structure(method, calendar, self.config))

        for component in calendar.subcomponents:
            try:
                self.component_validator(component, method or str(raw_method))
            except ICSStructureError as exc:
                result.component_failures.append(exc)

    def validate(self, calendar: Calendar) -> ValidationResult:
        result = self.check(calendar)
        if not result.valid:
            raise ICSStructureError(result)
        return result


def default_validator(config: Optional[ValidationConfig] = None) -> CalendarValidator:
    return CalendarValidator(rules=default_rules(), config=config)


def parse_calendar(data: bytes | str, source: Optional[str] = None) -> Calendar:
    try:
        return Calendar.from_ical(data)
    except Exception as exc:
        raise ICSParseError("Invalid calendar file format", source=source) from exc


def load_calendar(path: Path) -> Calendar:
    if not path.exists():
        raise ICSFileError("Calendar file not found", path=str(path))
    if path.is_dir():
        raise ICSFileError("Calendar path is a directory", path=str(path))
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ICSFileError("Unable to read calendar file", path=str(path)) from exc
    return parse_calendar(data, source=str(path))
