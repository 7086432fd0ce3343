"""iTIP structural rules, one table row per method and primary component.

For a scheduling message the primary component is the first of VEVENT,
VFREEBUSY, VTODO and VJOURNAL that is present in the calendar and has a row for
the declared method. Only that row's checks run; a calendar with no matching
primary component passes without checks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from icalendar import Calendar

from .assertions import assert_none, assert_one_or_less, component_kinds
from .config import STRICT, ValidationConfig
from .constants import (
    PRIMARY_KIND_ORDER,
    VALARM,
    VEVENT,
    VFREEBUSY,
    VJOURNAL,
    VTIMEZONE,
    VTODO,
    Method,
)
from .result import ValidationResult

logger = logging.getLogger(__name__)


class Limit(str, Enum):
    NONE = "NONE"
    ONE_OR_LESS = "ONE_OR_LESS"


@dataclass(frozen=True)
class StructureCheck:
    kind: str
    limit: Limit
    relaxable: bool = False


def _none(kind: str, relaxable: bool = False) -> StructureCheck:
    return StructureCheck(kind, Limit.NONE, relaxable)


def _one_or_less(kind: str) -> StructureCheck:
    return StructureCheck(kind, Limit.ONE_OR_LESS)


Row = tuple[StructureCheck, ...]

_FREEBUSY_ONLY: Row = (_none(VTODO), _none(VJOURNAL), _none(VTIMEZONE), _none(VALARM))

METHOD_RULES: Mapping[Method, Mapping[str, Row]] = {
    Method.PUBLISH: {
        VEVENT: (_none(VFREEBUSY), _none(VJOURNAL), _none(VTODO, relaxable=True)),
        VFREEBUSY: _FREEBUSY_ONLY,
        VTODO: (_none(VJOURNAL),),
    },
    Method.REQUEST: {
        VEVENT: (_none(VFREEBUSY), _none(VJOURNAL), _none(VTODO)),
        VFREEBUSY: _FREEBUSY_ONLY,
        VTODO: (_none(VJOURNAL),),
    },
    Method.REPLY: {
        VEVENT: (_one_or_less(VTIMEZONE), _none(VALARM), _none(VFREEBUSY), _none(VJOURNAL), _none(VTODO)),
        VFREEBUSY: _FREEBUSY_ONLY,
        VTODO: (_one_or_less(VTIMEZONE), _none(VALARM), _none(VJOURNAL)),
    },
    Method.ADD: {
        VEVENT: (_none(VFREEBUSY), _none(VJOURNAL), _none(VTODO)),
        VTODO: (_none(VFREEBUSY), _none(VJOURNAL)),
        VJOURNAL: (_one_or_less(VTIMEZONE), _none(VFREEBUSY)),
    },
    Method.CANCEL: {
        VEVENT: (_none(VALARM), _none(VFREEBUSY), _none(VJOURNAL), _none(VTODO)),
        VTODO: (_one_or_less(VTIMEZONE), _none(VALARM), _none(VFREEBUSY), _none(VJOURNAL)),
        VJOURNAL: (_none(VALARM), _none(VFREEBUSY)),
    },
    Method.REFRESH: {
        VEVENT: (_none(VALARM), _none(VFREEBUSY), _none(VJOURNAL), _none(VTODO)),
        VTODO: (_none(VALARM), _none(VFREEBUSY), _none(VJOURNAL), _none(VTIMEZONE)),
    },
    Method.COUNTER: {
        VEVENT: (_none(VFREEBUSY), _none(VJOURNAL), _none(VTODO)),
        VTODO: (_one_or_less(VTIMEZONE), _none(VFREEBUSY), _none(VJOURNAL)),
    },
    Method.DECLINE_COUNTER: {
        VEVENT: (_none(VFREEBUSY), _none(VJOURNAL), _none(VTODO), _none(VTIMEZONE), _none(VALARM)),
        VTODO: (_none(VALARM), _none(VFREEBUSY), _none(VJOURNAL)),
    },
}


def primary_kind(method: Method, calendar: Calendar) -> Optional[str]:
    present = set(component_kinds(calendar))
    rows = METHOD_RULES[method]
    for kind in PRIMARY_KIND_ORDER:
        if kind in present and kind in rows:
            return kind
    return None


class MethodStructureValidator:
    def __init__(self, method: Method, config: Optional[ValidationConfig] = None) -> None:
        self.method = method
        self.config = config or STRICT

    @property
    def rows(self) -> Mapping[str, Row]:
        return METHOD_RULES[self.method]

    def validate(self, calendar: Calendar) -> ValidationResult:
        result = ValidationResult()
        kind = primary_kind(self.method, calendar)
        if kind is None:
            logger.debug("No primary component for method", extra={"method": self.method.value})
            return result

        logger.debug("Applying iTIP rules", extra={"method": self.method.value, "primary": kind})
        components = list(calendar.subcomponents)
        for check in self.rows[kind]:
            if check.limit is Limit.NONE:
                assert_none(check.kind, components, check.relaxable, result, self.config)
            else:
                assert_one_or_less(check.kind, components, check.relaxable, result, self.config)
        return result


def validate_method_structure(
    method: Method,
    calendar: Calendar,
    config: Optional[ValidationConfig] = None,
) -> ValidationResult:
    return MethodStructureValidator(method, config).validate(calendar)
