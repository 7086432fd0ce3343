"""Per-component validation run for every component of a scheduling message."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from icalendar import Component

from .assertions import kind_of
from .config import STRICT, ValidationConfig
from .constants import ACTION, PROCEDURE_ACTION, VALARM, VEVENT, VTODO, Method
from .errors import ICSComponentError
from .properties import validate_procedure_alarm
from .result import ValidationResult

logger = logging.getLogger(__name__)

# Called once per top-level component with the declared method; raises on failure.
ComponentValidator = Callable[[Component, Union[Method, str]], None]

ALARM_OWNERS = (VEVENT, VTODO)


def _is_procedure_alarm(component: Component) -> bool:
    if kind_of(component) != VALARM:
        return False
    action = component.get(ACTION)
    return action is not None and str(action).strip().upper() == PROCEDURE_ACTION


def validate_component(
    component: Component,
    method: Union[Method, str],
    config: Optional[ValidationConfig] = None,
) -> None:
    """Validate the nested alarms of an event or to-do.

    Method specific property rules for each component type are supplied by
    callers through ``CalendarValidator(component_validator=...)``.
    """
    kind = kind_of(component)
    if kind not in ALARM_OWNERS:
        return

    result = ValidationResult()
    for alarm in component.subcomponents:
        if _is_procedure_alarm(alarm):
            result.merge(validate_procedure_alarm(alarm, config or STRICT))

    if result.has_errors:
        logger.debug("Component failed validation", extra={"component": kind, "method": getattr(method, "value", method)})
        raise ICSComponentError(kind, result)


def component_validator_for(config: ValidationConfig) -> ComponentValidator:
    def _validate(component: Component, method: Union[Method, str]) -> None:
        validate_component(component, method, config)

    return _validate
