"""Property cardinality checks for a single component."""

from __future__ import annotations

import logging
from typing import Optional

from icalendar import Component

from .assertions import assert_none, assert_one, assert_one_or_less, kind_of, property_items
from .config import STRICT, ValidationConfig
from .constants import ATTACH, DESCRIPTION
from .result import ValidationResult

logger = logging.getLogger(__name__)


class PropertyValidator:
    """Applies cardinality assertions to the properties of one container.

    Property cardinality is always a hard error: ``prefer_warning`` is never set,
    so relaxed mode in ``config`` does not downgrade these failures.
    """

    def __init__(self, config: Optional[ValidationConfig] = None) -> None:
        self.config = config or STRICT

    def assert_one(self, name: str, container: Component, result: ValidationResult) -> bool:
        return assert_one(name, property_items(container), False, result, self.config, context=kind_of(container))

    def assert_one_or_less(self, name: str, container: Component, result: ValidationResult) -> bool:
        return assert_one_or_less(name, property_items(container), False, result, self.config, context=kind_of(container))

    def assert_none(self, name: str, container: Component, result: ValidationResult) -> bool:
        return assert_none(name, property_items(container), False, result, self.config, context=kind_of(container))


def validate_procedure_alarm(alarm: Component, config: Optional[ValidationConfig] = None) -> ValidationResult:
    """Check a PROCEDURE alarm: ATTACH exactly once, DESCRIPTION at most once.

    ACTION, TRIGGER, DURATION and REPEAT are left to the component-specific
    validators.
    """
    result = ValidationResult()
    validator = PropertyValidator(config)
    validator.assert_one(ATTACH, alarm, result)
    validator.assert_one_or_less(DESCRIPTION, alarm, result)
    if result.has_errors:
        logger.debug("Procedure alarm failed property checks", extra={"errors": len(result.errors)})
    return result
