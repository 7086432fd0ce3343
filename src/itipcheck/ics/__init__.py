"""iCalendar structural and iTIP validation."""

from .assertions import assert_none, assert_one, assert_one_or_less, property_items
from .calendar import CalendarValidator, default_validator, load_calendar, parse_calendar
from .components import ComponentValidator, validate_component
from .config import RELAXED, STRICT, ValidationConfig, load_config
from .constants import Method
from .errors import (
    ICSComponentError,
    ICSConfigError,
    ICSError,
    ICSFileError,
    ICSParseError,
    ICSStructureError,
    format_error_for_user,
)
from .methods import METHOD_RULES, MethodStructureValidator, primary_kind, validate_method_structure
from .properties import PropertyValidator, validate_procedure_alarm
from .result import ValidationResult
from .rules import Cardinality, CardinalityRule, ValidationRule, default_rules

__all__ = [
    "assert_none",
    "assert_one",
    "assert_one_or_less",
    "property_items",
    "CalendarValidator",
    "default_validator",
    "load_calendar",
    "parse_calendar",
    "ComponentValidator",
    "validate_component",
    "RELAXED",
    "STRICT",
    "ValidationConfig",
    "load_config",
    "Method",
    "ICSComponentError",
    "ICSConfigError",
    "ICSError",
    "ICSFileError",
    "ICSParseError",
    "ICSStructureError",
    "format_error_for_user",
    "METHOD_RULES",
    "MethodStructureValidator",
    "primary_kind",
    "validate_method_structure",
    "PropertyValidator",
    "validate_procedure_alarm",
    "ValidationResult",
    "Cardinality",
    "CardinalityRule",
    "ValidationRule",
    "default_rules",
]
