"""Generic, pluggable rules applied to a calendar's top-level properties."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from icalendar import Component

from .assertions import ONE_MESSAGE, ONE_OR_LESS_MESSAGE, NONE_MESSAGE, count_kind, kind_of, property_items
from .constants import CALSCALE, METHOD, PRODID, VERSION


@runtime_checkable
class ValidationRule(Protocol):
    relaxed_mode_supported: bool

    def apply(self, container: Component) -> list[str]:
        ...


class Cardinality(str, Enum):
    ONE = "ONE"
    ONE_OR_LESS = "ONE_OR_LESS"
    NONE = "NONE"


_CARDINALITY_CHECKS = {
    Cardinality.ONE: (lambda count: count == 1, ONE_MESSAGE),
    Cardinality.ONE_OR_LESS: (lambda count: count <= 1, ONE_OR_LESS_MESSAGE),
    Cardinality.NONE: (lambda count: count == 0, NONE_MESSAGE),
}


@dataclass(frozen=True)
class CardinalityRule:
    cardinality: Cardinality
    names: tuple[str, ...]
    relaxed_mode_supported: bool = False

    def apply(self, container: Component) -> list[str]:
        items = property_items(container)
        context = kind_of(container)
        predicate, template = _CARDINALITY_CHECKS[self.cardinality]
        return [
            template.format(label="Property", kind=name.upper(), context=context)
            for name in self.names
            if not predicate(count_kind(name, items))
        ]


def default_rules() -> tuple[ValidationRule, ...]:
    return (
        CardinalityRule(Cardinality.ONE, (PRODID, VERSION), relaxed_mode_supported=True),
        CardinalityRule(Cardinality.ONE_OR_LESS, (CALSCALE, METHOD)),
    )
