"""Cardinality assertions shared by every structural validator.

Each assertion counts how often a component or property kind occurs in a
collection and records a message on the active :class:`ValidationResult` when
the count is out of bounds. A failure is downgraded to a warning only when the
caller prefers a warning *and* relaxed validation is enabled.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from icalendar import Component

from .config import ValidationConfig
from .constants import VCALENDAR
from .result import ValidationResult

Item = Any

NONE_MESSAGE = "{label} [{kind}] is not applicable in {context}"
ONE_OR_LESS_MESSAGE = "{label} [{kind}] must only be specified once in {context}"
ONE_MESSAGE = "{label} [{kind}] must be specified once in {context}"


def kind_of(item: Item) -> str:
    if isinstance(item, tuple):
        return str(item[0]).upper()
    return str(item.name).upper()


def _label(item: Item) -> str:
    return "Property" if isinstance(item, tuple) else "Component"


def property_items(container: Component) -> list[tuple[str, Any]]:
    """Flatten a component's properties into one ``(name, value)`` pair per occurrence."""
    items: list[tuple[str, Any]] = []
    for name, value in container.items():
        values = value if isinstance(value, list) else [value]
        items.extend((name.upper(), entry) for entry in values)
    return items


def component_kinds(container: Component) -> list[str]:
    return [kind_of(component) for component in container.subcomponents]


def count_kind(kind: str, items: Iterable[Item]) -> int:
    target = kind.upper()
    return sum(1 for item in items if kind_of(item) == target)


def _record(
    template: str,
    kind: str,
    label: str,
    prefer_warning: bool,
    result: ValidationResult,
    config: ValidationConfig,
    context: str,
) -> None:
    message = template.format(label=label, kind=kind.upper(), context=context)
    result.add(message, warn_only=prefer_warning and config.relaxed)


def _matching(kind: str, items: Sequence[Item]) -> list[Item]:
    target = kind.upper()
    return [item for item in items if kind_of(item) == target]


def assert_none(
    kind: str,
    items: Iterable[Item],
    prefer_warning: bool,
    result: ValidationResult,
    config: ValidationConfig,
    context: str = VCALENDAR,
) -> bool:
    matches = _matching(kind, list(items))
    if not matches:
        return True
    _record(NONE_MESSAGE, kind, _label(matches[0]), prefer_warning, result, config, context)
    return False


def assert_one_or_less(
    kind: str,
    items: Iterable[Item],
    prefer_warning: bool,
    result: ValidationResult,
    config: ValidationConfig,
    context: str = VCALENDAR,
) -> bool:
    matches = _matching(kind, list(items))
    if len(matches) <= 1:
        return True
    _record(ONE_OR_LESS_MESSAGE, kind, _label(matches[0]), prefer_warning, result, config, context)
    return False


def assert_one(
    kind: str,
    items: Iterable[Item],
    prefer_warning: bool,
    result: ValidationResult,
    config: ValidationConfig,
    context: str = VCALENDAR,
    label: str = "Property",
) -> bool:
    matches = _matching(kind, list(items))
    if len(matches) == 1:
        return True
    # zero matches leaves nothing to infer the label from
    _record(ONE_MESSAGE, kind, _label(matches[0]) if matches else label, prefer_warning, result, config, context)
    return False
