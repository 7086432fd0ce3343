"""Validation outcome accumulated over a single validation pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import ICSStructureError


@dataclass
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    # raised by the per-component pass; kept apart from the calendar-level errors
    component_failures: list[ICSStructureError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def has_component_failures(self) -> bool:
        return bool(self.component_failures)

    @property
    def valid(self) -> bool:
        return not self.errors and not self.component_failures

    def add(self, message: str, warn_only: bool = False) -> None:
        if warn_only:
            self.warnings.append(message)
        else:
            self.errors.append(message)

    def extend(self, messages: list[str], warn_only: bool = False) -> None:
        for message in messages:
            self.add(message, warn_only=warn_only)

    def merge(self, other: ValidationResult) -> ValidationResult:
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        self.component_failures.extend(other.component_failures)
        return self
