"""Error types for iCalendar validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .result import ValidationResult


@dataclass
class ICSError(Exception):
    message: str
    code: str = "ICS_ERROR"
    details: Any | None = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class ICSConfigError(ICSError):
    def __init__(self, message: str, details: Any | None = None) -> None:
        super().__init__(message, code="CONFIG_ERROR", details=details)


class ICSFileError(ICSError):
    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message, code="FILE_ERROR", details={"path": path})
        self.path = path


class ICSParseError(ICSError):
    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message, code="PARSE_ERROR", details={"source": source})
        self.source = source


class ICSStructureError(ICSError):
    """Raised once per validation pass that recorded errors or component failures."""

    def __init__(self, result: ValidationResult, message: str | None = None) -> None:
        summary = message or f"Calendar failed structural validation with {len(result.errors)} error(s)"
        if message is None and result.component_failures:
            summary += f" and {len(result.component_failures)} failed component(s)"
        super().__init__(
            summary,
            code="STRUCTURE_ERROR",
            details={"errors": list(result.errors), "warnings": list(result.warnings)},
        )
        self.result = result

    @property
    def errors(self) -> list[str]:
        return self.result.errors

    @property
    def warnings(self) -> list[str]:
        return self.result.warnings


class ICSComponentError(ICSStructureError):
    def __init__(self, kind: str, result: ValidationResult) -> None:
        super().__init__(result, message=f"{kind} failed structural validation with {len(result.errors)} error(s)")
        self.kind = kind


def format_error_for_user(error: Exception) -> str:
    if isinstance(error, ICSStructureError):
        lines = [f"Structure Error: {error.message}"]
        lines.extend(f"  - {message}" for message in error.errors)
        for failure in error.result.component_failures:
            lines.append(f"  {failure.message}")
            lines.extend(f"    - {message}" for message in failure.errors)
        return "\n".join(lines)
    if isinstance(error, ICSConfigError):
        return f"Configuration Error: {error.message}"
    if isinstance(error, ICSFileError):
        return f"File Error: {error.message}"
    if isinstance(error, ICSParseError):
        return f"Parse Error: {error.message}"
    if isinstance(error, ICSError):
        return f"Error: {error.message}"
    return f"Error: {str(error)}"
