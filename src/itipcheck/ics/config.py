"""Configuration loader for iCalendar validation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .constants import FALSY_VALUES, RELAXED_ENV_VAR, TRUTHY_VALUES
from .errors import ICSConfigError


@dataclass(frozen=True)
class ValidationConfig:
    relaxed: bool = False


STRICT = ValidationConfig(relaxed=False)
RELAXED = ValidationConfig(relaxed=True)


def parse_flag(value: str, name: str = RELAXED_ENV_VAR) -> bool:
    normalized = value.strip().lower()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    raise ICSConfigError(f"Invalid boolean value for {name}", details={"name": name, "value": value})


def load_config(relaxed: Optional[bool] = None) -> ValidationConfig:
    if relaxed is not None:
        return ValidationConfig(relaxed=relaxed)
    raw = os.getenv(RELAXED_ENV_VAR)
    if raw is None:
        return STRICT
    return ValidationConfig(relaxed=parse_flag(raw))
