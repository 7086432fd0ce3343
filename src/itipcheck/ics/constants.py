"""Constants for iCalendar structural validation."""

from __future__ import annotations

from enum import Enum
from typing import Optional

VCALENDAR = "VCALENDAR"
VEVENT = "VEVENT"
VTODO = "VTODO"
VJOURNAL = "VJOURNAL"
VFREEBUSY = "VFREEBUSY"
VTIMEZONE = "VTIMEZONE"
VALARM = "VALARM"

# Order in which the primary component of a scheduling message is looked up.
PRIMARY_KIND_ORDER = (VEVENT, VFREEBUSY, VTODO, VJOURNAL)

ATTACH = "ATTACH"
ACTION = "ACTION"
DESCRIPTION = "DESCRIPTION"
METHOD = "METHOD"
PRODID = "PRODID"
VERSION = "VERSION"
CALSCALE = "CALSCALE"

CALENDAR_PROPERTIES = frozenset(
    {
        CALSCALE,
        METHOD,
        PRODID,
        VERSION,
        "UID",
        "LAST-MODIFIED",
        "URL",
        "REFRESH-INTERVAL",
        "SOURCE",
        "COLOR",
        "NAME",
        DESCRIPTION,
        "CATEGORIES",
        "IMAGE",
    }
)

EXTENSION_PREFIX = "X-"
SUPPORTED_VERSION = "2.0"
PROCEDURE_ACTION = "PROCEDURE"

RELAXED_ENV_VAR = "ICS_RELAXED_VALIDATION"
TRUTHY_VALUES = {"1", "true", "yes", "on"}
FALSY_VALUES = {"", "0", "false", "no", "off"}


class Method(str, Enum):
    PUBLISH = "PUBLISH"
    REQUEST = "REQUEST"
    REPLY = "REPLY"
    ADD = "ADD"
    CANCEL = "CANCEL"
    REFRESH = "REFRESH"
    COUNTER = "COUNTER"
    DECLINE_COUNTER = "DECLINECOUNTER"

    @classmethod
    def parse(cls, value: object) -> Optional["Method"]:
        """Return the method for a METHOD property value, or None if unknown."""
        if value is None:
            return None
        try:
            return cls(str(value).strip())
        except ValueError:
            return None
