"""Structural and iTIP validation for iCalendar documents."""

__version__ = "0.1.0"
