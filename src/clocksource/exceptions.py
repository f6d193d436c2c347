"""Custom exceptions for the clocksource package."""

from __future__ import annotations


class ClockError(Exception):
    """Base exception for all clock-related errors."""


class UnknownTimeZoneError(ClockError):
    """Raised when a time zone name cannot be resolved."""

    def __init__(self, zone_name: str, detail: str = "") -> None:
        self.zone_name = zone_name
        msg = f"Unknown time zone '{zone_name}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
