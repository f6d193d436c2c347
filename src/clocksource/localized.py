"""LocalizedClock — the current instant expressed in a fixed time zone."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, tzinfo
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from clocksource.exceptions import UnknownTimeZoneError
from clocksource.system import SystemClock

if TYPE_CHECKING:
    from clocksource.base import Clock

logger = logging.getLogger(__name__)


def _resolve_zone(zone: tzinfo | str) -> tzinfo:
    if isinstance(zone, tzinfo):
        return zone
    if not isinstance(zone, str):
        raise TypeError(f"zone must be a tzinfo or an IANA zone name, got {type(zone).__name__}")
    try:
        return ZoneInfo(zone)
    except ZoneInfoNotFoundError as exc:
        raise UnknownTimeZoneError(zone) from exc
    except (ValueError, OSError) as exc:
        # malformed keys raise ValueError; directory keys such as "America" raise OSError
        raise UnknownTimeZoneError(zone, str(exc)) from exc


class LocalizedClock:
    """Clock that reports the current instant in a fixed time zone.

    The absolute instant comes from the underlying clock on every call;
    only the zone annotation is fixed.

    Parameters:
        zone:   A ``tzinfo`` or an IANA zone name such as ``"Europe/Paris"``.
        clock:  Underlying source of truth.  Defaults to :class:`SystemClock`.
    """

    __slots__ = ("_clock", "_zone")

    def __init__(self, zone: tzinfo | str, *, clock: Clock | None = None) -> None:
        self._zone = _resolve_zone(zone)
        self._clock = clock or SystemClock()
        logger.debug("Localized clock created for zone %s", self._zone)

    @classmethod
    def with_zone(cls, zone: tzinfo | str, *, clock: Clock | None = None) -> LocalizedClock:
        return cls(zone, clock=clock)

    @classmethod
    def utc(cls, *, clock: Clock | None = None) -> LocalizedClock:
        return cls(UTC, clock=clock)

    @property
    def zone(self) -> tzinfo:
        return self._zone

    def now(self) -> datetime:
        return self._clock.now().astimezone(self._zone)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalizedClock):
            return NotImplemented
        return self._zone == other._zone and self._clock == other._clock

    def __hash__(self) -> int:
        return hash((LocalizedClock, self._zone, self._clock))

    def __repr__(self) -> str:
        return f"LocalizedClock({str(self._zone)!r}, clock={self._clock!r})"
