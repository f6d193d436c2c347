"""SystemClock — the real host clock."""

from __future__ import annotations

from datetime import datetime


class SystemClock:
    """Default clock backed by the real system time.

    Returned instants carry the host's local UTC offset.  Successive
    calls are not guaranteed to be monotonic: the host clock may be
    adjusted externally.
    """

    __slots__ = ()

    def now(self) -> datetime:
        return datetime.now().astimezone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SystemClock):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(SystemClock)

    def __repr__(self) -> str:
        return "SystemClock()"
