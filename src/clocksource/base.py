"""Clock abstraction for testable time-dependent logic."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Protocol for getting the current instant.

    Components that depend on time take a ``Clock`` instead of calling
    ``datetime.now()`` directly.  Inject :class:`SystemClock` in production
    and :class:`FrozenClock` in tests.
    """

    def now(self) -> datetime: ...
