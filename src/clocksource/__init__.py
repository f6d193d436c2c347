"""clocksource — interchangeable sources for the current instant.

Time-dependent code takes a :class:`Clock` rather than calling
``datetime.now()`` itself.  Inject :class:`SystemClock` in production,
:class:`FrozenClock` in tests, and :class:`LocalizedClock` wherever
instants must be reported in a particular time zone.
"""

import logging

from clocksource.base import Clock
from clocksource.exceptions import ClockError, UnknownTimeZoneError
from clocksource.frozen import FrozenClock
from clocksource.localized import LocalizedClock
from clocksource.system import SystemClock

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Clock",
    "ClockError",
    "FrozenClock",
    "LocalizedClock",
    "SystemClock",
    "UnknownTimeZoneError",
]
