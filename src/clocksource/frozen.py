"""FrozenClock — a clock pinned to a single instant."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from clocksource.system import SystemClock

if TYPE_CHECKING:
    from clocksource.base import Clock

logger = logging.getLogger(__name__)


class FrozenClock:
    """Clock that returns the same instant on every call.

    Use it to make time-dependent logic deterministic in tests::

        clock = FrozenClock.at(datetime(2024, 1, 15, 10, tzinfo=UTC))
        assert clock.now() == clock.now()

    Parameters:
        frozen_at:  The instant every ``now()`` call returns.  Stored as
                    given; callers are expected to pass an aware datetime.
    """

    __slots__ = ("_frozen_at",)

    def __init__(self, frozen_at: datetime) -> None:
        self._frozen_at = frozen_at
        logger.debug("Frozen clock pinned at %s", frozen_at)

    # ── Factory helpers ──────────────────────────────────────

    @classmethod
    def at(cls, frozen_at: datetime) -> FrozenClock:
        return cls(frozen_at)

    @classmethod
    def from_now(cls, *, clock: Clock | None = None) -> FrozenClock:
        """Freeze the current instant of *clock* (the system clock by default)."""
        source = clock or SystemClock()
        return cls(source.now())

    # ── Clock ────────────────────────────────────────────────

    @property
    def frozen_at(self) -> datetime:
        return self._frozen_at

    def now(self) -> datetime:
        return self._frozen_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrozenClock):
            return NotImplemented
        return self._frozen_at == other._frozen_at

    def __hash__(self) -> int:
        return hash((FrozenClock, self._frozen_at))

    def __repr__(self) -> str:
        return f"FrozenClock.at({self._frozen_at!r})"
