"""Tests for the package's logging setup."""

import logging

from clocksource import FrozenClock, LocalizedClock


def test_package_logger_has_null_handler():
    handlers = logging.getLogger("clocksource").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_frozen_clock_logs_construction(caplog, instant):
    caplog.set_level(logging.DEBUG, logger="clocksource")
    FrozenClock.at(instant)
    assert ("clocksource.frozen", logging.DEBUG, "Frozen clock pinned at 2024-01-15 10:00:00+00:00") in (
        caplog.record_tuples
    )


def test_localized_clock_logs_construction(caplog):
    caplog.set_level(logging.DEBUG, logger="clocksource")
    LocalizedClock.with_zone("America/New_York")
    assert (
        "clocksource.localized",
        logging.DEBUG,
        "Localized clock created for zone America/New_York",
    ) in caplog.record_tuples


def test_now_does_not_log(caplog, instant):
    clock = LocalizedClock.utc(clock=FrozenClock.at(instant))
    caplog.set_level(logging.DEBUG, logger="clocksource")
    clock.now()
    assert caplog.records == []
