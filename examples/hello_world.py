"""
clocksource — Hello World

Time-dependent code takes a Clock instead of calling datetime.now()
itself. Swap the clock, keep the code.
"""

from datetime import UTC, datetime

from clocksource import Clock, FrozenClock, LocalizedClock, SystemClock

# ─── Your code (depends only on the Clock protocol) ───


class InvoiceStamper:
    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    def stamp(self, invoice_id: str) -> str:
        return f"{invoice_id} issued {self._clock.now().isoformat(timespec='seconds')}"


def main():
    # ──────────────────────────────────────
    #  1. Production: the host clock
    # ──────────────────────────────────────
    print(InvoiceStamper().stamp("INV-001"))

    # ──────────────────────────────────────
    #  2. Tests: a frozen instant, same output every run
    # ──────────────────────────────────────
    frozen = FrozenClock.at(datetime(2024, 6, 1, 12, 0, tzinfo=UTC))
    stamper = InvoiceStamper(frozen)
    print(stamper.stamp("INV-002"))
    print(stamper.stamp("INV-003"))

    # ──────────────────────────────────────
    #  3. Reporting in a fixed zone
    # ──────────────────────────────────────
    print(InvoiceStamper(LocalizedClock.with_zone("America/New_York")).stamp("INV-004"))
    print(InvoiceStamper(LocalizedClock.with_zone("America/New_York", clock=frozen)).stamp("INV-005"))
    print(InvoiceStamper(LocalizedClock.utc()).stamp("INV-006"))


if __name__ == "__main__":
    main()
