"""Domain service: order number generation.

Order numbers are derived from the placement time: ``LS-`` followed by
the last eight digits of the epoch milliseconds.  Two placements in the
same millisecond would collide, so the generator never issues the same
millisecond value twice; it bumps to one past the last value instead.

That guard lives in the generator instance, so uniqueness holds only
within one process: separate processes (e.g. two CLI invocations) can
still collide, and the eight-digit suffix wraps roughly every 27.8 hours.
"""

from __future__ import annotations

from datetime import datetime

ORDER_NUMBER_PREFIX = "LS-"
_DIGITS = 8


class OrderNumberGenerator:

    def __init__(self) -> None:
        self._last_millis: int | None = None

    def next_number(self, placed_at: datetime) -> str:
        millis = int(placed_at.timestamp() * 1000)
        if self._last_millis is not None and millis <= self._last_millis:
            millis = self._last_millis + 1
        self._last_millis = millis
        return f"{ORDER_NUMBER_PREFIX}{str(millis)[-_DIGITS:].zfill(_DIGITS)}"
