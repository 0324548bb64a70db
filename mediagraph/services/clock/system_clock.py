from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Optional

from mediagraph.domain.ports.clock import ClockPort


class SystemClock(ClockPort):
    """Wall-clock date source. Pass a tz to pin "today" to a zone other than local time."""

    def __init__(self, tz: Optional[tzinfo] = None) -> None:
        self._tz = tz

    def today(self) -> date:
        return datetime.now(self._tz).date()


class FixedClock(ClockPort):
    """Always returns the same date. Handy for tests and replaying fixtures."""

    def __init__(self, fixed: date) -> None:
        self._fixed = fixed

    def today(self) -> date:
        return self._fixed
