"""Wall-clock implementation of the Clock port."""

from datetime import datetime, timezone

from inkpost.interfaces.clock import Clock

# pylint: disable=too-few-public-methods


class SystemClock(Clock):
    """Clock backed by the system time, always in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
