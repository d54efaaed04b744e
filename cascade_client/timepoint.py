"""Points in time and the clock that produces them."""

from __future__ import annotations

import functools
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_FORMAT = "%Y-%m-%d %H:%M:%S"


@functools.total_ordering
class TimePoint:
    """An instant on the system clock, shown and split up in local time."""

    __slots__ = ("_moment",)

    def __init__(self, moment: datetime) -> None:
        if not isinstance(moment, datetime):
            raise TypeError(f"expected a datetime, got {type(moment).__name__}")
        # A naive datetime is taken to be in local time.
        self._moment = moment.astimezone(timezone.utc)

    @property
    def moment(self) -> datetime:
        """The instant as an aware UTC datetime."""
        return self._moment

    def _local(self) -> datetime:
        return self._moment.astimezone()

    def __str__(self) -> str:
        return self._local().strftime(_FORMAT)

    def __repr__(self) -> str:
        return f"TimePoint({self._moment.isoformat()!r})"

    def __add__(self, other: timedelta | TimePoint) -> TimePoint:
        if isinstance(other, timedelta):
            return TimePoint(self._moment + other)
        if isinstance(other, TimePoint):
            return TimePoint(self._moment + (other._moment - _EPOCH))
        return NotImplemented

    def __sub__(self, other: timedelta | TimePoint) -> TimePoint | timedelta:
        if isinstance(other, timedelta):
            return TimePoint(self._moment - other)
        if isinstance(other, TimePoint):
            return self._moment - other._moment
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self._moment == other._moment

    def __lt__(self, other: TimePoint) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self._moment < other._moment

    def __hash__(self) -> int:
        return hash(self._moment)

    def second(self) -> int:
        """Seconds of the minute, local time."""
        return self._local().second

    def minute(self) -> int:
        """Minutes of the hour, local time."""
        return self._local().minute

    def hour(self) -> int:
        """Hour of the day, local time."""
        return self._local().hour

    def day(self) -> int:
        """Day of the month, local time."""
        return self._local().day

    def month(self) -> int:
        """Month of the year, 1 to 12, local time."""
        return self._local().month

    def year(self) -> int:
        """Calendar year, local time."""
        return self._local().year


class Clock:
    """The system clock."""

    def now(self) -> TimePoint:
        """The current instant."""
        return TimePoint(datetime.now(timezone.utc))