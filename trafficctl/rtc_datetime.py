"""Calendar date/time and signed time span with one-second resolution.

Dates cover 2000-01-01 to 2099-12-31. Fields are stored in the same widths
as the RTC registers, so out-of-range inputs wrap instead of raising; use
:meth:`DateTime.is_valid` to check a constructed value.
"""

from __future__ import annotations

import functools

SECONDS_PER_DAY = 86400
SECONDS_FROM_1970_TO_2000 = 946684800

# January to November; December is never needed by the arithmetic below.
_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30)

_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


def _wrap_int32(value: int) -> int:
    value &= _U32
    return value - (1 << 32) if value >= (1 << 31) else value


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def _date2days(year: int, month: int, day: int) -> int:
    """Days since 2000-01-01 for the given date."""
    year &= _U16
    if year >= 2000:
        year -= 2000
    days = day + sum(_DAYS_IN_MONTH[: max(month - 1, 0)])
    if month > 2 and year % 4 == 0:
        days += 1
    return (days + 365 * year + (year + 3) // 4 - 1) & _U16


def _time2ulong(days: int, hour: int, minute: int, second: int) -> int:
    return (((days * 24 + hour) * 60 + minute) * 60 + second) & _U32


class TimeSpan:
    """A signed duration in whole seconds (32-bit)."""

    __slots__ = ("_seconds",)

    def __init__(self, seconds: int = 0) -> None:
        self._seconds = _wrap_int32(seconds)

    @classmethod
    def from_parts(cls, days: int, hours: int, minutes: int, seconds: int) -> "TimeSpan":
        """Build a span from days, hours, minutes and seconds."""
        return cls(days * SECONDS_PER_DAY + hours * 3600 + minutes * 60 + seconds)

    def days(self) -> int:
        """Whole days in the span."""
        return _trunc_div(self._seconds, SECONDS_PER_DAY)

    def hours(self) -> int:
        """Hours part, not counting whole days."""
        return _trunc_mod(_trunc_div(self._seconds, 3600), 24)

    def minutes(self) -> int:
        """Minutes part, not counting whole hours."""
        return _trunc_mod(_trunc_div(self._seconds, 60), 60)

    def seconds(self) -> int:
        """Seconds part, not counting whole minutes."""
        return _trunc_mod(self._seconds, 60)

    def total_seconds(self) -> int:
        """The whole span in seconds."""
        return self._seconds

    def __add__(self, other: object) -> "TimeSpan":
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self._seconds + other._seconds)

    def __sub__(self, other: object) -> "TimeSpan":
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return TimeSpan(self._seconds - other._seconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._seconds == other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __repr__(self) -> str:
        return f"TimeSpan({self._seconds})"


@functools.total_ordering
class DateTime:
    """Broken-down date and time without time zones or leap seconds."""

    __slots__ = ("_yoff", "_month", "_day", "_hour", "_minute", "_second")

    def __init__(
        self,
        year: int = 2000,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
    ) -> None:
        year &= _U16
        if year >= 2000:
            year -= 2000
        self._yoff = year & _U8
        self._month = month & _U8
        self._day = day & _U8
        self._hour = hour & _U8
        self._minute = minute & _U8
        self._second = second & _U8

    @classmethod
    def from_unixtime(cls, t: int = SECONDS_FROM_1970_TO_2000) -> "DateTime":
        """Build a DateTime from seconds since 1970-01-01 00:00:00."""
        t = (t - SECONDS_FROM_1970_TO_2000) & _U32
        second = t % 60
        t //= 60
        minute = t % 60
        t //= 60
        hour = t % 24
        days = (t // 24) & _U16

        yoff = 0
        while True:
            leap = 1 if yoff % 4 == 0 else 0
            if days < 365 + leap:
                break
            days -= 365 + leap
            yoff += 1

        for month in range(1, 12):
            per_month = _DAYS_IN_MONTH[month - 1] + (1 if leap and month == 2 else 0)
            if days < per_month:
                break
            days -= per_month
        else:
            month = 12

        return cls(yoff, month, days + 1, hour, minute, second)

    @property
    def year(self) -> int:
        return 2000 + self._yoff

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def year_offset(self) -> int:
        """Years since 2000."""
        return self._yoff

    def is_valid(self) -> bool:
        """True if the fields describe a real date and time in range."""
        if self._yoff >= 100:
            return False
        return self._key() == DateTime.from_unixtime(self.unixtime())._key()

    def twelve_hour(self) -> int:
        """Hour in 12-hour form (1..12)."""
        if self._hour in (0, 12):
            return 12
        if self._hour > 12:
            return self._hour - 12
        return self._hour

    def is_pm(self) -> bool:
        return self._hour >= 12

    def day_of_the_week(self) -> int:
        """Day of week from 0 (Sunday) to 6 (Saturday)."""
        return (_date2days(self._yoff, self._month, self._day) + 6) % 7

    def secondstime(self) -> int:
        """Seconds since 2000-01-01 00:00:00."""
        days = _date2days(self._yoff, self._month, self._day)
        return _time2ulong(days, self._hour, self._minute, self._second)

    def unixtime(self) -> int:
        """Seconds since 1970-01-01 00:00:00."""
        return (self.secondstime() + SECONDS_FROM_1970_TO_2000) & _U32

    def _key(self) -> tuple[int, int, int, int, int, int]:
        return (self._yoff, self._month, self._day, self._hour, self._minute, self._second)

    def __add__(self, span: object) -> "DateTime":
        if not isinstance(span, TimeSpan):
            return NotImplemented
        return DateTime.from_unixtime((self.unixtime() + span.total_seconds()) & _U32)

    def __sub__(self, other: object):
        if isinstance(other, TimeSpan):
            return DateTime.from_unixtime((self.unixtime() - other.total_seconds()) & _U32)
        if isinstance(other, DateTime):
            return TimeSpan(self.unixtime() - other.unixtime())
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() < other._key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"DateTime({self.year}, {self._month}, {self._day}, "
            f"{self._hour}, {self._minute}, {self._second})"
        )