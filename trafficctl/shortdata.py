"""Compact time-of-day, date and daily schedule values."""

from __future__ import annotations

from dataclasses import dataclass

MAX_MINUTES_OF_DAY = 1440
MAX_SECONDS_OF_DAY = 86400

_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


@dataclass(frozen=True, order=True)
class ShortTime:
    """Time of day as hour, minute and second (one byte each)."""

    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "hour", self.hour & _U8)
        object.__setattr__(self, "minute", self.minute & _U8)
        object.__setattr__(self, "second", self.second & _U8)

    @classmethod
    def from_minutes(cls, minutes: int) -> "ShortTime":
        """Time from minutes after midnight (0..1439); seconds are zero."""
        if not 0 <= minutes < MAX_MINUTES_OF_DAY:
            raise ValueError(f"minutes out of range 0..1439: {minutes}")
        return cls(minutes // 60, minutes % 60, 0)

    @classmethod
    def from_seconds(cls, seconds: int) -> "ShortTime":
        """Time from seconds; whole days are dropped."""
        seconds &= _U32
        hours = (seconds // 3600) % 24
        seconds %= 3600
        return cls(hours, seconds // 60, seconds % 60)

    def to_minutes(self) -> int:
        """Minutes after midnight, ignoring seconds."""
        return (self.hour * 60 + self.minute) & _U16

    def total_seconds(self) -> int:
        """Seconds after midnight."""
        return self.hour * 3600 + self.minute * 60 + self.second

    def plus_seconds(self, seconds: int) -> "ShortTime":
        """This time moved forward by ``seconds``, wrapping at midnight."""
        total = ((self.total_seconds() + seconds) & _U32) % MAX_SECONDS_OF_DAY
        return ShortTime.from_seconds(total)

    def is_valid(self) -> bool:
        """True if every field is within its range."""
        return ShortTime.valid_time(self.hour, self.minute, self.second)

    @staticmethod
    def valid_time(hour: int, minute: int, second: int) -> bool:
        """True for 0..23 hours, 0..59 minutes and 0..59 seconds."""
        return (
            0 <= hour & _U8 <= 23
            and 0 <= minute & _U8 <= 59
            and 0 <= second & _U8 <= 59
        )

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


@dataclass(frozen=True, order=True)
class ShortDate:
    """Date with a two-digit year (years since 2000)."""

    year: int = 24
    month: int = 1
    day: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "year", self.year & _U8)
        object.__setattr__(self, "month", self.month & _U8)
        object.__setattr__(self, "day", self.day & _U8)

    @classmethod
    def from_u32(cls, value: int) -> "ShortDate":
        """Unpack ``year << 24 | month << 16 | day``; raises ValueError if invalid."""
        value &= _U32
        year = (value >> 24) & _U8
        month = (value >> 16) & _U8
        day = value & _U8
        if not cls.valid_date(year, month, day):
            raise ValueError(f"invalid date {year:02d}/{month:02d}/{day:02d}")
        return cls(year, month, day)

    def to_u32(self) -> int:
        """Pack as ``year << 24 | month << 16 | day``."""
        return (self.year << 24) | (self.month << 16) | self.day

    @staticmethod
    def valid_date(year: int, month: int, day: int) -> bool:
        """True if the date exists; year 0 is rejected."""
        year &= _U8
        month &= _U8
        day &= _U8
        if year < 1 or month < 1 or month > 12 or day < 1:
            return False
        days = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
        if (year % 4 == 0 and year % 100 != 0) or year % 400 == 0:
            days[1] = 29
        return day <= days[month - 1]

    def is_valid(self) -> bool:
        return ShortDate.valid_date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:02d}/{self.month:02d}/{self.day:02d}"


@dataclass(frozen=True)
class Horary:
    """A daily interval between two times."""

    start: ShortTime = ShortTime()
    end: ShortTime = ShortTime()

    def contains(self, time: ShortTime) -> bool:
        """True when ``time`` is later than the end and earlier than the start."""
        return self.start > time and self.end < time

    @classmethod
    def from_buffer(cls, data: bytes) -> "Horary":
        """Read start and end minutes, each two bytes little-endian."""
        if len(data) < 4:
            raise ValueError("horary buffer needs 4 bytes")
        start = ShortTime.from_minutes(int.from_bytes(data[0:2], "little"))
        end = ShortTime.from_minutes(int.from_bytes(data[2:4], "little"))
        return cls(start, end)

    def is_valid(self) -> bool:
        """True if both times are valid and the start comes before the end."""
        return self.start.is_valid() and self.end.is_valid() and self.start < self.end