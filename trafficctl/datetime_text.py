"""Text forms of :class:`DateTime`: parsing and formatting."""

from __future__ import annotations

import enum

from trafficctl.rtc_datetime import DateTime

_DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_ISO_REFERENCE = "2000-01-01T00:00:00"


class TimestampFormat(enum.Enum):
    """Layouts produced by :func:`timestamp`."""

    FULL = "full"  # YYYY-MM-DDThh:mm:ss
    TIME = "time"  # hh:mm:ss
    DATE = "date"  # YYYY-MM-DD


def _conv2d(text: str, pos: int) -> int:
    """Two characters to a number; a non-digit first character counts as 0."""
    if pos + 2 > len(text):
        raise ValueError(f"text too short for a two-digit field at {pos}: {text!r}")
    first, second = text[pos], text[pos + 1]
    tens = ord(first) - ord("0") if "0" <= first <= "9" else 0
    return (10 * tens + ord(second) - ord("0")) & 0xFF


def _month_from_name(date: str) -> int:
    first = date[0]
    if first == "J":
        if date[1] == "a":
            return 1
        return 6 if date[2] == "n" else 7
    if first == "F":
        return 2
    if first == "A":
        return 4 if date[2] == "r" else 8
    if first == "M":
        return 3 if date[2] == "r" else 5
    simple = {"S": 9, "O": 10, "N": 11, "D": 12}
    try:
        return simple[first]
    except KeyError:
        raise ValueError(f"unrecognised month in {date!r}") from None


def parse_compiler_datetime(date: str, time: str) -> DateTime:
    """Parse a build stamp such as ``("Apr 16 2020", "18:34:56")``."""
    if len(date) < 11:
        raise ValueError(f"date must look like 'Mmm dd yyyy': {date!r}")
    if len(time) < 8:
        raise ValueError(f"time must look like 'hh:mm:ss': {time!r}")
    year_offset = _conv2d(date, 9)
    month = _month_from_name(date)
    day = _conv2d(date, 4)
    return DateTime(
        year_offset, month, day, _conv2d(time, 0), _conv2d(time, 3), _conv2d(time, 6)
    )


def parse_iso8601(text: str) -> DateTime:
    """Parse ``YYYY-MM-DDThh:mm:ss``; missing trailing parts default to 2000-01-01T00:00:00.

    Only the last two digits of the year are used.
    """
    n = min(len(_ISO_REFERENCE), len(text))
    ref = text[:n] + _ISO_REFERENCE[n:]
    return DateTime(
        _conv2d(ref, 2),
        _conv2d(ref, 5),
        _conv2d(ref, 8),
        _conv2d(ref, 11),
        _conv2d(ref, 14),
        _conv2d(ref, 17),
    )


def _two_digits(value: int) -> list[str]:
    return [chr(ord("0") + value // 10), chr(ord("0") + value % 10)]


def format_datetime(dt: DateTime, pattern: str) -> str:
    """Replace the specifiers in ``pattern`` with fields of ``dt``.

    Specifiers: YYYY, YY, MM, MMM, DD, DDD, hh, mm, ss, AP, ap. When AP or ap
    appears, hh is written in 12-hour form. Other characters are kept.
    """
    buf = list(pattern)
    ap_tag = "ap" in pattern or "AP" in pattern
    hour12, pm = 0, False
    if ap_tag:
        hour12 = dt.twelve_hour()
        pm = dt.is_pm()

    def at(i: int) -> str:
        return buf[i] if i < len(buf) else ""

    for i in range(len(buf) - 1):
        if at(i) == "h" and at(i + 1) == "h":
            buf[i:i + 2] = _two_digits(hour12 if ap_tag else dt.hour)
        if at(i) == "m" and at(i + 1) == "m":
            buf[i:i + 2] = _two_digits(dt.minute)
        if at(i) == "s" and at(i + 1) == "s":
            buf[i:i + 2] = _two_digits(dt.second)
        if at(i) == "D" and at(i + 1) == "D" and at(i + 2) == "D":
            buf[i:i + 3] = list(_DAY_NAMES[dt.day_of_the_week()])
        elif at(i) == "D" and at(i + 1) == "D":
            buf[i:i + 2] = _two_digits(dt.day)
        if at(i) == "M" and at(i + 1) == "M" and at(i + 2) == "M":
            if not 1 <= dt.month <= 12:
                raise ValueError(f"month {dt.month} has no name")
            buf[i:i + 3] = list(_MONTH_NAMES[dt.month - 1])
        elif at(i) == "M" and at(i + 1) == "M":
            buf[i:i + 2] = _two_digits(dt.month)
        yoff = dt.year_offset
        if at(i) == "Y" and at(i + 1) == "Y" and at(i + 2) == "Y" and at(i + 3) == "Y":
            buf[i:i + 4] = ["2", "0"] + _two_digits((yoff // 10) % 10 * 10 + yoff % 10)
        elif at(i) == "Y" and at(i + 1) == "Y":
            buf[i:i + 2] = _two_digits((yoff // 10) % 10 * 10 + yoff % 10)
        if at(i) == "A" and at(i + 1) == "P":
            buf[i:i + 2] = ["P", "M"] if pm else ["A", "M"]
        elif at(i) == "a" and at(i + 1) == "p":
            buf[i:i + 2] = ["p", "m"] if pm else ["a", "m"]
    return "".join(buf)


def timestamp(dt: DateTime, opt: TimestampFormat = TimestampFormat.FULL) -> str:
    """ISO 8601 text for the date, the time, or both."""
    if opt is TimestampFormat.TIME:
        return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    if opt is TimestampFormat.DATE:
        return f"{dt.year}-{dt.month:02d}-{dt.day:02d}"
    return (
        f"{dt.year}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )