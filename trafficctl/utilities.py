"""Validation and parsing of text fields received from the host."""

from __future__ import annotations

from trafficctl.shortdata import ShortDate, ShortTime

_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_U32 = 0xFFFFFFFF


def valid_iso8601(text: str) -> bool:
    """True for an exact ``YYYY-MM-DDThh:mm:ss`` that names a real date and time."""
    if len(text) != 19:
        return False
    for i, ch in enumerate(text):
        if i in (4, 7):
            expected_ok = ch == "-"
        elif i == 10:
            expected_ok = ch == "T"
        elif i in (13, 16):
            expected_ok = ch == ":"
        else:
            expected_ok = ch in _DIGITS
        if not expected_ok:
            return False

    year = int(text[0:4])
    month = int(text[5:7])
    day = int(text[8:10])
    if not ShortDate.valid_date((year - 2000) & 0xFF, month, day):
        return False
    return ShortTime.valid_time(int(text[11:13]), int(text[14:16]), int(text[17:19]))


def parse_hex_u32(text: str) -> int:
    """Parse 1 to 8 hexadecimal digits; raises ValueError otherwise."""
    if not 0 < len(text) <= 8:
        raise ValueError(f"hex value must have 1 to 8 digits: {text!r}")
    if not set(text) <= _HEX_DIGITS:
        raise ValueError(f"not a hexadecimal number: {text!r}")
    return int(text, 16)


def parse_u32(text: str) -> int:
    """Parse 1 to 10 decimal digits fitting in 32 bits; raises ValueError otherwise."""
    if not 0 < len(text) <= 10:
        raise ValueError(f"number must have 1 to 10 digits: {text!r}")
    if not set(text) <= _DIGITS:
        raise ValueError(f"not a decimal number: {text!r}")
    value = int(text)
    if value > _U32:
        raise ValueError(f"number exceeds 32 bits: {text!r}")
    return value