"""Checksummed frames exchanged with the host: ``payload|checksum``.

The checksum is the decimal sum of the payload bytes modulo 256 and must be
greater than zero.
"""

from __future__ import annotations

import re
from typing import Union

CHECKSUM_SEPARATOR = "|"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class FrameError(ValueError):
    """A received frame could not be accepted.

    ``error_code`` is the index of the error reply sent back to the host.
    """

    error_code = 1


class TransmissionError(FrameError):
    """The frame is empty, too short, or starts with the separator."""

    error_code = 1


class ChecksumError(FrameError):
    """The checksum is missing, zero, or does not match the payload."""

    error_code = 0


def _checksum(payload: str) -> int:
    return sum(payload.encode("utf-8")) & 0xFF


def decode_frame(raw: Union[str, bytes]) -> str:
    """Check a received frame and return its payload."""
    text = raw.decode("latin-1") if isinstance(raw, bytes) else raw
    if not text:
        raise TransmissionError("empty frame")
    sep = text.find(CHECKSUM_SEPARATOR)
    if sep == 0:
        raise TransmissionError("frame starts with the checksum separator")
    if len(text) <= 3:
        raise TransmissionError(f"frame too short: {text!r}")
    if sep == -1:
        raise ChecksumError(f"frame has no checksum: {text!r}")

    match = _LEADING_INT.match(text[sep + 1:])
    expected = int(match.group(1)) if match else 0
    if expected <= 0:
        raise ChecksumError(f"checksum missing or not positive: {text!r}")

    payload = text[:sep]
    if _checksum(payload) != expected:
        raise ChecksumError(f"checksum mismatch in {text!r}")
    return payload


def encode_frame(payload: str) -> str:
    """Append the checksum to ``payload``.

    Raises ValueError when the checksum would be zero, which no receiver accepts.
    """
    checksum = _checksum(payload)
    if checksum == 0:
        raise ValueError(f"payload has a zero checksum: {payload!r}")
    return f"{payload}{CHECKSUM_SEPARATOR}{checksum}"