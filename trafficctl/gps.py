"""Time synchronisation from an RYS8833 GNSS receiver over a serial port."""

from __future__ import annotations

import logging
import re
import time as _time
from typing import Callable, Optional, Protocol

from trafficctl.datetime_text import timestamp
from trafficctl.rtc_datetime import DateTime, TimeSpan

log = logging.getLogger(__name__)

GPS_BAUDRATE = 115200
GPS_TIMEOUT = 0.1
"""Port read timeout in seconds."""

# Earliest date accepted as a real fix (UTC).
GPS_DT_REFERENCE = DateTime(2024, 1, 1, 0, 0, 0)

_CMD_STOP = "@GSTP"
_CMD_CONFIGURE = ("@ABUP 0", "@BSSL 0x80", "@GNS 0x3F")
_CMD_COLD_START = "@GCD"
_STOP_DONE = "[GSTP] Done"

# Local time is UTC-6.
_UTC_OFFSET = TimeSpan.from_parts(0, 6, 0, 0)

_ATOI_RE = re.compile(r"\s*([+-]?\d+)")
_ATOF_RE = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_STRTOUL_HEX_RE = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


class SerialPort(Protocol):
    """What the receiver driver needs from a serial port."""

    def open(self) -> None: ...

    def close(self) -> None: ...

    def write(self, data: str) -> None: ...

    def available(self) -> bool: ...

    def read(self) -> str: ...


def _substring(text: str, left: int, right: Optional[int] = None) -> str:
    if right is None:
        right = len(text)
    if left > right:
        left, right = right, left
    if left > len(text):
        return ""
    return text[left:min(right, len(text))]


def _atoi(text: str) -> int:
    match = _ATOI_RE.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _ATOF_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _strtoul_hex(text: str) -> int:
    match = _STRTOUL_HEX_RE.match(text)
    digits = match.group(2) if match else ""
    value = int(digits, 16) if digits else 0
    if match and match.group(1) == "-":
        value = -value
    return value


def nmea_checksum(body: str) -> int:
    """XOR of the characters between ``$`` and ``*``."""
    result = 0
    for ch in body:
        result ^= ord(ch)
    return result & 0xFF


def parse_zda(sentence: str, reference: DateTime = GPS_DT_REFERENCE) -> DateTime:
    """Decode a ``$GNZDA`` sentence into local (UTC-6) time.

    The sentence must end with CR LF and carry a valid checksum. Raises
    ValueError when it is malformed, the checksum differs, or the year is
    earlier than ``reference``.
    """
    start = sentence.find("$")
    end = sentence.find("\r\n")
    if start == -1 or end == -1:
        raise ValueError("sentence has no '$' or no CR LF")
    aux = _substring(sentence, start, end)

    star = aux.find("*")
    if star == -1:
        raise ValueError("sentence has no checksum")
    expected = _strtoul_hex(_substring(aux, star + 1)) & 0xFF

    # The body offset is taken from the unsliced input.
    body = _substring(aux, start + 1, star)
    if nmea_checksum(body) != expected:
        raise ValueError("checksum mismatch")

    hour = minute = second = day = month = year = 0
    field = ""
    count = 0
    for ch in body:
        if ch != ",":
            field += ch
            continue
        if count == 1:
            utc = int(_atof(field)) & 0xFFFFFFFF
            hour = (utc // 10000) & 0xFF
            minute = (utc // 100) % 100
            second = utc % 100
        elif count == 2:
            day = _atoi(field) & 0xFF
        elif count == 3:
            month = _atoi(field) & 0xFF
        elif count == 4:
            year = _atoi(field) & 0xFFFF
        count += 1
        field = ""

    if year < reference.year:
        raise ValueError(f"year {year} is before {reference.year}")
    utc_dt = DateTime(year, month, day, hour, minute, second)
    local = utc_dt - _UTC_OFFSET
    log.debug("GPS time %s, local %s", timestamp(utc_dt), timestamp(local))
    return local


class RYS8833:
    """Driver that queries the receiver for date and time."""

    def __init__(
        self,
        port: Optional[SerialPort],
        timeout: float = GPS_TIMEOUT,
        sleep: Callable[[float], None] = _time.sleep,
        clock: Callable[[], float] = _time.monotonic,
    ) -> None:
        self._port = port
        self._timeout = timeout
        self._sleep = sleep
        self._clock = clock
        self._port_open = False
        self._initialised = False
        self._gps_datetime = DateTime(0, 0, 0)

    def _send_command(self, command: str) -> None:
        self._port.write(command + "\r\n")
        self._sleep(0.010)

    def _read_response(self) -> Optional[str]:
        """Wait up to the port timeout for data; None if nothing arrived."""
        started = self._clock()
        while True:
            if self._port.available():
                return self._port.read()
            if self._clock() - started >= self._timeout:
                return None
            self._sleep(0.001)

    def begin(self) -> bool:
        """Open the port, let the receiver start, and check that it answers."""
        if self._port is None:
            return False
        self._port.open()
        self._port_open = True
        self._sleep(1.0)
        log.debug("Complete initialized")
        return self.is_connected()

    def is_connected(self) -> bool:
        """Stop positioning and confirm that the receiver acknowledged it."""
        self._send_command(_CMD_STOP)
        response = self._read_response()
        return response is not None and _STOP_DONE in response

    def configure(self) -> None:
        """Send the configuration commands."""
        for command in _CMD_CONFIGURE:
            self._send_command(command)
            self._read_response()

    def cold_init(self) -> None:
        """Cold-start positioning."""
        self._send_command(_CMD_COLD_START)
        self._read_response()
        self._initialised = True

    def sync(self, max_timeout: float) -> bool:
        """Wait up to ``max_timeout`` seconds for a valid time sentence.

        On failure the port is closed.
        """
        if not self._port_open:
            self._port.open()
            self._port_open = True
        if not self._initialised:
            self.cold_init()

        started = self._clock()
        while True:
            response = self._read_response()
            if response is not None:
                try:
                    self._gps_datetime = parse_zda(response)
                except ValueError:
                    pass
                else:
                    return True
            if self._clock() - started >= max_timeout:
                break
            self._sleep(0.001)
        self._port.close()
        self._port_open = False
        return False

    def sync_datetime(self) -> DateTime:
        """Local date and time from the last successful :meth:`sync`."""
        return self._gps_datetime