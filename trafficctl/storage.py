"""Configuration storage and clock used by the command handler."""

from __future__ import annotations

from dataclasses import dataclass, field

from trafficctl.rtc_datetime import DateTime

MAX_BYTES_EEPROM = 65535
ERASED_BYTE = 0xFF
I2C_NACK_TIME = 25
I2C_SPEED_CLOCK = 400000


class MemoryEeprom:
    """An EEPROM held in memory; erased cells read 0xFF."""

    def __init__(self, size: int = MAX_BYTES_EEPROM) -> None:
        if size <= 0:
            raise ValueError(f"size must be positive: {size}")
        self._cells = bytearray([ERASED_BYTE]) * size

    def __len__(self) -> int:
        return len(self._cells)

    def _check_range(self, address: int, length: int) -> None:
        if address < 0 or length < 0 or address + length > len(self._cells):
            raise ValueError(
                f"range {address}..{address + length} outside 0..{len(self._cells)}"
            )

    @staticmethod
    def _check_value(value: int) -> None:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte out of range 0..255: {value}")

    def write_block(self, address: int, data: bytes) -> None:
        """Write ``data`` starting at ``address``."""
        self._check_range(address, len(data))
        self._cells[address:address + len(data)] = data

    def update_byte(self, address: int, value: int) -> bool:
        """Write one byte only if it differs; return whether it was written."""
        self._check_value(value)
        self._check_range(address, 1)
        if self._cells[address] == value:
            return False
        self._cells[address] = value
        return True

    def set_block(self, address: int, value: int, length: int) -> None:
        """Fill ``length`` bytes with ``value``."""
        self._check_value(value)
        self._check_range(address, length)
        self._cells[address:address + length] = bytes([value]) * length

    def read_block(self, address: int, length: int) -> bytes:
        """Read ``length`` bytes starting at ``address``."""
        self._check_range(address, length)
        return bytes(self._cells[address:address + length])


@dataclass
class StaticClock:
    """A clock that reports a fixed time until it is adjusted."""

    current: DateTime = field(default_factory=lambda: DateTime(2024, 10, 16))

    def now(self) -> DateTime:
        return self.current

    def adjust(self, dt: DateTime) -> None:
        self.current = dt