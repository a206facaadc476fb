"""Register-level access to a device on an I2C bus."""

from __future__ import annotations

from typing import Protocol

DEFAULT_MAX_BUFFER_SIZE = 32


class Wire(Protocol):
    """The I2C bus operations a device needs."""

    def begin(self) -> None: ...

    def end(self) -> None: ...

    def begin_transmission(self, address: int) -> None: ...

    def write(self, data: bytes) -> int:
        """Queue bytes for the open transmission; return how many were queued."""
        ...

    def end_transmission(self, stop: bool = True) -> int:
        """Send the queued bytes; return 0 on success, a bus status otherwise."""
        ...

    def request_from(self, address: int, length: int, stop: bool = True) -> int:
        """Read up to ``length`` bytes into the receive buffer; return the count."""
        ...

    def read(self) -> int:
        """Next byte from the receive buffer."""
        ...

    def set_clock(self, frequency: int) -> None: ...


class I2CError(OSError):
    """A transfer on the bus failed."""


class I2CDevice:
    """One device at a fixed 7-bit address on a bus."""

    def __init__(self, address: int, wire: Wire) -> None:
        self._address = address
        self._wire = wire
        self._begun = False
        self.max_buffer_size = DEFAULT_MAX_BUFFER_SIZE

    @property
    def address(self) -> int:
        """The 7-bit address of the device."""
        return self._address

    def begin(self, addr_detect: bool = True) -> bool:
        """Start the bus; with ``addr_detect`` also check that the device answers."""
        self._wire.begin()
        self._begun = True
        if addr_detect:
            return self.detected()
        return True

    def end(self) -> None:
        """Release the bus."""
        self._wire.end()
        self._begun = False

    def detected(self) -> bool:
        """True if the device acknowledges its address."""
        if not self._begun and not self.begin(addr_detect=False):
            return False
        self._wire.begin_transmission(self._address)
        return self._wire.end_transmission() == 0

    def write(self, data: bytes, stop: bool = True, prefix: bytes = b"") -> None:
        """Write ``prefix`` then ``data`` in one transaction.

        Raises I2CError if the bytes do not fit the bus buffer or the device
        does not acknowledge.
        """
        data = bytes(data)
        prefix = bytes(prefix)
        if len(data) + len(prefix) > self.max_buffer_size:
            raise I2CError(
                f"{len(data) + len(prefix)} bytes exceed the bus buffer of "
                f"{self.max_buffer_size}"
            )
        self._wire.begin_transmission(self._address)
        if prefix and self._wire.write(prefix) != len(prefix):
            raise I2CError("prefix was not queued completely")
        if self._wire.write(data) != len(data):
            raise I2CError("data was not queued completely")
        status = self._wire.end_transmission(stop)
        if status != 0:
            raise I2CError(f"write to 0x{self._address:02X} failed with status {status}")

    def read(self, length: int, stop: bool = True) -> bytes:
        """Read ``length`` bytes, in chunks no larger than the bus buffer.

        Only the last chunk ends with ``stop``. Raises I2CError on a short read.
        """
        result = bytearray()
        while len(result) < length:
            chunk = min(length - len(result), self.max_buffer_size)
            last = len(result) + chunk >= length
            result += self._read_chunk(chunk, stop if last else False)
        return bytes(result)

    def _read_chunk(self, length: int, stop: bool) -> bytes:
        received = self._wire.request_from(self._address, length, stop)
        if received != length:
            raise I2CError(
                f"read from 0x{self._address:02X} returned {received} of {length} bytes"
            )
        return bytes(self._wire.read() for _ in range(length))

    def write_then_read(self, data: bytes, read_length: int, stop: bool = False) -> bytes:
        """Write ``data``, then read ``read_length`` bytes back."""
        self.write(data, stop)
        return self.read(read_length)

    def set_speed(self, clock: int) -> bool:
        """Ask the bus for an SCL frequency in hertz."""
        self._wire.set_clock(clock)
        return True