import pytest

from trafficctl.rtc_datetime import DateTime
from trafficctl.storage import ERASED_BYTE, MemoryEeprom, StaticClock


def test_fresh_memory_is_erased():
    eeprom = MemoryEeprom(64)
    assert eeprom.read_block(0, 64) == bytes([ERASED_BYTE]) * 64


def test_write_read_round_trip():
    eeprom = MemoryEeprom(64)
    eeprom.write_block(10, b"\x01\x02\x03")
    assert eeprom.read_block(10, 3) == b"\x01\x02\x03"
    assert eeprom.read_block(9, 1) == bytes([ERASED_BYTE])
    assert eeprom.read_block(13, 1) == bytes([ERASED_BYTE])


def test_update_byte_writes_only_changes():
    eeprom = MemoryEeprom(16)
    assert eeprom.update_byte(3, 0x0E) is True
    assert eeprom.update_byte(3, 0x0E) is False
    assert eeprom.read_block(3, 1) == b"\x0e"


def test_set_block():
    eeprom = MemoryEeprom(16)
    eeprom.write_block(0, bytes(16))
    eeprom.set_block(4, ERASED_BYTE, 5)
    data = eeprom.read_block(0, 16)
    assert data[4:9] == bytes([ERASED_BYTE]) * 5
    assert data[:4] == bytes(4)
    assert data[9:] == bytes(7)


@pytest.mark.parametrize(
    "call",
    [
        lambda e: e.write_block(15, b"ab"),
        lambda e: e.read_block(-1, 1),
        lambda e: e.set_block(0, 256, 1),
        lambda e: e.update_byte(16, 0),
        lambda e: e.update_byte(0, -1),
    ],
)
def test_out_of_range(call):
    with pytest.raises(ValueError):
        call(MemoryEeprom(16))


def test_length():
    assert len(MemoryEeprom(128)) == 128


def test_static_clock():
    clock = StaticClock()
    assert clock.now() == DateTime(2024, 10, 16)
    clock.adjust(DateTime(2025, 1, 2, 3, 4, 5))
    assert clock.now() == DateTime(2025, 1, 2, 3, 4, 5)