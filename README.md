# trafficctl

Building blocks for a traffic-light controller, written as a plain Python
package with no third-party dependencies.

## What is in it

- **`trafficctl.rtc_datetime`** — `DateTime` and `TimeSpan`. A `DateTime`
  holds a date from 2000 to 2099 with one-second resolution; it converts to
  and from Unix time (`unixtime()`, `DateTime.from_unixtime()`), gives the
  day of the week, supports `+`/`-` with a `TimeSpan` and comparison.
  Out-of-range fields wrap rather than raise; check with `is_valid()`.
- **`trafficctl.datetime_text`** — `parse_iso8601()`,
  `parse_compiler_datetime()` (for strings like `"Apr 16 2020"`,
  `"18:34:56"`), `format_datetime()` with specifiers such as `YYYY`, `MMM`,
  `DDD`, `hh`, `AP`, and `timestamp()` with a `TimestampFormat` of `FULL`,
  `TIME` or `DATE`.
- **`trafficctl.shortdata`** — `ShortTime`, `ShortDate` and `Horary`:
  compact times of day, two-digit-year dates (packed to 32 bits with
  `to_u32()` / `ShortDate.from_u32()`) and daily intervals.
- **`trafficctl.utilities`** — `valid_iso8601()`, `parse_hex_u32()` and
  `parse_u32()` for checking text fields; the parsers raise `ValueError`.
- **`trafficctl.framing`** — `encode_frame()` and `decode_frame()` for frames
  of the form `payload|checksum`, where the checksum is the byte sum of the
  payload modulo 256 and must be positive. A bad checksum raises
  `ChecksumError`; an empty, too short or malformed frame raises
  `TransmissionError`. Both are `FrameError`s and carry an `error_code`.
- **`trafficctl.mac`** — `format_mac()` renders six octets as
  `XX:XX:XX:XX:XX:XX`.
- **`trafficctl.storage`** — `MemoryEeprom`, an in-memory EEPROM whose
  erased cells read `0xFF` (`write_block`, `update_byte`, `set_block`,
  `read_block`), and `StaticClock`, a clock fixed at a given `DateTime`
  until `adjust()` is called.
- **`trafficctl.modes`** — `ModeController` runs a one-shot watchdog while
  the configuration or update mode is active. On expiry it sends
  `<N_C_TO>` through the `send` callback and calls `restart`.
  `refresh_config_timer()` starts the interval over; `enter_bootloader()`
  calls the bootloader callback, or `restart` if none was given.
- **`trafficctl.gps`** — `RYS8833` drives a GNSS receiver through any object
  with `open`, `close`, `write`, `available` and `read`. `sync()` waits for a
  `$GNZDA` sentence; `parse_zda()` checks its checksum (`nmea_checksum()`)
  and returns local time at UTC-6.
- **`trafficctl.i2c_device`** — `I2CDevice` performs writes and chunked reads
  on any object that follows the `Wire` protocol; failures raise `I2CError`.
- **`trafficctl.debounce`** — `Input` debounces a boolean input and reports
  `InputState.PUSH`, `PRESSED`, `RELEASE` or `NOT_PRESSED`.
- **`trafficctl.safe_values`** — `SafeValue`, a value guarded by a lock.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from trafficctl.rtc_datetime import DateTime, TimeSpan
from trafficctl.datetime_text import format_datetime

start = DateTime(2024, 10, 16, 8, 30, 0)
later = start + TimeSpan(3600)
print(later.unixtime() - start.unixtime())   # 3600
print(start.day_of_the_week())               # 3 (Wednesday)

print(format_datetime(DateTime(2020, 4, 16, 18, 34, 56),
                      "DDD, DD MMM YYYY hh:mm:ss"))
# Thu, 16 Apr 2020 18:34:56
```

```python
from trafficctl.framing import encode_frame, decode_frame

frame = encode_frame("<SG>")
print(frame)                 # <SG>|20
print(decode_frame(frame))   # <SG>
```

## What it does not do

The package has no command line and no decoder for the controller's text
commands (`<SG>`, `<SG+TIME>` and the like): framing is checked, but nothing
interprets the payload or replies to it. It has no model for light sequences
or events and no layout of where configuration lives in the EEPROM;
`MemoryEeprom` is plain byte storage. It has no driver for a particular
real-time clock chip, only the generic `I2CDevice`.