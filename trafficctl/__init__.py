"""Traffic-light controller logic: time handling, serial framing, GPS sync and storage."""

__version__ = "2.2.2"

__all__ = [
    "datetime_text",
    "debounce",
    "framing",
    "gps",
    "i2c_device",
    "mac",
    "modes",
    "rtc_datetime",
    "safe_values",
    "shortdata",
    "storage",
    "utilities",
]