"""Controller MAC address."""

from __future__ import annotations

from typing import Iterable

MAC_LENGTH = 6
DEFAULT_MAC = bytes(MAC_LENGTH)


def format_mac(octets: Iterable[int] = DEFAULT_MAC) -> str:
    """Format six octets as ``XX:XX:XX:XX:XX:XX`` in upper-case hex."""
    values = list(octets)
    if len(values) != MAC_LENGTH:
        raise ValueError(f"a MAC address has {MAC_LENGTH} octets, got {len(values)}")
    if any(not 0 <= v <= 0xFF for v in values):
        raise ValueError(f"octet out of range 0..255 in {values}")
    return ":".join(f"{v:02X}" for v in values)