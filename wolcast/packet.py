from __future__ import annotations

from .errors import InvalidBufferLength, InvalidPacketSize
from .mac import OCTETS, HardwareAddress

PREAMBLE = b"\xff" * 6
REPETITIONS = 16
PACKET_SIZE = 102


def build_magic_packet(addr: HardwareAddress) -> bytes:
    """Return ``FF * 6`` followed by the address repeated 16 times."""
    payload = bytes(addr)
    if len(payload) != OCTETS:
        raise InvalidBufferLength(f"Address must be {OCTETS} bytes, got {len(payload)}")

    packet = PREAMBLE + payload * REPETITIONS
    if len(packet) != PACKET_SIZE:
        raise InvalidPacketSize(f"Magic packet must be {PACKET_SIZE} bytes, got {len(packet)}")
    return packet
