from __future__ import annotations

import asyncio
import ipaddress
import socket
from dataclasses import dataclass

from .errors import InvalidEndpoint, InvalidPacketSize, TransmitError
from .mac import parse_mac
from .packet import PACKET_SIZE, build_magic_packet

WOL_PORT = 9
BROADCAST = "255.255.255.255"


@dataclass(frozen=True)
class TargetEndpoint:
    address: str
    port: int = WOL_PORT

    @classmethod
    def from_string(cls, text: str, port: int = WOL_PORT) -> "TargetEndpoint":
        try:
            addr = ipaddress.IPv4Address(text)
        except ValueError as e:
            raise InvalidEndpoint(f"Invalid IPv4 address: {text!r}") from e
        return cls(str(addr), port)


def send_packet(packet: bytes, endpoint: TargetEndpoint) -> bool:
    """Send the first 102 bytes of ``packet`` as one UDP datagram.

    True means the datagram was handed to the local stack, nothing more.
    """
    if len(packet) < PACKET_SIZE:
        raise InvalidPacketSize(f"Magic packet must be {PACKET_SIZE} bytes, got {len(packet)}")

    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            s.bind(("0.0.0.0", 0))
            s.sendto(packet[:PACKET_SIZE], (endpoint.address, endpoint.port))
    except OSError as e:
        raise TransmitError(f"Could not send to {endpoint.address}:{endpoint.port}: {e}", e) from e
    return True


def wake(mac: str, broadcast_ip: str = BROADCAST, port: int = WOL_PORT) -> bool:
    addr = parse_mac(mac)
    endpoint = TargetEndpoint.from_string(broadcast_ip, port)
    return send_packet(build_magic_packet(addr), endpoint)


async def send_magic_packet(mac: str, broadcast_ip: str = BROADCAST, port: int = WOL_PORT) -> None:
    # Offload blocking I/O to thread to avoid blocking asyncio loop
    await asyncio.to_thread(wake, mac, broadcast_ip, port)
