"""Wake-on-LAN magic packet sender."""
from .errors import (
    FailedConversion,
    InvalidBufferLength,
    InvalidEndpoint,
    InvalidInput,
    InvalidLength,
    InvalidPacketSize,
    PacketError,
    ParseError,
    TransmitError,
    WolError,
)
from .mac import HardwareAddress, parse_mac
from .packet import build_magic_packet
from .transmit import TargetEndpoint, send_magic_packet, send_packet, wake

__version__ = "0.1.0"
