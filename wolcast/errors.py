from __future__ import annotations

from typing import Optional


class WolError(Exception):
    pass


class ParseError(WolError):
    """Raised when a hardware address cannot be parsed."""


class InvalidInput(ParseError):
    pass


class InvalidLength(ParseError):
    pass


class FailedConversion(ParseError):
    pass


class PacketError(WolError):
    """Raised when a magic packet cannot be assembled."""


class InvalidBufferLength(PacketError):
    pass


class InvalidPacketSize(PacketError):
    pass


class InvalidEndpoint(WolError):
    pass


class TransmitError(WolError):
    """Raised when the datagram could not be handed to the network stack.

    The underlying OSError is kept on ``cause`` and as ``__cause__``.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
