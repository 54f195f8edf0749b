from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from .errors import FailedConversion, InvalidInput, InvalidLength

MAC_PATTERN = re.compile(r"([0-9A-Fa-f]{2}:){5}[0-9A-Fa-f]{2}")
OCTETS = 6


@dataclass(frozen=True)
class HardwareAddress:
    octets: Tuple[int, int, int, int, int, int]

    @classmethod
    def parse(cls, text: str) -> "HardwareAddress":
        return parse_mac(text)

    def __bytes__(self) -> bytes:
        return bytes(self.octets)

    def __str__(self) -> str:
        return ":".join(f"{o:02x}" for o in self.octets)


def parse_mac(text: str) -> HardwareAddress:
    """Parse ``aa:bb:cc:dd:ee:ff`` (any case) into a HardwareAddress.

    Shape is checked first, then each group is converted. The last two
    failures cannot happen for text that passed the shape check but are
    reported separately all the same.
    """
    if not MAC_PATTERN.fullmatch(text):
        raise InvalidInput(f"Invalid MAC address: {text!r}")

    groups = text.split(":")
    if len(groups) != OCTETS:
        raise InvalidLength(f"Expected {OCTETS} groups, got {len(groups)}: {text!r}")

    try:
        octets = tuple(int(g, 16) for g in groups)
    except ValueError as e:
        raise FailedConversion(f"Invalid MAC address group in {text!r}") from e
    if any(not 0 <= o <= 0xFF for o in octets):
        raise FailedConversion(f"MAC address group out of range in {text!r}")

    return HardwareAddress(octets)  # type: ignore[arg-type]
