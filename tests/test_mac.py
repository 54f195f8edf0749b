from __future__ import annotations

import re

import pytest

from wolcast import mac as mac_mod
from wolcast.errors import FailedConversion, InvalidInput, InvalidLength, ParseError
from wolcast.mac import HardwareAddress, parse_mac


def test_parse_valid_mac():
    assert parse_mac("ff:ff:ff:ff:ff:ff") == HardwareAddress((255, 255, 255, 255, 255, 255))
    assert parse_mac("00:00:00:00:00:00") == HardwareAddress((0, 0, 0, 0, 0, 0))


def test_parse_is_case_insensitive():
    assert parse_mac("FF:FF:FF:FF:FF:FF") == parse_mac("ff:ff:ff:ff:ff:ff")
    assert parse_mac("00:1A:2b:3C:4d:5E").octets == (0x00, 0x1A, 0x2B, 0x3C, 0x4D, 0x5E)


def test_parse_keeps_textual_order():
    assert parse_mac("01:02:03:04:05:06").octets == (1, 2, 3, 4, 5, 6)


@pytest.mark.parametrize(
    "text",
    [
        ":::::",
        "ff:ff:ff:ff:ff:fg",
        "ff:ff:ff:ff:ff:ff:ff",
        "ff:ff:ff:ff:ff",
        "ff-ff-ff-ff-ff-ff",
        "ffffffffffff",
        "f:ff:ff:ff:ff:fff",
        "ff:ff:ff:ff:ff:ff\n",
        " ff:ff:ff:ff:ff:ff",
        "",
    ],
)
def test_invalid_mac_is_invalid_input(text):
    with pytest.raises(InvalidInput):
        parse_mac(text)


def test_parse_errors_share_a_base():
    with pytest.raises(ParseError):
        parse_mac("nope")


def test_wrong_group_count_after_shape_check(monkeypatch):
    monkeypatch.setattr(mac_mod, "MAC_PATTERN", re.compile(r"[0-9A-Za-z:]+"))
    with pytest.raises(InvalidLength):
        parse_mac("ff:ff:ff")


def test_bad_group_after_shape_check(monkeypatch):
    monkeypatch.setattr(mac_mod, "MAC_PATTERN", re.compile(r"[0-9A-Za-z:]+"))
    with pytest.raises(FailedConversion):
        parse_mac("zz:ff:ff:ff:ff:ff")


def test_address_renders_and_converts():
    addr = parse_mac("AA:BB:CC:DD:EE:FF")
    assert str(addr) == "aa:bb:cc:dd:ee:ff"
    assert bytes(addr) == b"\xaa\xbb\xcc\xdd\xee\xff"
    assert HardwareAddress.parse("aa:bb:cc:dd:ee:ff") == addr


def test_address_is_immutable():
    addr = parse_mac("aa:bb:cc:dd:ee:ff")
    with pytest.raises(AttributeError):
        addr.octets = (0, 0, 0, 0, 0, 0)
