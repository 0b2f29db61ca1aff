import pytest

from packemon.udp import UDP, parse_udp
from packemon.util import calculate_checksum


def test_round_trip():
    original = UDP(src_port=53, dst_port=40000, data=b"hello")
    original.update_length()
    parsed = parse_udp(original.to_bytes())
    assert parsed == original


def test_update_length_counts_header_and_data():
    datagram = UDP(src_port=1, dst_port=2, data=b"abc")
    assert datagram.update_length() == 8 + 3
    assert datagram.length == 11


def test_to_bytes_layout():
    datagram = UDP(src_port=0x0102, dst_port=0x0304, length=0x0506, checksum=0x0708, data=b"\xaa")
    assert datagram.to_bytes() == bytes([1, 2, 3, 4, 5, 6, 7, 8, 0xAA])


def test_parse_short_raises():
    with pytest.raises(ValueError):
        parse_udp(b"\x00" * 7)


def test_parse_header_only_has_empty_data():
    parsed = parse_udp(bytes([0, 80, 0, 81, 0, 8, 0, 0]))
    assert parsed.src_port == 80
    assert parsed.dst_port == 81
    assert parsed.length == 8
    assert parsed.data == b""


def test_checksum_of_empty_datagram():
    datagram = UDP(length=8)
    assert datagram.calculate_checksum_for_ipv6(b"") == 0xFFF7
    assert datagram.checksum == 0xFFF7


def test_checksum_verifies_to_zero():
    pseudo = bytes([0, 1, 0, 2])
    datagram = UDP(src_port=1, dst_port=2, data=b"\x00\x01\x00\x02")
    datagram.update_length()
    datagram.calculate_checksum_for_ipv6(pseudo)
    assert calculate_checksum(pseudo + datagram.to_bytes()) == b"\x00\x00"


def test_checksum_depends_on_pseudo_header():
    first = UDP(src_port=1, dst_port=2, data=b"xy")
    first.update_length()
    second = UDP(src_port=1, dst_port=2, data=b"xy")
    second.update_length()
    assert first.calculate_checksum_for_ipv6(b"\x00\x01") != second.calculate_checksum_for_ipv6(b"\x00\x02")