"""UDP datagrams: serialising, parsing and checksumming."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .util import calculate_checksum

HEADER_LENGTH = 8

_HEADER = struct.Struct(">HHHH")


@dataclass
class UDP:
    """A UDP datagram."""

    src_port: int = 0
    dst_port: int = 0
    length: int = 0
    checksum: int = 0
    data: bytes = b""

    def update_length(self) -> int:
        """Set and return the length field: header plus data."""
        self.length = (HEADER_LENGTH + len(self.data or b"")) & 0xFFFF
        return self.length

    def to_bytes(self) -> bytes:
        """Serialise the datagram: header followed by data."""
        return _HEADER.pack(
            self.src_port & 0xFFFF,
            self.dst_port & 0xFFFF,
            self.length & 0xFFFF,
            self.checksum & 0xFFFF,
        ) + bytes(self.data or b"")

    def calculate_checksum_for_ipv6(self, pseudo_header: bytes) -> int:
        """Set and return the checksum using a prepared IPv6 pseudo header.

        IPv6 has no header checksum, so UDP over IPv6 must carry one.
        """
        message = bytes(pseudo_header) + self.to_bytes()
        if len(self.data or b"") % 2 != 0:
            message += b"\x00"
        self.checksum = int.from_bytes(calculate_checksum(message), "big")
        return self.checksum


def parse_udp(payload: bytes) -> UDP:
    """Parse a UDP datagram; raise ValueError if shorter than the header."""
    if payload is None or len(payload) < HEADER_LENGTH:
        raise ValueError(f"UDP datagram shorter than {HEADER_LENGTH} bytes")
    payload = bytes(payload)
    src_port, dst_port, length, checksum = _HEADER.unpack_from(payload)
    return UDP(
        src_port=src_port,
        dst_port=dst_port,
        length=length,
        checksum=checksum,
        data=payload[HEADER_LENGTH:],
    )