"""Byte helpers, string-to-number conversions and the Internet checksum."""

from __future__ import annotations

import hashlib
import re

_UINT_LITERAL = re.compile(r"[0-9A-Za-z_]+")
_DECIMAL = re.compile(r"[0-9]+")


def uint16_bytes(value: int) -> bytes:
    """Encode the low 16 bits of ``value`` in network byte order."""
    return (value & 0xFFFF).to_bytes(2, "big")


def uint32_bytes(value: int) -> bytes:
    """Encode the low 32 bits of ``value`` in network byte order."""
    return (value & 0xFFFFFFFF).to_bytes(4, "big")


def _parse_uint(s: str, bits: int) -> int:
    """Parse an unsigned literal whose base comes from its prefix.

    ``0x`` is hexadecimal, ``0o`` or a bare leading ``0`` octal, ``0b``
    binary, anything else decimal.  Values that need more than ``bits``
    bits are rejected.
    """
    if not _UINT_LITERAL.fullmatch(s):
        raise ValueError(f"invalid unsigned integer: {s!r}")
    text = s
    if len(s) > 1 and s[0] == "0" and s[1] not in "xXoObB":
        text = "0o" + s[1:]
    try:
        number = int(text, 0)
    except ValueError:
        raise ValueError(f"invalid unsigned integer: {s!r}") from None
    if number >= 1 << bits:
        raise ValueError(f"value out of range for {bits} bits: {s!r}")
    return number


def str_ip_to_bytes(s: str) -> bytes:
    """Convert a dotted IPv4 address to four bytes.

    Empty parts are left as zero, as are missing trailing parts.
    """
    parts = s.split(".")
    if len(parts) > 4:
        raise ValueError(f"too many parts in IPv4 address: {s!r}")
    result = bytearray(4)
    for index, part in enumerate(parts):
        if not part:
            continue
        if not _DECIMAL.fullmatch(part) or int(part) > 0xFF:
            raise ValueError(f"invalid IPv4 address part {part!r} in {s!r}")
        result[index] = int(part)
    return bytes(result)


def str_hex_to_bytes(s: str) -> bytes:
    """Convert a 48-bit literal (such as a MAC address ``0x...``) to six bytes."""
    return _parse_uint(s, 48).to_bytes(6, "big")


def str_hex_to_bytes2(s: str) -> bytes:
    """Convert a 16-bit literal to two bytes in network byte order."""
    return _parse_uint(s, 16).to_bytes(2, "big")


def str_hex_to_bytes3(s: str) -> int:
    """Convert an 8-bit literal to a byte value."""
    return _parse_uint(s, 8)


def str_int_to_uint16(s: str) -> int:
    """Convert a 16-bit literal to an integer."""
    return _parse_uint(s, 16)


def write_hash(message: bytes | None) -> bytes:
    """Return the SHA-256 digest of ``message`` (empty when ``None``)."""
    return hashlib.sha256(message or b"").digest()


def _sum_words(packet: bytes) -> int:
    length = len(packet)
    if length % 2 == 0:
        return sum(
            int.from_bytes(packet[i : i + 2], "big") for i in range(0, length, 2)
        )
    if length == 1:
        raise ValueError("cannot checksum a single byte")
    # Odd lengths add the last full word's second byte on its own and stop.
    total = sum(
        int.from_bytes(packet[i : i + 2], "big") for i in range(0, length - 2, 2)
    )
    return total + packet[length - 2]


def calculate_checksum(packet: bytes) -> bytes:
    """Return the 16-bit one's complement checksum of ``packet`` as two bytes."""
    total = _sum_words(packet)
    total = (total & 0xFFFF) + (total >> 16)
    return ((total ^ 0xFFFF) & 0xFFFF).to_bytes(2, "big")