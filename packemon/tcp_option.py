"""TCP option records and the option sets used for outgoing segments."""

from __future__ import annotations

import struct
from dataclasses import dataclass


@dataclass
class Mss:
    """Maximum segment size option."""

    value: int
    kind: int = 0x02
    length: int = 0x04

    def to_bytes(self) -> bytes:
        return struct.pack(">BBH", self.kind, self.length, self.value)


@dataclass
class SackPermitted:
    """SACK-permitted option."""

    kind: int = 0x04
    length: int = 0x02

    def to_bytes(self) -> bytes:
        return struct.pack(">BB", self.kind, self.length)


@dataclass
class Timestamps:
    """Timestamps option."""

    value: int
    echo_reply: int
    kind: int = 0x08
    length: int = 0x0A

    def to_bytes(self) -> bytes:
        return struct.pack(">BBII", self.kind, self.length, self.value, self.echo_reply)


@dataclass
class NoOperation:
    """No-operation padding option."""

    kind: int = 0x01

    def to_bytes(self) -> bytes:
        return bytes([self.kind])


@dataclass
class WindowScale:
    """Window scale option."""

    shift_count: int
    kind: int = 0x03
    length: int = 0x03

    def to_bytes(self) -> bytes:
        return struct.pack(">BBB", self.kind, self.length, self.shift_count)


def options() -> bytes:
    """Options as carried by a typical SYN segment."""
    parts = (
        Mss(value=0x05B4),
        SackPermitted(),
        Timestamps(value=0xD4091F09, echo_reply=0x00000000),
        NoOperation(),
        WindowScale(shift_count=0x07),
    )
    return b"".join(part.to_bytes() for part in parts)


def options_of_ack() -> bytes:
    """Options as carried by a typical ACK segment."""
    parts = (
        NoOperation(),
        NoOperation(),
        Timestamps(value=0xDBE1C2C4, echo_reply=0x796A7651),
    )
    return b"".join(part.to_bytes() for part in parts)


def options_of_http() -> bytes:
    """Options as carried by a typical HTTP GET segment."""
    parts = (
        NoOperation(),
        NoOperation(),
        Timestamps(value=0x5D1FBC0B, echo_reply=0x7A7519D3),
    )
    return b"".join(part.to_bytes() for part in parts)