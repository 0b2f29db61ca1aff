"""Decoded views of received packets, one dataclass per protocol layer."""

from __future__ import annotations

import ipaddress
import struct
from dataclasses import dataclass, field

_IPV4_MAPPED_PREFIX = bytes(10) + b"\xff\xff"


def _format_mac(addr: bytes) -> str:
    return ":".join(f"{b:02x}" for b in addr)


def _format_ip(addr: bytes) -> str:
    addr = bytes(addr)
    if not addr:
        return "<nil>"
    if len(addr) == 4:
        return str(ipaddress.IPv4Address(addr))
    if len(addr) == 16:
        if addr.startswith(_IPV4_MAPPED_PREFIX):
            return str(ipaddress.IPv4Address(addr[12:]))
        return ipaddress.IPv6Address(addr).compressed
    return "?" + addr.hex()


@dataclass
class EthernetFrame:
    """An Ethernet II frame."""

    dst_addr: bytes = b""
    src_addr: bytes = b""
    type: int = 0
    payload: bytes = b""

    def __str__(self) -> str:
        return (
            f"Ethernet Frame: Dst={_format_mac(self.dst_addr)}, "
            f"Src={_format_mac(self.src_addr)}, Type=0x{self.type:04x}, "
            f"Len={len(self.payload)}"
        )


@dataclass
class ARPPacket:
    """An ARP packet."""

    hardware_type: int = 0
    protocol_type: int = 0
    hardware_size: int = 0
    protocol_size: int = 0
    operation: int = 0
    sender_mac: bytes = b""
    sender_ip: bytes = b""
    target_mac: bytes = b""
    target_ip: bytes = b""

    def __str__(self) -> str:
        return (
            f"ARP: Op={self.operation}, "
            f"Sender={_format_mac(self.sender_mac)}/{_format_ip(self.sender_ip)}, "
            f"Target={_format_mac(self.target_mac)}/{_format_ip(self.target_ip)}"
        )


@dataclass
class IPv4Packet:
    """An IPv4 packet."""

    version: int = 0
    ihl: int = 0
    tos: int = 0
    total_length: int = 0
    id: int = 0
    flags: int = 0
    frag_offset: int = 0
    ttl: int = 0
    protocol: int = 0
    checksum: int = 0
    src_ip: bytes = b""
    dst_ip: bytes = b""
    options: bytes = b""
    payload: bytes = b""

    def __str__(self) -> str:
        return (
            f"IPv4: Src={_format_ip(self.src_ip)}, Dst={_format_ip(self.dst_ip)}, "
            f"Proto={self.protocol}, Len={len(self.payload)}"
        )


@dataclass
class IPv6Packet:
    """An IPv6 packet."""

    version: int = 0
    traffic_class: int = 0
    flow_label: int = 0
    payload_len: int = 0
    next_header: int = 0
    hop_limit: int = 0
    src_ip: bytes = b""
    dst_ip: bytes = b""
    payload: bytes = b""

    def __str__(self) -> str:
        return (
            f"IPv6: Src={_format_ip(self.src_ip)}, Dst={_format_ip(self.dst_ip)}, "
            f"NextHeader={self.next_header}, Len={len(self.payload)}"
        )


@dataclass
class ICMPPacket:
    """An ICMP (echo style) packet."""

    type: int = 0
    code: int = 0
    checksum: int = 0
    id: int = 0
    sequence: int = 0
    payload: bytes = b""

    def __str__(self) -> str:
        return (
            f"ICMP: Type={self.type}, Code={self.code}, "
            f"ID={self.id}, Seq={self.sequence}"
        )


@dataclass
class ICMPv6Packet:
    """An ICMPv6 packet."""

    type: int = 0
    code: int = 0
    checksum: int = 0
    payload: bytes = b""

    def __str__(self) -> str:
        return f"ICMPv6: Type={self.type}, Code={self.code}"


@dataclass
class TCPPacket:
    """A TCP segment."""

    src_port: int = 0
    dst_port: int = 0
    seq_num: int = 0
    ack_num: int = 0
    data_offset: int = 0
    flags: int = 0
    window: int = 0
    checksum: int = 0
    urg_ptr: int = 0
    options: bytes = b""
    payload: bytes = b""

    def __str__(self) -> str:
        return (
            f"TCP: Src={self.src_port}, Dst={self.dst_port}, Seq={self.seq_num}, "
            f"Ack={self.ack_num}, Flags=0x{self.flags:02x}"
        )


@dataclass
class UDPPacket:
    """A UDP datagram."""

    src_port: int = 0
    dst_port: int = 0
    length: int = 0
    checksum: int = 0
    payload: bytes = b""

    def __str__(self) -> str:
        return f"UDP: Src={self.src_port}, Dst={self.dst_port}, Len={self.length}"


@dataclass
class TLSRecord:
    """A TLS record header and its data."""

    type: int = 0
    version: int = 0
    length: int = 0
    data: bytes = b""

    def __str__(self) -> str:
        return f"TLS: Type={self.type}, Version=0x{self.version:04x}, Len={self.length}"


@dataclass
class DNSPacket:
    """A DNS message header and the remaining payload."""

    id: int = 0
    flags: int = 0
    questions: int = 0
    answer_rrs: int = 0
    authority_rrs: int = 0
    additional_rrs: int = 0
    payload: bytes = b""

    def __str__(self) -> str:
        return (
            f"DNS: ID={self.id}, Flags=0x{self.flags:04x}, "
            f"Questions={self.questions}, Answers={self.answer_rrs}"
        )


@dataclass
class HTTPRequest:
    """An HTTP/1.x request."""

    method: str = "GET"
    uri: str = "/"
    version: str = "HTTP/1.1"
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __str__(self) -> str:
        return f"HTTP Request: {self.method} {self.uri} {self.version}"


@dataclass
class HTTPResponse:
    """An HTTP/1.x response."""

    version: str = "HTTP/1.1"
    status_code: int = 200
    status: str = "OK"
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __str__(self) -> str:
        return f"HTTP Response: {self.version} {self.status_code} {self.status}"


@dataclass
class Passive:
    """A received packet with each decoded layer, where present."""

    ethernet_frame: EthernetFrame | None = None
    arp: ARPPacket | None = None
    ipv4: IPv4Packet | None = None
    ipv6: IPv6Packet | None = None
    icmp: ICMPPacket | None = None
    icmpv6: ICMPv6Packet | None = None
    tcp: TCPPacket | None = None
    udp: UDPPacket | None = None
    tls: TLSRecord | None = None
    dns: DNSPacket | None = None
    http: HTTPRequest | None = None
    http_res: HTTPResponse | None = None


def _require(data: bytes, minimum: int, what: str) -> bytes:
    if data is None or len(data) < minimum:
        raise ValueError(f"{what} shorter than {minimum} bytes")
    return bytes(data)


def parse_arp_packet(data: bytes) -> ARPPacket:
    """Parse an ARP packet; raise ValueError if shorter than 28 bytes."""
    data = _require(data, 28, "ARP packet")
    hw_type, proto_type, hw_size, proto_size, op = struct.unpack_from(">HHBBH", data)
    return ARPPacket(
        hardware_type=hw_type,
        protocol_type=proto_type,
        hardware_size=hw_size,
        protocol_size=proto_size,
        operation=op,
        sender_mac=data[8:14],
        sender_ip=data[14:18],
        target_mac=data[18:24],
        target_ip=data[24:28],
    )


def parse_ipv4_packet(data: bytes) -> IPv4Packet:
    """Parse an IPv4 packet; raise ValueError if the header is incomplete."""
    data = _require(data, 20, "IPv4 packet")
    ihl = (data[0] & 0x0F) * 4
    if ihl < 20:
        raise ValueError(f"IPv4 header length {ihl} is below the minimum of 20")
    if len(data) < ihl:
        raise ValueError(f"IPv4 packet shorter than its header length {ihl}")
    total_length, ident, flags_frag = struct.unpack_from(">HHH", data, 2)
    ttl, protocol, checksum = struct.unpack_from(">BBH", data, 8)
    return IPv4Packet(
        version=(data[0] >> 4) & 0x0F,
        ihl=ihl,
        tos=data[1],
        total_length=total_length,
        id=ident,
        flags=(data[6] >> 5) & 0x07,
        frag_offset=flags_frag & 0x1FFF,
        ttl=ttl,
        protocol=protocol,
        checksum=checksum,
        src_ip=data[12:16],
        dst_ip=data[16:20],
        options=data[20:ihl],
        payload=data[ihl:],
    )


def parse_ipv6_packet(data: bytes) -> IPv6Packet:
    """Parse an IPv6 packet; raise ValueError if shorter than 40 bytes."""
    data = _require(data, 40, "IPv6 packet")
    (first_word,) = struct.unpack_from(">I", data)
    payload_len, next_header, hop_limit = struct.unpack_from(">HBB", data, 4)
    return IPv6Packet(
        version=first_word >> 28,
        traffic_class=(first_word >> 20) & 0xFF,
        flow_label=first_word & 0x000FFFFF,
        payload_len=payload_len,
        next_header=next_header,
        hop_limit=hop_limit,
        src_ip=data[8:24],
        dst_ip=data[24:40],
        payload=data[40:],
    )


def parse_icmp_packet(data: bytes) -> ICMPPacket:
    """Parse an ICMP packet; raise ValueError if shorter than 8 bytes."""
    data = _require(data, 8, "ICMP packet")
    icmp_type, code, checksum, ident, seq = struct.unpack_from(">BBHHH", data)
    return ICMPPacket(
        type=icmp_type,
        code=code,
        checksum=checksum,
        id=ident,
        sequence=seq,
        payload=data[8:],
    )


def parse_icmpv6_packet(data: bytes) -> ICMPv6Packet:
    """Parse an ICMPv6 packet; raise ValueError if shorter than 4 bytes."""
    data = _require(data, 4, "ICMPv6 packet")
    icmp_type, code, checksum = struct.unpack_from(">BBH", data)
    return ICMPv6Packet(type=icmp_type, code=code, checksum=checksum, payload=data[4:])


def parse_tcp_packet(data: bytes) -> TCPPacket:
    """Parse a TCP segment; raise ValueError if the header is incomplete."""
    data = _require(data, 20, "TCP segment")
    data_offset = (data[12] >> 4) * 4
    if data_offset < 20:
        raise ValueError(f"TCP data offset {data_offset} is below the minimum of 20")
    if len(data) < data_offset:
        raise ValueError(f"TCP segment shorter than its data offset {data_offset}")
    src, dst, seq, ack = struct.unpack_from(">HHII", data)
    window, checksum, urg = struct.unpack_from(">HHH", data, 14)
    return TCPPacket(
        src_port=src,
        dst_port=dst,
        seq_num=seq,
        ack_num=ack,
        data_offset=data_offset,
        flags=data[13],
        window=window,
        checksum=checksum,
        urg_ptr=urg,
        options=data[20:data_offset],
        payload=data[data_offset:],
    )


def parse_udp_packet(data: bytes) -> UDPPacket:
    """Parse a UDP datagram; raise ValueError if shorter than 8 bytes."""
    data = _require(data, 8, "UDP datagram")
    src, dst, length, checksum = struct.unpack_from(">HHHH", data)
    return UDPPacket(
        src_port=src, dst_port=dst, length=length, checksum=checksum, payload=data[8:]
    )


def parse_dns_request(data: bytes) -> DNSPacket:
    """Parse a DNS message header; raise ValueError if shorter than 12 bytes."""
    data = _require(data, 12, "DNS message")
    ident, flags, qd, an, ns, ar = struct.unpack_from(">HHHHHH", data)
    return DNSPacket(
        id=ident,
        flags=flags,
        questions=qd,
        answer_rrs=an,
        authority_rrs=ns,
        additional_rrs=ar,
        payload=data[12:],
    )


def parse_dns_response(data: bytes) -> DNSPacket:
    """Parse a DNS response; its header has the same layout as a request."""
    return parse_dns_request(data)


def _split_http(data: bytes) -> tuple[str, dict[str, str], bytes]:
    data = bytes(data or b"")
    head, _, body = data.partition(b"\r\n\r\n")
    lines = head.decode("latin-1").split("\r\n")
    headers: dict[str, str] = {}
    for line in lines[1:]:
        if not line:
            continue
        name, sep, value = line.partition(":")
        if not sep:
            raise ValueError(f"malformed HTTP header line: {line!r}")
        headers[name.strip()] = value.strip()
    return lines[0], headers, body


def parse_http_request(data: bytes) -> HTTPRequest:
    """Parse an HTTP/1.x request; raise ValueError on a malformed request line."""
    start, headers, body = _split_http(data)
    parts = start.split(" ")
    if len(parts) != 3 or not all(parts):
        raise ValueError(f"malformed HTTP request line: {start!r}")
    method, uri, version = parts
    return HTTPRequest(method=method, uri=uri, version=version, headers=headers, body=body)


def parse_http_response(data: bytes) -> HTTPResponse:
    """Parse an HTTP/1.x response; raise ValueError on a malformed status line."""
    start, headers, body = _split_http(data)
    version, _, rest = start.partition(" ")
    code_text, _, status = rest.partition(" ")
    if not version.startswith("HTTP/") or not code_text.isdigit():
        raise ValueError(f"malformed HTTP status line: {start!r}")
    return HTTPResponse(
        version=version,
        status_code=int(code_text),
        status=status,
        headers=headers,
        body=body,
    )


def parse_tls_data(data: bytes) -> TLSRecord:
    """Parse a TLS record header; raise ValueError if shorter than 5 bytes."""
    data = _require(data, 5, "TLS record")
    record_type, version, length = struct.unpack_from(">BHH", data)
    return TLSRecord(type=record_type, version=version, length=length, data=data[5:])