# packemon

Building blocks for crafting and inspecting network packets in pure Python,
with no third-party dependencies.

## Modules

- `packemon.util`: big-endian encoding (`uint16_bytes`, `uint32_bytes`), the
  16-bit one's complement Internet checksum (`calculate_checksum`), SHA-256
  hashing (`write_hash`), and converters that turn user input into bytes or
  integers: `str_ip_to_bytes("192.168.0.1")`, `str_hex_to_bytes` (48-bit, six
  bytes), `str_hex_to_bytes2` (16-bit, two bytes), `str_hex_to_bytes3` (8-bit)
  and `str_int_to_uint16`. The numeric converters accept `0x`, `0o`/leading-`0`
  and `0b` prefixes and raise `ValueError` on bad or out-of-range input.
- `packemon.ospf`: OSPFv2 packets. `new_ospf` and `new_ospf_hello` build a
  packet with a computed Fletcher checksum; `OSPF.to_bytes` serialises it;
  `parse_ospf` and `parse_ospf_hello` decode it and raise `ValueError` on short
  or wrong-type input. Also provides `OSPFType`, `OSPFAuthType`,
  `calculate_fletcher_checksum` and dataclasses for the other OSPF bodies
  (`OSPFDatabaseDescription`, `OSPFLinkStateRequest`, `OSPFLSRequest`,
  `OSPFLinkStateUpdate`, `OSPFLinkStateAck`).
- `packemon.udp`: the `UDP` dataclass with `to_bytes`, `update_length` and
  `calculate_checksum_for_ipv6` (given a prepared IPv6 pseudo header), and
  `parse_udp`.
- `packemon.tcp_option`: TCP option records (`Mss`, `SackPermitted`,
  `Timestamps`, `NoOperation`, `WindowScale`), each with `to_bytes`, and the
  canned option blocks `options()`, `options_of_ack()` and `options_of_http()`.
- `packemon.passive`: dataclasses for decoded layers (`EthernetFrame`,
  `ARPPacket`, `IPv4Packet`, `IPv6Packet`, `ICMPPacket`, `ICMPv6Packet`,
  `TCPPacket`, `UDPPacket`, `TLSRecord`, `DNSPacket`, `HTTPRequest`,
  `HTTPResponse`, and the `Passive` container), each with a one-line `str()`,
  and parsers `parse_arp_packet`, `parse_ipv4_packet`, `parse_ipv6_packet`,
  `parse_icmp_packet`, `parse_icmpv6_packet`, `parse_tcp_packet`,
  `parse_udp_packet`, `parse_dns_request`, `parse_dns_response`,
  `parse_http_request`, `parse_http_response` and `parse_tls_data`. Parsers
  raise `ValueError` when the data is too short or malformed.
- `packemon.route`: finds the default gateway by running the `ip` command:
  `get_default_route_ip()` and `get_default_route_mac()` (which raise
  `LookupError` if nothing is found), plus `exec_ip_route`, `exec_ip_neigh`,
  `exec_ip` and `exec_command`, which raise `CommandError` when the command is
  missing or fails.

## Installing

```
pip install .
```

## Examples

```python
from packemon.ospf import new_ospf_hello, parse_ospf, parse_ospf_hello

packet = new_ospf_hello(
    0xC0A80101, 0, 0xFFFFFF00, 10, 0x02, 1, 40, 0xC0A80101, 0, [0xC0A80102]
)
raw = packet.to_bytes()
hello = parse_ospf_hello(parse_ospf(raw))
print(hello.neighbors)  # [3232235778]
```

```python
from packemon.udp import UDP, parse_udp

datagram = UDP(src_port=50000, dst_port=53, data=b"query")
datagram.update_length()          # 13
parsed = parse_udp(datagram.to_bytes())
print(parsed.dst_port, parsed.data)
```

```python
from packemon.passive import parse_ipv4_packet

header = bytes.fromhex("450000140000400040060000c0a80001c0a80002")
print(parse_ipv4_packet(header))
# IPv4: Src=192.168.0.1, Dst=192.168.0.2, Proto=6, Len=0
```

## What it does not do

This package builds, serialises and parses packets; it does not send or
capture them. There is no raw-socket I/O, no command-line tool or interactive
screen, and no building of whole TCP segments, TCP connection tracking, TLS
handshakes or encryption. `packemon.route` relies on the Linux `ip` command
being installed.

## Running the tests

```
pip install ".[test]"
pytest
```