import pytest

from packemon.ospf import (
    OSPF,
    OSPFAuthType,
    OSPFHello,
    OSPFType,
    calculate_fletcher_checksum,
    new_ospf,
    new_ospf_hello,
    parse_ospf,
    parse_ospf_hello,
)

ROUTER_ID = 0xC0A80101
AREA_ID = 0
MESSAGE_BODY = bytes([0x01, 0x02, 0x03, 0x04])


def _hello_args():
    return dict(
        router_id=ROUTER_ID,
        area_id=AREA_ID,
        network_mask=0xFFFFFF00,
        hello_interval=10,
        options=0x02,
        router_priority=1,
        router_dead_interval=40,
        dr=0xC0A80101,
        bdr=0,
        neighbors=[0xC0A80102],
    )


def test_ospf_basic_functionality():
    packet = new_ospf(OSPFType.HELLO, ROUTER_ID, AREA_ID, MESSAGE_BODY)
    assert packet.version == 2
    assert packet.packet_type == OSPFType.HELLO
    assert packet.packet_length == 24 + len(MESSAGE_BODY)
    assert packet.router_id == ROUTER_ID
    assert packet.area_id == AREA_ID
    assert packet.au_type == OSPFAuthType.NONE
    assert packet.message_body == MESSAGE_BODY
    assert packet.checksum != 0


def test_ospf_serialization():
    args = _hello_args()
    hello_packet = new_ospf_hello(**args)
    parsed = parse_ospf(hello_packet.to_bytes())

    assert parsed.version == hello_packet.version
    assert parsed.packet_type == hello_packet.packet_type
    assert parsed.packet_length == hello_packet.packet_length
    assert parsed.router_id == hello_packet.router_id
    assert parsed.area_id == hello_packet.area_id
    assert parsed.checksum == hello_packet.checksum
    assert parsed.au_type == hello_packet.au_type

    hello = parse_ospf_hello(parsed)
    assert hello.network_mask == args["network_mask"]
    assert hello.hello_interval == args["hello_interval"]
    assert hello.options == args["options"]
    assert hello.router_priority == args["router_priority"]
    assert hello.router_dead_interval == args["router_dead_interval"]
    assert hello.designated_router == args["dr"]
    assert hello.backup_des_router == args["bdr"]
    assert hello.neighbors == args["neighbors"]


def test_ospf_checksum():
    packet = new_ospf(OSPFType.HELLO, ROUTER_ID, AREA_ID, MESSAGE_BODY)
    original = packet.checksum
    assert packet.calculate_checksum() == original

    packet.router_id = 0xC0A80102
    assert packet.calculate_checksum() != original


def test_ospf_hello_bytes():
    neighbors = [0xC0A80102]
    hello = OSPFHello(
        network_mask=0xFFFFFF00,
        hello_interval=10,
        options=0x02,
        router_priority=1,
        router_dead_interval=40,
        designated_router=0xC0A80101,
        backup_des_router=0,
        neighbors=neighbors,
    )
    serialized = hello.to_bytes()
    assert len(serialized) == 20 + 4 * len(neighbors)
    assert serialized[0:4] == bytes([0xFF, 0xFF, 0xFF, 0x00])
    assert serialized[4:6] == bytes([0x00, 0x0A])
    assert serialized[6] == 0x02
    assert serialized[7] == 1


def test_ospf_parsing_invalid_data():
    with pytest.raises(ValueError):
        parse_ospf(None)
    with pytest.raises(ValueError):
        parse_ospf(bytes(23))
    invalid = OSPF(packet_type=OSPFType.HELLO, message_body=bytes([0x01, 0x02]))
    with pytest.raises(ValueError):
        parse_ospf_hello(invalid)


def test_ospf_hello_rejects_other_types():
    packet = new_ospf(OSPFType.LINK_STATE_ACK, ROUTER_ID, AREA_ID, bytes(20))
    with pytest.raises(ValueError):
        parse_ospf_hello(packet)


def test_ospf_fletcher_checksum():
    test_data = bytes(
        [
            0x00, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07,
            0x08, 0x09, 0x0A, 0x0B, 0x00, 0x00, 0x0E, 0x0F,
        ]
    )
    assert calculate_fletcher_checksum(test_data) == 0xABF5


def test_fletcher_checksum_ignores_checksum_field():
    data = bytearray(range(1, 30))
    before = calculate_fletcher_checksum(bytes(data))
    data[12] = 0xAA
    data[13] = 0xBB
    assert calculate_fletcher_checksum(bytes(data)) == before


def test_round_trip_header_bytes():
    packet = new_ospf(OSPFType.DATABASE_DESCRIPTION, 7, 3, b"\x10\x20\x30")
    wire = packet.to_bytes()
    assert len(wire) == packet.packet_length
    assert parse_ospf(wire) == packet