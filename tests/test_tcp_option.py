from packemon.tcp_option import (
    Mss,
    NoOperation,
    SackPermitted,
    Timestamps,
    WindowScale,
    options,
    options_of_ack,
    options_of_http,
)


def _walk(data):
    """Split a TCP option block into (kind, body) pairs."""
    result = []
    rest = data
    while rest:
        kind = rest[0]
        if kind in (0, 1):
            result.append((kind, b""))
            rest = rest[1:]
            continue
        length = rest[1]
        assert 2 <= length <= len(rest)
        result.append((kind, rest[2:length]))
        rest = rest[length:]
    return result


def test_mss_wire_bytes():
    assert Mss(value=0x05B4).to_bytes() == b"\x02\x04\x05\xb4"


def test_sack_permitted_wire_bytes():
    assert SackPermitted().to_bytes() == b"\x04\x02"


def test_no_operation_wire_bytes():
    assert NoOperation().to_bytes() == b"\x01"


def test_timestamps_encode_declared_length():
    encoded = Timestamps(value=0xD4091F09, echo_reply=0).to_bytes()
    assert len(encoded) == encoded[1]
    assert _walk(encoded) == [(8, (0xD4091F09).to_bytes(4, "big") + bytes(4))]


def test_window_scale_encode_declared_length():
    encoded = WindowScale(shift_count=7).to_bytes()
    assert len(encoded) == encoded[1]
    assert _walk(encoded) == [(3, bytes([7]))]


def test_syn_options_layout():
    block = options()
    walked = _walk(block)
    assert [kind for kind, _ in walked] == [2, 4, 8, 1, 3]
    assert int.from_bytes(walked[0][1], "big") == 1460
    assert int.from_bytes(walked[2][1][:4], "big") == 0xD4091F09
    assert walked[4][1] == bytes([7])
    assert len(block) % 4 == 0


def test_ack_options_layout():
    block = options_of_ack()
    walked = _walk(block)
    assert [kind for kind, _ in walked] == [1, 1, 8]
    body = walked[2][1]
    assert int.from_bytes(body[:4], "big") == 0xDBE1C2C4
    assert int.from_bytes(body[4:], "big") == 0x796A7651
    assert len(block) % 4 == 0


def test_http_options_layout():
    block = options_of_http()
    walked = _walk(block)
    assert [kind for kind, _ in walked] == [1, 1, 8]
    body = walked[2][1]
    assert int.from_bytes(body[:4], "big") == 0x5D1FBC0B
    assert int.from_bytes(body[4:], "big") == 0x7A7519D3
    assert len(block) == len(options_of_ack())