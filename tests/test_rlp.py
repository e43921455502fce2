import pytest

from ream.rlp import RLPError, decode, encode


def test_encode_short_string():
    assert encode(b"dog") == b"\x83dog"


def test_encode_empty_list():
    assert encode([]) == b"\xc0"


def test_encode_empty_string():
    assert encode(b"") == b"\x80"


def test_zero_encodes_as_empty_string():
    assert encode(0) == encode(b"")


def test_single_low_byte_is_its_own_encoding():
    assert encode(b"\x7f") == b"\x7f"


def test_integer_encodes_as_big_endian_bytes():
    assert encode(1024) == encode((1024).to_bytes(2, "big"))


@pytest.mark.parametrize(
    "item",
    [
        b"",
        b"\x00",
        b"\x80",
        b"dog",
        b"x" * 55,
        b"y" * 56,
        b"z" * 1024,
        [],
        [b"cat", b"dog"],
        [[], [[]], [[], [[]]]],
        [b"a" * 60, [b"b" * 70, b""]],
    ],
)
def test_round_trip(item):
    assert decode(encode(item)) == item


def test_long_string_uses_long_form():
    encoded = encode(b"y" * 56)
    assert encoded[0] > 0xB7
    assert len(encoded) == 56 + 2


def test_decode_empty_input_raises():
    with pytest.raises(RLPError):
        decode(b"")


def test_decode_truncated_raises():
    with pytest.raises(RLPError):
        decode(b"\x83do")


def test_decode_trailing_bytes_raises():
    with pytest.raises(RLPError):
        decode(encode(b"dog") + b"\x00")


def test_decode_non_canonical_single_byte_raises():
    with pytest.raises(RLPError):
        decode(b"\x81\x00")


def test_decode_long_form_for_short_payload_raises():
    with pytest.raises(RLPError):
        decode(b"\xb8\x05hello")


def test_decode_length_with_leading_zero_raises():
    with pytest.raises(RLPError):
        decode(b"\xb9\x00\x38" + b"a" * 56)


def test_decode_list_with_truncated_element_raises():
    with pytest.raises(RLPError):
        decode(b"\xc2\x83d")


def test_encode_negative_raises():
    with pytest.raises(RLPError):
        encode(-1)


def test_encode_unsupported_type_raises():
    with pytest.raises(RLPError):
        encode("text")


def test_rlp_error_is_value_error():
    with pytest.raises(ValueError):
        decode(b"\x83")