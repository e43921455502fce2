"""Recursive Length Prefix (RLP) encoding and strict decoding."""

from __future__ import annotations

from typing import Any, Union

Item = Union[bytes, list["Item"]]

_SHORT_LIMIT = 56
_STRING_OFFSET = 0x80
_LIST_OFFSET = 0xC0


class RLPError(ValueError):
    """Raised for values that cannot be encoded or bytes that are not valid RLP."""


def _length_prefix(length: int, offset: int) -> bytes:
    if length < _SHORT_LIMIT:
        return bytes([offset + length])
    encoded = length.to_bytes((length.bit_length() + 7) // 8, "big")
    if len(encoded) > 8:
        raise RLPError("payload too long")
    return bytes([offset + 55 + len(encoded)]) + encoded


def encode(item: Any) -> bytes:
    """Encode bytes, non-negative integers and (nested) lists of them."""
    if isinstance(item, bool):
        raise RLPError("cannot encode bool")
    if isinstance(item, int):
        if item < 0:
            raise RLPError("cannot encode a negative integer")
        item = item.to_bytes((item.bit_length() + 7) // 8, "big")
    if isinstance(item, (bytes, bytearray, memoryview)):
        data = bytes(item)
        if len(data) == 1 and data[0] < _STRING_OFFSET:
            return data
        return _length_prefix(len(data), _STRING_OFFSET) + data
    if isinstance(item, (list, tuple)):
        payload = b"".join(encode(element) for element in item)
        return _length_prefix(len(payload), _LIST_OFFSET) + payload
    raise RLPError(f"cannot encode {type(item).__name__}")


def _header(data: bytes, pos: int, short: int) -> tuple[int, int]:
    """Return the payload start and length for a header at ``pos``."""
    if short < _SHORT_LIMIT:
        return pos + 1, short
    size = short - 55
    start = pos + 1 + size
    if start > len(data):
        raise RLPError("input too short")
    length_bytes = data[pos + 1 : start]
    if length_bytes[0] == 0:
        raise RLPError("length has leading zeros")
    length = int.from_bytes(length_bytes, "big")
    if length < _SHORT_LIMIT:
        raise RLPError("non-canonical size")
    return start, length


def _decode_at(data: bytes, pos: int) -> tuple[Item, int]:
    if pos >= len(data):
        raise RLPError("input too short")
    prefix = data[pos]
    if prefix < _STRING_OFFSET:
        return data[pos : pos + 1], pos + 1
    is_list = prefix >= _LIST_OFFSET
    start, length = _header(data, pos, prefix - (_LIST_OFFSET if is_list else _STRING_OFFSET))
    end = start + length
    if end > len(data):
        raise RLPError("input too short")
    payload = data[start:end]
    if not is_list:
        if length == 1 and payload[0] < _STRING_OFFSET:
            raise RLPError("non-canonical single byte")
        return payload, end
    items: list[Item] = []
    cursor = 0
    while cursor < len(payload):
        element, cursor = _decode_at(payload, cursor)
        items.append(element)
    return items, end


def decode(data: bytes) -> Item:
    """Decode exactly one RLP item that spans all of ``data``."""
    data = bytes(data)
    item, end = _decode_at(data, 0)
    if end != len(data):
        raise RLPError("trailing bytes after item")
    return item