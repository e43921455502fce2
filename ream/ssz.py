"""SSZ hash-tree-root primitives (SHA-256 merkleization)."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable

BYTES_PER_CHUNK = 32
ZERO_CHUNK = bytes(BYTES_PER_CHUNK)
MAX_UINT64 = 2**64 - 1

_zero_hashes = [ZERO_CHUNK]


def _hash_pair(left: bytes, right: bytes) -> bytes:
    return hashlib.sha256(left + right).digest()


def _zero_hash(depth: int) -> bytes:
    while len(_zero_hashes) <= depth:
        last = _zero_hashes[-1]
        _zero_hashes.append(_hash_pair(last, last))
    return _zero_hashes[depth]


def pack_bytes(data: bytes) -> list[bytes]:
    """Split ``data`` into 32-byte chunks, zero-padding the last one."""
    data = bytes(data)
    return [
        data[start : start + BYTES_PER_CHUNK].ljust(BYTES_PER_CHUNK, b"\x00")
        for start in range(0, len(data), BYTES_PER_CHUNK)
    ]


def merkleize(chunks: Iterable[bytes], limit: int | None = None) -> bytes:
    """Merkle root of ``chunks``, padded with zero chunks up to ``limit``."""
    layer = [bytes(chunk) for chunk in chunks]
    if any(len(chunk) != BYTES_PER_CHUNK for chunk in layer):
        raise ValueError("every chunk must be 32 bytes")
    if limit is None:
        limit = len(layer)
    if len(layer) > limit:
        raise ValueError(f"{len(layer)} chunks exceed the limit of {limit}")
    depth = max(limit - 1, 0).bit_length()
    if not layer:
        return _zero_hash(depth)
    for level in range(depth):
        if len(layer) % 2:
            layer.append(_zero_hash(level))
        layer = [_hash_pair(left, right) for left, right in zip(layer[::2], layer[1::2])]
    return layer[0]


def mix_in_length(root: bytes, length: int) -> bytes:
    """Mix a list length into a Merkle root."""
    if length < 0:
        raise ValueError("length must not be negative")
    return _hash_pair(bytes(root), length.to_bytes(BYTES_PER_CHUNK, "little"))


def uint64_root(value: int) -> bytes:
    """Hash tree root of an unsigned 64-bit integer."""
    if isinstance(value, bool):
        value = int(value)
    if not isinstance(value, int) or not 0 <= value <= MAX_UINT64:
        raise ValueError(f"not a uint64: {value!r}")
    return value.to_bytes(8, "little").ljust(BYTES_PER_CHUNK, b"\x00")


def bytes_root(data: bytes) -> bytes:
    """Hash tree root of a fixed-length byte vector."""
    return merkleize(pack_bytes(data))


def container_root(field_roots: Iterable[bytes]) -> bytes:
    """Hash tree root of a container given the roots of its fields."""
    return merkleize(list(field_roots))