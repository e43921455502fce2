"""KZG commitments and their versioned hashes."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from ream.ssz import bytes_root

BYTES_PER_COMMITMENT = 48
VERSIONED_HASH_VERSION_KZG = 0x01


@dataclass(frozen=True)
class KZGCommitment:
    data: bytes

    def __post_init__(self) -> None:
        data = bytes(self.data)
        if len(data) != BYTES_PER_COMMITMENT:
            raise ValueError(
                f"InvalidByteLength: got {len(data)}, expected {BYTES_PER_COMMITMENT}"
            )
        object.__setattr__(self, "data", data)

    @classmethod
    def from_str(cls, text: str) -> KZGCommitment:
        """Parse a hex string, with or without a ``0x`` prefix."""
        digits = text[2:] if text.startswith("0x") else text
        try:
            data = bytes.fromhex(digits)
        except ValueError as err:
            raise ValueError(f"invalid hex: {err}") from err
        return cls(data)

    @classmethod
    def empty_for_testing(cls) -> KZGCommitment:
        return cls(bytes(BYTES_PER_COMMITMENT))

    def calculate_versioned_hash(self) -> bytes:
        digest = bytearray(hashlib.sha256(self.data).digest())
        digest[0] = VERSIONED_HASH_VERSION_KZG
        return bytes(digest)

    def hash_tree_root(self) -> bytes:
        return bytes_root(self.data)

    def to_json(self) -> str:
        return self.data.hex()

    def __str__(self) -> str:
        return f"0x{self.data[:2].hex()}…{self.data[-2:].hex()}"

    def __repr__(self) -> str:
        return self.data.hex()