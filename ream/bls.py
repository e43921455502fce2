"""BLS public keys and signatures as fixed-size byte containers."""

from __future__ import annotations

from dataclasses import dataclass, field

from ream.ssz import bytes_root, container_root

DST = b"BLS_SIG_BLS12381G2_XMD:SHA-256_SSWU_RO_POP_"

PUBKEY_LENGTH = 48
SIGNATURE_LENGTH = 96


class BLSError(ValueError):
    """Raised for malformed BLS keys or signatures."""


def _decode_hex(text: str) -> bytes:
    if not isinstance(text, str):
        raise BLSError("expected a hex string")
    digits = text[2:] if text.startswith("0x") else text
    try:
        return bytes.fromhex(digits)
    except ValueError as err:
        raise BLSError(f"invalid hex: {err}") from err


def _checked(data: bytes, size: int) -> bytes:
    data = bytes(data)
    if len(data) != size:
        raise BLSError("invalid byte length")
    return data


@dataclass(frozen=True)
class PubKey:
    inner: bytes = bytes(PUBKEY_LENGTH)

    def __post_init__(self) -> None:
        object.__setattr__(self, "inner", _checked(self.inner, PUBKEY_LENGTH))

    @classmethod
    def from_hex(cls, text: str) -> PubKey:
        """Parse a hex string, with or without a ``0x`` prefix."""
        return cls(_checked(_decode_hex(text), PUBKEY_LENGTH))

    def to_hex(self) -> str:
        return self.inner.hex()

    def __bytes__(self) -> bytes:
        return self.inner

    def hash_tree_root(self) -> bytes:
        return container_root([bytes_root(self.inner)])


@dataclass(frozen=True)
class BLSSignature:
    inner: bytes = bytes(SIGNATURE_LENGTH)

    def __post_init__(self) -> None:
        object.__setattr__(self, "inner", _checked(self.inner, SIGNATURE_LENGTH))

    @classmethod
    def from_hex(cls, text: str) -> BLSSignature:
        """Parse a hex string, with or without a ``0x`` prefix."""
        return cls(_checked(_decode_hex(text), SIGNATURE_LENGTH))

    def to_hex(self) -> str:
        return self.inner.hex()

    @classmethod
    def infinity(cls) -> BLSSignature:
        """The compressed point at infinity."""
        return cls(b"\xc0" + bytes(SIGNATURE_LENGTH - 1))

    def __bytes__(self) -> bytes:
        return self.inner

    def hash_tree_root(self) -> bytes:
        return container_root([bytes_root(self.inner)])


@dataclass(frozen=True)
class AggregatePubKey:
    inner: PubKey = field(default_factory=PubKey)

    def __post_init__(self) -> None:
        if not isinstance(self.inner, PubKey):
            object.__setattr__(self, "inner", PubKey(self.inner))

    def to_pubkey(self) -> PubKey:
        return self.inner

    def hash_tree_root(self) -> bytes:
        return container_root([self.inner.hash_tree_root()])