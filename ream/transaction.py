"""Typed execution-layer transactions, in particular blob transactions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ream import rlp
from ream.rlp import RLPError

_UINT256_LIMIT = 1 << 256
_UINT64_LIMIT = 1 << 64
_BLOB_TRANSACTION_FIELDS = 14


class TransactionTypeError(ValueError):
    """Raised when a transaction's type cannot be determined."""


class TransactionType(Enum):
    BLOB_TRANSACTION = "blob"
    LEGACY_TRANSACTION = "legacy"
    FEE_MARKET_TRANSACTION = "fee_market"
    ACCESS_LIST_TRANSACTION = "access_list"

    @classmethod
    def from_transaction(cls, transaction: bytes) -> TransactionType:
        """Classify an opaque transaction by its leading type byte."""
        if not transaction:
            raise TransactionTypeError("empty transaction")
        first = transaction[0]
        if first == 3:
            return cls.BLOB_TRANSACTION
        if first == 2:
            return cls.FEE_MARKET_TRANSACTION
        if first == 1:
            return cls.ACCESS_LIST_TRANSACTION
        return cls.LEGACY_TRANSACTION


def _fixed(value: Any, size: int, name: str) -> bytes:
    if not isinstance(value, (bytes, bytearray)):
        raise RLPError(f"{name} must be a byte string")
    data = bytes(value)
    if len(data) != size:
        raise RLPError(f"{name} must be {size} bytes, got {len(data)}")
    return data


def _uint(value: Any, limit: int, name: str) -> int:
    if not isinstance(value, (bytes, bytearray)):
        raise RLPError(f"{name} must be a byte string")
    if value[:1] == b"\x00":
        raise RLPError(f"{name} has leading zeros")
    number = int.from_bytes(value, "big")
    if number >= limit:
        raise RLPError(f"{name} overflows")
    return number


def _sequence(value: Any, name: str) -> list[Any]:
    if not isinstance(value, list):
        raise RLPError(f"{name} must be a list")
    return value


def _check_int(value: Any, limit: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < limit:
        raise ValueError(f"{name} out of range: {value!r}")


@dataclass
class AccessListItem:
    address: bytes
    storage_keys: list[bytes]

    def __post_init__(self) -> None:
        self.address = _fixed(self.address, 20, "address")
        self.storage_keys = [_fixed(key, 32, "storage key") for key in self.storage_keys]


@dataclass
class BlobTransaction:
    chain_id: int
    nonce: int
    max_priority_fee_per_gas: int
    max_fee_per_gas: int
    gas_limit: int
    to: bytes | None
    value: int
    data: bytes
    access_list: list[AccessListItem]
    max_fee_per_blob_gas: int
    blob_versioned_hashes: list[bytes]
    y_parity: int
    r: int
    s: int

    def __post_init__(self) -> None:
        for name in (
            "chain_id",
            "nonce",
            "max_priority_fee_per_gas",
            "max_fee_per_gas",
            "gas_limit",
            "value",
            "max_fee_per_blob_gas",
            "r",
            "s",
        ):
            _check_int(getattr(self, name), _UINT256_LIMIT, name)
        _check_int(self.y_parity, _UINT64_LIMIT, "y_parity")
        if self.to is not None:
            self.to = _fixed(self.to, 20, "to")
        self.data = bytes(self.data)
        self.access_list = list(self.access_list)
        self.blob_versioned_hashes = [
            _fixed(item, 32, "blob versioned hash") for item in self.blob_versioned_hashes
        ]

    @classmethod
    def decode(cls, data: bytes) -> BlobTransaction:
        """Decode the RLP payload of a blob transaction (without its type byte)."""
        fields = rlp.decode(data)
        if not isinstance(fields, list) or len(fields) != _BLOB_TRANSACTION_FIELDS:
            raise RLPError("blob transaction must be a list of 14 fields")
        (
            chain_id,
            nonce,
            max_priority_fee_per_gas,
            max_fee_per_gas,
            gas_limit,
            to,
            value,
            payload,
            access_list,
            max_fee_per_blob_gas,
            hashes,
            y_parity,
            r,
            s,
        ) = fields
        if not isinstance(to, bytes):
            raise RLPError("to must be a byte string")
        if not isinstance(payload, bytes):
            raise RLPError("data must be a byte string")
        items = []
        for entry in _sequence(access_list, "access list"):
            entry = _sequence(entry, "access list item")
            if len(entry) != 2:
                raise RLPError("access list item must have 2 fields")
            address, keys = entry
            items.append(
                AccessListItem(
                    address=_fixed(address, 20, "address"),
                    storage_keys=[
                        _fixed(key, 32, "storage key") for key in _sequence(keys, "storage keys")
                    ],
                )
            )
        return cls(
            chain_id=_uint(chain_id, _UINT256_LIMIT, "chain_id"),
            nonce=_uint(nonce, _UINT256_LIMIT, "nonce"),
            max_priority_fee_per_gas=_uint(
                max_priority_fee_per_gas, _UINT256_LIMIT, "max_priority_fee_per_gas"
            ),
            max_fee_per_gas=_uint(max_fee_per_gas, _UINT256_LIMIT, "max_fee_per_gas"),
            gas_limit=_uint(gas_limit, _UINT256_LIMIT, "gas_limit"),
            to=None if to == b"" else _fixed(to, 20, "to"),
            value=_uint(value, _UINT256_LIMIT, "value"),
            data=payload,
            access_list=items,
            max_fee_per_blob_gas=_uint(
                max_fee_per_blob_gas, _UINT256_LIMIT, "max_fee_per_blob_gas"
            ),
            blob_versioned_hashes=[
                _fixed(item, 32, "blob versioned hash")
                for item in _sequence(hashes, "blob versioned hashes")
            ],
            y_parity=_uint(y_parity, _UINT64_LIMIT, "y_parity"),
            r=_uint(r, _UINT256_LIMIT, "r"),
            s=_uint(s, _UINT256_LIMIT, "s"),
        )

    def encode(self) -> bytes:
        """RLP payload of the transaction (without its type byte)."""
        return rlp.encode(
            [
                self.chain_id,
                self.nonce,
                self.max_priority_fee_per_gas,
                self.max_fee_per_gas,
                self.gas_limit,
                b"" if self.to is None else self.to,
                self.value,
                self.data,
                [[item.address, item.storage_keys] for item in self.access_list],
                self.max_fee_per_blob_gas,
                self.blob_versioned_hashes,
                self.y_parity,
                self.r,
                self.s,
            ]
        )