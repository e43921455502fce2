"""Engine API request and response types with their JSON forms."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ream.constants import MAX_WITHDRAWALS_PER_PAYLOAD
from ream.containers import Withdrawal
from ream.kzg_commitment import KZGCommitment

BYTES_PER_LOGS_BLOOM = 256
MAX_EXTRA_DATA_BYTES = 32
MAX_BYTES_PER_TRANSACTION = 1 << 30
MAX_TRANSACTIONS_PER_PAYLOAD = 1 << 20
MAX_BLOBS_PER_BUNDLE = 1 << 20
MAX_PROOFS_PER_BUNDLE = 1024
MAX_PROOF_BYTES = 96

_HEX_DIGITS = frozenset(string.hexdigits)


def _require(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


def _to_hex(data: bytes) -> str:
    return "0x" + bytes(data).hex()


def _hex_digits(text: str, name: str) -> bytes:
    try:
        return bytes.fromhex(text)
    except ValueError as err:
        raise ValueError(f"{name} is not valid hex: {err}") from err


def _fixed_from_hex(text: Any, size: int, name: str) -> bytes:
    if not isinstance(text, str):
        raise ValueError(f"{name} must be a hex string")
    data = _hex_digits(text[2:] if text.startswith("0x") else text, name)
    if len(data) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(data)}")
    return data


def _data_from_hex(text: Any, name: str, limit: int | None = None) -> bytes:
    if not isinstance(text, str) or not text.startswith("0x"):
        raise ValueError(f"{name} must be a hex string with 0x prefix")
    data = _hex_digits(text[2:], name)
    if limit is not None and len(data) > limit:
        raise ValueError(f"{name} exceeds {limit} bytes")
    return data


def _quantity_from_hex(text: Any, bits: int, name: str) -> int:
    if not isinstance(text, str) or not text.startswith("0x"):
        raise ValueError(f"{name} must be a hex quantity with 0x prefix")
    digits = text[2:]
    if not digits or not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"{name} is not a hex quantity: {text!r}")
    if len(digits) > 1 and digits[0] == "0":
        raise ValueError(f"{name} cannot have leading zeros")
    value = int(digits, 16)
    if value >> bits:
        raise ValueError(f"{name} overflows {bits} bits")
    return value


def _lenient_u256(text: Any, name: str) -> int:
    if not isinstance(text, str):
        raise ValueError(f"{name} must be a string")
    if text.startswith("0x"):
        digits, base, allowed = text[2:], 16, _HEX_DIGITS
    else:
        digits, base, allowed = text, 10, frozenset(string.digits)
    if not digits or not set(digits) <= allowed:
        raise ValueError(f"{name} is not a number: {text!r}")
    value = int(digits, base)
    if value >> 256:
        raise ValueError(f"{name} overflows 256 bits")
    return value


def _to_quantity(value: int) -> str:
    return hex(value)


def _exact(value: Any, size: int, name: str) -> bytes:
    data = bytes(value)
    if len(data) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(data)}")
    return data


def _bounded(value: Any, limit: int, name: str) -> bytes:
    data = bytes(value)
    if len(data) > limit:
        raise ValueError(f"{name} exceeds {limit} bytes")
    return data


def _check_uint(value: Any, bits: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0 or value >> bits:
        raise ValueError(f"{name} must be a uint{bits}, got {value!r}")


def _json_list(value: Any, name: str, limit: int) -> list[Any]:
    if not isinstance(value, list):
        raise ValueError(f"{name} must be a list")
    if len(value) > limit:
        raise ValueError(f"{name} exceeds {limit} entries")
    return value


def _withdrawals(values: Any) -> list[Withdrawal]:
    withdrawals = list(values)
    if len(withdrawals) > MAX_WITHDRAWALS_PER_PAYLOAD:
        raise ValueError(f"withdrawals exceed {MAX_WITHDRAWALS_PER_PAYLOAD} entries")
    if not all(isinstance(item, Withdrawal) for item in withdrawals):
        raise ValueError("withdrawals must be Withdrawal instances")
    return withdrawals


def _withdrawals_from_json(value: Any) -> list[Withdrawal]:
    return [
        Withdrawal.from_json(item)
        for item in _json_list(value, "withdrawals", MAX_WITHDRAWALS_PER_PAYLOAD)
    ]


class PayloadStatus(Enum):
    VALID = "VALID"
    INVALID = "INVALID"
    SYNCING = "SYNCING"
    ACCEPTED = "ACCEPTED"
    INVALID_BLOCK_HASH = "INVALID_BLOCK_HASH"


@dataclass
class PayloadStatusV1:
    status: PayloadStatus
    latest_valid_hash: bytes | None = None
    validation_error: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> PayloadStatusV1:
        raw_status = _require(data, "status")
        try:
            status = PayloadStatus(raw_status)
        except ValueError:
            raise ValueError(f"unknown payload status {raw_status!r}") from None
        latest = data.get("latestValidHash")
        error = data.get("validationError")
        if error is not None and not isinstance(error, str):
            raise ValueError("validationError must be a string")
        return cls(
            status=status,
            latest_valid_hash=None if latest is None else _fixed_from_hex(latest, 32, "latestValidHash"),
            validation_error=error,
        )


@dataclass
class SyncingInfo:
    starting_block: int
    current_block: int
    highest_block: int


def parse_eth_syncing(value: Any) -> SyncingInfo | bool:
    """Parse an ``eth_syncing`` result: sync progress, or a bare boolean."""
    if isinstance(value, dict):
        return SyncingInfo(
            starting_block=_lenient_u256(_require(value, "startingBlock"), "startingBlock"),
            current_block=_lenient_u256(_require(value, "currentBlock"), "currentBlock"),
            highest_block=_lenient_u256(_require(value, "highestBlock"), "highestBlock"),
        )
    if isinstance(value, bool):
        return value
    raise ValueError(f"unexpected eth_syncing result {value!r}")


@dataclass
class ForkchoiceStateV1:
    head_block_hash: bytes
    safe_block_hash: bytes
    finalized_block_hash: bytes

    def __post_init__(self) -> None:
        self.head_block_hash = _exact(self.head_block_hash, 32, "head_block_hash")
        self.safe_block_hash = _exact(self.safe_block_hash, 32, "safe_block_hash")
        self.finalized_block_hash = _exact(self.finalized_block_hash, 32, "finalized_block_hash")

    def to_json(self) -> dict[str, Any]:
        return {
            "headBlockHash": _to_hex(self.head_block_hash),
            "safeBlockHash": _to_hex(self.safe_block_hash),
            "finalizedBlockHash": _to_hex(self.finalized_block_hash),
        }


@dataclass
class PayloadAttributesV3:
    timestamp: int
    prev_randao: bytes
    suggested_fee_recipient: bytes
    withdrawals: list[Withdrawal]
    parent_beacon_block_root: bytes

    def __post_init__(self) -> None:
        _check_uint(self.timestamp, 64, "timestamp")
        self.prev_randao = _exact(self.prev_randao, 32, "prev_randao")
        self.suggested_fee_recipient = _exact(
            self.suggested_fee_recipient, 20, "suggested_fee_recipient"
        )
        self.withdrawals = _withdrawals(self.withdrawals)
        self.parent_beacon_block_root = _exact(
            self.parent_beacon_block_root, 32, "parent_beacon_block_root"
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "timestamp": _to_quantity(self.timestamp),
            "prevRandao": _to_hex(self.prev_randao),
            "suggestedFeeRecipient": _to_hex(self.suggested_fee_recipient),
            "withdrawals": [item.to_json() for item in self.withdrawals],
            "parentBeaconBlockRoot": _to_hex(self.parent_beacon_block_root),
        }


@dataclass
class ForkchoiceUpdateResult:
    payload_status: PayloadStatusV1
    payload_id: bytes | None = None

    @classmethod
    def from_json(cls, data: Any) -> ForkchoiceUpdateResult:
        status = PayloadStatusV1.from_json(_require(data, "payloadStatus"))
        payload_id = data.get("payloadId")
        return cls(
            payload_status=status,
            payload_id=None if payload_id is None else _fixed_from_hex(payload_id, 8, "payloadId"),
        )


@dataclass
class BlobsAndProofV1:
    blob: list[bytes]
    proofs: list[bytes]

    @classmethod
    def from_json(cls, data: Any) -> BlobsAndProofV1:
        blob = [
            _data_from_hex(item, "blob", MAX_BYTES_PER_TRANSACTION)
            for item in _json_list(_require(data, "blob"), "blob", MAX_BLOBS_PER_BUNDLE)
        ]
        proofs = [
            _data_from_hex(item, "proof", MAX_PROOF_BYTES)
            for item in _json_list(_require(data, "proofs"), "proofs", MAX_PROOFS_PER_BUNDLE)
        ]
        return cls(blob=blob, proofs=proofs)


_PAYLOAD_UINT64_FIELDS = (
    "block_number",
    "gas_limit",
    "gas_used",
    "timestamp",
    "blob_gas_used",
    "excess_blob_gas",
)
_PAYLOAD_ROOT_FIELDS = ("parent_hash", "state_root", "receipts_root", "prev_randao", "block_hash")


@dataclass
class ExecutionPayloadV3:
    parent_hash: bytes
    fee_recipient: bytes
    state_root: bytes
    receipts_root: bytes
    logs_bloom: bytes
    prev_randao: bytes
    block_number: int
    gas_limit: int
    gas_used: int
    timestamp: int
    extra_data: bytes
    base_fee_per_gas: int
    block_hash: bytes
    transactions: list[bytes]
    withdrawals: list[Withdrawal]
    blob_gas_used: int
    excess_blob_gas: int

    def __post_init__(self) -> None:
        for name in _PAYLOAD_ROOT_FIELDS:
            setattr(self, name, _exact(getattr(self, name), 32, name))
        self.fee_recipient = _exact(self.fee_recipient, 20, "fee_recipient")
        self.logs_bloom = _exact(self.logs_bloom, BYTES_PER_LOGS_BLOOM, "logs_bloom")
        self.extra_data = _bounded(self.extra_data, MAX_EXTRA_DATA_BYTES, "extra_data")
        for name in _PAYLOAD_UINT64_FIELDS:
            _check_uint(getattr(self, name), 64, name)
        _check_uint(self.base_fee_per_gas, 256, "base_fee_per_gas")
        transactions = [
            _bounded(item, MAX_BYTES_PER_TRANSACTION, "transaction") for item in self.transactions
        ]
        if len(transactions) > MAX_TRANSACTIONS_PER_PAYLOAD:
            raise ValueError(f"transactions exceed {MAX_TRANSACTIONS_PER_PAYLOAD} entries")
        self.transactions = transactions
        self.withdrawals = _withdrawals(self.withdrawals)

    def to_json(self) -> dict[str, Any]:
        return {
            "parentHash": _to_hex(self.parent_hash),
            "feeRecipient": _to_hex(self.fee_recipient),
            "stateRoot": _to_hex(self.state_root),
            "receiptsRoot": _to_hex(self.receipts_root),
            "logsBloom": _to_hex(self.logs_bloom),
            "prevRandao": _to_hex(self.prev_randao),
            "blockNumber": _to_quantity(self.block_number),
            "gasLimit": _to_quantity(self.gas_limit),
            "gasUsed": _to_quantity(self.gas_used),
            "timestamp": _to_quantity(self.timestamp),
            "extraData": _to_hex(self.extra_data),
            "baseFeePerGas": _to_quantity(self.base_fee_per_gas),
            "blockHash": _to_hex(self.block_hash),
            "transactions": [_to_hex(item) for item in self.transactions],
            "withdrawals": [item.to_json() for item in self.withdrawals],
            "blobGasUsed": _to_quantity(self.blob_gas_used),
            "excessBlobGas": _to_quantity(self.excess_blob_gas),
        }

    @classmethod
    def from_json(cls, data: Any) -> ExecutionPayloadV3:
        def root(key: str) -> bytes:
            return _fixed_from_hex(_require(data, key), 32, key)

        def quantity(key: str, bits: int = 64) -> int:
            return _quantity_from_hex(_require(data, key), bits, key)

        transactions = [
            _data_from_hex(item, "transaction", MAX_BYTES_PER_TRANSACTION)
            for item in _json_list(
                _require(data, "transactions"), "transactions", MAX_TRANSACTIONS_PER_PAYLOAD
            )
        ]
        logs_bloom = _data_from_hex(_require(data, "logsBloom"), "logsBloom")
        return cls(
            parent_hash=root("parentHash"),
            fee_recipient=_fixed_from_hex(_require(data, "feeRecipient"), 20, "feeRecipient"),
            state_root=root("stateRoot"),
            receipts_root=root("receiptsRoot"),
            logs_bloom=_exact(logs_bloom, BYTES_PER_LOGS_BLOOM, "logsBloom"),
            prev_randao=root("prevRandao"),
            block_number=quantity("blockNumber"),
            gas_limit=quantity("gasLimit"),
            gas_used=quantity("gasUsed"),
            timestamp=quantity("timestamp"),
            extra_data=_data_from_hex(
                _require(data, "extraData"), "extraData", MAX_EXTRA_DATA_BYTES
            ),
            base_fee_per_gas=quantity("baseFeePerGas", 256),
            block_hash=root("blockHash"),
            transactions=transactions,
            withdrawals=_withdrawals_from_json(_require(data, "withdrawals")),
            blob_gas_used=quantity("blobGasUsed"),
            excess_blob_gas=quantity("excessBlobGas"),
        )


@dataclass
class BlobsBundleV1:
    blobs: list[KZGCommitment]
    commitments: list[bytes]
    proofs: list[bytes]

    @classmethod
    def from_json(cls, data: Any) -> BlobsBundleV1:
        blobs = []
        for item in _json_list(_require(data, "blobs"), "blobs", MAX_BLOBS_PER_BUNDLE):
            if not isinstance(item, str):
                raise ValueError("blob must be a hex string")
            blobs.append(KZGCommitment.from_str(item))

        def byte_lists(key: str) -> list[bytes]:
            return [
                _data_from_hex(item, key, MAX_PROOF_BYTES)
                for item in _json_list(_require(data, key), key, MAX_PROOFS_PER_BUNDLE)
            ]

        return cls(blobs=blobs, commitments=byte_lists("commitments"), proofs=byte_lists("proofs"))


@dataclass
class PayloadV3:
    execution_payload: ExecutionPayloadV3
    block_value: bytes
    blobs_bundle: BlobsBundleV1
    should_override_builder: bool

    @classmethod
    def from_json(cls, data: Any) -> PayloadV3:
        override = _require(data, "shouldOverideBuilder")
        if not isinstance(override, bool):
            raise ValueError("shouldOverideBuilder must be a boolean")
        return cls(
            execution_payload=ExecutionPayloadV3.from_json(_require(data, "executionPayload")),
            block_value=_fixed_from_hex(_require(data, "blockValue"), 32, "blockValue"),
            blobs_bundle=BlobsBundleV1.from_json(_require(data, "blobsBundle")),
            should_override_builder=override,
        )