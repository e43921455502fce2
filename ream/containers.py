"""Small consensus containers with SSZ hash tree roots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ream.ssz import MAX_UINT64, bytes_root, container_root, uint64_root


def _fixed_bytes(value: Any, size: int, name: str) -> bytes:
    data = bytes(value)
    if len(data) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(data)}")
    return data


def _uint64(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_UINT64:
        raise ValueError(f"{name} must be a uint64, got {value!r}")
    return value


def _parse_hex(text: str, size: int, name: str) -> bytes:
    if not isinstance(text, str):
        raise ValueError(f"{name} must be a hex string")
    digits = text[2:] if text.startswith("0x") else text
    try:
        data = bytes.fromhex(digits)
    except ValueError as err:
        raise ValueError(f"{name} is not valid hex: {err}") from err
    return _fixed_bytes(data, size, name)


@dataclass(frozen=True)
class ForkData:
    current_version: bytes
    genesis_validators_root: bytes

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "current_version", _fixed_bytes(self.current_version, 4, "current_version")
        )
        object.__setattr__(
            self,
            "genesis_validators_root",
            _fixed_bytes(self.genesis_validators_root, 32, "genesis_validators_root"),
        )

    def hash_tree_root(self) -> bytes:
        return container_root(
            [bytes_root(self.current_version), bytes_root(self.genesis_validators_root)]
        )

    def compute_fork_data_root(self) -> bytes:
        """The 32-byte fork data root, used in signature domains."""
        return self.hash_tree_root()

    def compute_fork_digest(self) -> bytes:
        """The 4-byte fork digest, used for domain separation on the p2p layer."""
        return self.compute_fork_data_root()[:4]


@dataclass(frozen=True)
class SigningData:
    object_root: bytes
    domain: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "object_root", _fixed_bytes(self.object_root, 32, "object_root"))
        object.__setattr__(self, "domain", _fixed_bytes(self.domain, 32, "domain"))

    def hash_tree_root(self) -> bytes:
        return container_root([self.object_root, self.domain])


@dataclass(frozen=True)
class HistoricalSummary:
    block_summary_root: bytes
    state_summary_root: bytes

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "block_summary_root",
            _fixed_bytes(self.block_summary_root, 32, "block_summary_root"),
        )
        object.__setattr__(
            self,
            "state_summary_root",
            _fixed_bytes(self.state_summary_root, 32, "state_summary_root"),
        )

    def hash_tree_root(self) -> bytes:
        return container_root([self.block_summary_root, self.state_summary_root])


@dataclass(frozen=True)
class LatestMessage:
    epoch: int
    root: bytes

    def __post_init__(self) -> None:
        _uint64(self.epoch, "epoch")
        object.__setattr__(self, "root", _fixed_bytes(self.root, 32, "root"))

    def hash_tree_root(self) -> bytes:
        return container_root([uint64_root(self.epoch), self.root])


@dataclass(frozen=True)
class VoluntaryExit:
    epoch: int
    validator_index: int

    def __post_init__(self) -> None:
        _uint64(self.epoch, "epoch")
        _uint64(self.validator_index, "validator_index")

    def hash_tree_root(self) -> bytes:
        return container_root([uint64_root(self.epoch), uint64_root(self.validator_index)])


@dataclass(frozen=True)
class Withdrawal:
    index: int
    validator_index: int
    address: bytes
    amount: int

    def __post_init__(self) -> None:
        _uint64(self.index, "index")
        _uint64(self.validator_index, "validator_index")
        object.__setattr__(self, "address", _fixed_bytes(self.address, 20, "address"))
        _uint64(self.amount, "amount")

    def hash_tree_root(self) -> bytes:
        return container_root(
            [
                uint64_root(self.index),
                uint64_root(self.validator_index),
                bytes_root(self.address),
                uint64_root(self.amount),
            ]
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "validator_index": self.validator_index,
            "address": "0x" + self.address.hex(),
            "amount": self.amount,
        }

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Withdrawal:
        try:
            return cls(
                index=data["index"],
                validator_index=data["validator_index"],
                address=_parse_hex(data["address"], 20, "address"),
                amount=data["amount"],
            )
        except KeyError as err:
            raise ValueError(f"missing field {err.args[0]!r}") from err