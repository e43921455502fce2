"""Validator records and their status predicates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ream.bls import PubKey
from ream.constants import (
    ETH1_ADDRESS_WITHDRAWAL_PREFIX,
    FAR_FUTURE_EPOCH,
    MAX_EFFECTIVE_BALANCE,
)
from ream.ssz import MAX_UINT64, container_root, uint64_root

_UINT64_FIELDS = (
    "effective_balance",
    "activation_eligibility_epoch",
    "activation_epoch",
    "exit_epoch",
    "withdrawable_epoch",
)


def _check_uint64(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_UINT64:
        raise ValueError(f"{name} must be a uint64, got {value!r}")


@dataclass(frozen=True)
class Validator:
    pubkey: PubKey
    withdrawal_credentials: bytes
    effective_balance: int
    slashed: bool
    activation_eligibility_epoch: int
    activation_epoch: int
    exit_epoch: int
    withdrawable_epoch: int

    def __post_init__(self) -> None:
        if not isinstance(self.pubkey, PubKey):
            object.__setattr__(self, "pubkey", PubKey(self.pubkey))
        credentials = bytes(self.withdrawal_credentials)
        if len(credentials) != 32:
            raise ValueError("withdrawal_credentials must be 32 bytes")
        object.__setattr__(self, "withdrawal_credentials", credentials)
        object.__setattr__(self, "slashed", bool(self.slashed))
        for name in _UINT64_FIELDS:
            _check_uint64(getattr(self, name), name)

    def has_eth1_withdrawal_credential(self) -> bool:
        """Whether the withdrawal credential has the 0x01 "eth1" prefix."""
        return self.withdrawal_credentials[:1] == ETH1_ADDRESS_WITHDRAWAL_PREFIX

    def is_fully_withdrawable_validator(self, balance: int, epoch: int) -> bool:
        return (
            self.has_eth1_withdrawal_credential()
            and self.withdrawable_epoch <= epoch
            and balance > 0
        )

    def is_partially_withdrawable_validator(self, balance: int) -> bool:
        return (
            self.has_eth1_withdrawal_credential()
            and self.effective_balance == MAX_EFFECTIVE_BALANCE
            and balance > MAX_EFFECTIVE_BALANCE
        )

    def is_slashable_validator(self, epoch: int) -> bool:
        return not self.slashed and self.activation_epoch <= epoch < self.withdrawable_epoch

    def is_active_validator(self, epoch: int) -> bool:
        return self.activation_eligibility_epoch <= epoch < self.exit_epoch

    def is_eligible_for_activation_queue(self) -> bool:
        return (
            self.activation_eligibility_epoch == FAR_FUTURE_EPOCH
            and self.effective_balance == MAX_EFFECTIVE_BALANCE
        )

    def hash_tree_root(self) -> bytes:
        return container_root(
            [
                self.pubkey.hash_tree_root(),
                self.withdrawal_credentials,
                uint64_root(self.effective_balance),
                uint64_root(int(self.slashed)),
                uint64_root(self.activation_eligibility_epoch),
                uint64_root(self.activation_epoch),
                uint64_root(self.exit_epoch),
                uint64_root(self.withdrawable_epoch),
            ]
        )