"""Consensus helper functions: shuffling, committees, epochs and domains."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from itertools import pairwise
from typing import Any

from ream.constants import (
    GENESIS_FORK_VERSION,
    MAX_SEED_LOOKAHEAD,
    SHUFFLE_ROUND_COUNT,
    SLOTS_PER_EPOCH,
)
from ream.containers import ForkData, SigningData


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def compute_signing_root(ssz_object: Any, domain: bytes) -> bytes:
    """Signing root of an object with a ``hash_tree_root`` method and a domain."""
    return SigningData(object_root=ssz_object.hash_tree_root(), domain=domain).hash_tree_root()


def compute_shuffled_index(index: int, index_count: int, seed: bytes) -> int:
    """Position of ``index`` after the swap-or-not shuffle seeded by ``seed``."""
    if not 0 <= index < index_count:
        raise ValueError("Index must be less than index_count")
    seed = bytes(seed)
    for round_number in range(SHUFFLE_ROUND_COUNT):
        seed_with_round = seed + bytes([round_number])
        pivot = int.from_bytes(_sha256(seed_with_round)[:8], "little") % index_count
        flip = (pivot + index_count - index) % index_count
        position = max(index, flip)
        source = _sha256(seed_with_round + (position // 256).to_bytes(4, "little"))
        byte = source[(position % 256) // 8]
        if (byte >> (position % 8)) & 1:
            index = flip
    return index


def compute_committee(indices: Sequence[int], seed: bytes, index: int, count: int) -> list[int]:
    """The committee for ``indices``, ``seed``, ``index`` and committee ``count``."""
    if count <= 0:
        raise ValueError("count must be positive")
    total = len(indices)
    start = total * index // count
    end = total * (index + 1) // count
    return [indices[compute_shuffled_index(i, total, seed)] for i in range(start, end)]


def is_shuffling_stable(slot: int) -> bool:
    return slot % SLOTS_PER_EPOCH != 0


def compute_epoch_at_slot(slot: int) -> int:
    """The epoch number at ``slot``."""
    return slot // SLOTS_PER_EPOCH


def compute_start_slot_at_epoch(epoch: int) -> int:
    """The start slot of ``epoch``."""
    return epoch * SLOTS_PER_EPOCH


def compute_activation_exit_epoch(epoch: int) -> int:
    """The epoch in which activations and exits initiated in ``epoch`` take effect."""
    return epoch + 1 + MAX_SEED_LOOKAHEAD


def compute_domain(
    domain_type: bytes,
    fork_version: bytes | None = None,
    genesis_validators_root: bytes | None = None,
) -> bytes:
    """The 32-byte domain for ``domain_type`` and ``fork_version``."""
    domain_type = bytes(domain_type)
    if len(domain_type) != 4:
        raise ValueError("domain_type must be 4 bytes")
    fork_data = ForkData(
        current_version=GENESIS_FORK_VERSION if fork_version is None else fork_version,
        genesis_validators_root=(
            bytes(32) if genesis_validators_root is None else genesis_validators_root
        ),
    )
    return domain_type + fork_data.compute_fork_data_root()[:28]


def is_sorted_and_unique(indices: Sequence[int]) -> bool:
    return all(a < b for a, b in pairwise(indices))


def xor(bytes_1: bytes, bytes_2: bytes) -> bytes:
    """Bytewise XOR of the first 32 bytes of each argument."""
    if len(bytes_1) < 32 or len(bytes_2) < 32:
        raise ValueError("both inputs must be at least 32 bytes")
    return bytes(a ^ b for a, b in zip(bytes_1[:32], bytes_2[:32]))