import hashlib

import pytest

from ream.kzg_commitment import KZGCommitment
from ream.ssz import bytes_root

COMMITMENT_STR = (
    "0x53fa09af35d1d1a9e76f65e16112a9064ce30d1e4e2df98583f0f5dc2e7dd13a"
    "4f421a9c89f518fafd952df76f23adac"
)


def test_kzg_commitment_display():
    assert str(KZGCommitment.from_str(COMMITMENT_STR)) == "0x53fa…adac"


def test_kzg_commitment_debug():
    commitment = KZGCommitment.from_str(COMMITMENT_STR)
    assert f"0x{commitment!r}" == COMMITMENT_STR


def test_kzg_commitment_tree_hash_root():
    commitment = KZGCommitment.from_str(COMMITMENT_STR)
    assert commitment.hash_tree_root() == bytes_root(commitment.data)


def test_from_str_without_prefix():
    assert KZGCommitment.from_str(COMMITMENT_STR[2:]) == KZGCommitment.from_str(COMMITMENT_STR)


def test_to_json_round_trip():
    commitment = KZGCommitment.from_str(COMMITMENT_STR)
    assert commitment.to_json() == COMMITMENT_STR[2:]
    assert KZGCommitment.from_str(commitment.to_json()) == commitment


def test_invalid_length():
    with pytest.raises(ValueError, match="InvalidByteLength: got 2, expected 48"):
        KZGCommitment.from_str("0xabcd")


def test_invalid_hex():
    with pytest.raises(ValueError):
        KZGCommitment.from_str("0xzz" + "00" * 47)


def test_empty_for_testing():
    assert KZGCommitment.empty_for_testing().data == bytes(48)


def test_versioned_hash():
    commitment = KZGCommitment.from_str(COMMITMENT_STR)
    versioned = commitment.calculate_versioned_hash()
    assert len(versioned) == 32
    assert versioned[0] == 1
    assert versioned[1:] == hashlib.sha256(commitment.data).digest()[1:]