import pytest

from ream.containers import (
    ForkData,
    HistoricalSummary,
    LatestMessage,
    SigningData,
    VoluntaryExit,
    Withdrawal,
)
from ream.ssz import bytes_root, container_root, uint64_root

ZERO_PAIR_ROOT = bytes.fromhex(
    "f5a5fd42d16a20302798ef6ed309979b43003d2320d9f0e8ea9831a92759fb4b"
)


def test_fork_data_zero_root():
    fork_data = ForkData(bytes(4), bytes(32))
    assert fork_data.compute_fork_data_root() == ZERO_PAIR_ROOT


def test_fork_digest_is_prefix_of_root():
    fork_data = ForkData(bytes.fromhex("03000000"), b"\x42" * 32)
    digest = fork_data.compute_fork_digest()
    assert len(digest) == 4
    assert digest == fork_data.compute_fork_data_root()[:4]


def test_fork_data_root_depends_on_version():
    a = ForkData(bytes.fromhex("00000000"), b"\x01" * 32)
    b = ForkData(bytes.fromhex("01000000"), b"\x01" * 32)
    assert a.hash_tree_root() != b.hash_tree_root()
    assert a.hash_tree_root() == ForkData(bytes(4), b"\x01" * 32).hash_tree_root()


def test_fork_data_rejects_bad_length():
    with pytest.raises(ValueError):
        ForkData(bytes(3), bytes(32))


def test_signing_data_root():
    signing = SigningData(b"\x01" * 32, b"\x02" * 32)
    assert signing.hash_tree_root() == container_root([b"\x01" * 32, b"\x02" * 32])


def test_historical_summary_zero_root():
    assert HistoricalSummary(bytes(32), bytes(32)).hash_tree_root() == ZERO_PAIR_ROOT


def test_latest_message_root():
    message = LatestMessage(epoch=5, root=b"\x33" * 32)
    assert message.hash_tree_root() == container_root([uint64_root(5), b"\x33" * 32])


def test_latest_message_rejects_negative_epoch():
    with pytest.raises(ValueError):
        LatestMessage(epoch=-1, root=bytes(32))


def test_voluntary_exit_root():
    exit_ = VoluntaryExit(epoch=10, validator_index=7)
    assert exit_.hash_tree_root() == container_root([uint64_root(10), uint64_root(7)])


def test_withdrawal_root():
    withdrawal = Withdrawal(index=1, validator_index=2, address=b"\xab" * 20, amount=3)
    expected = container_root(
        [uint64_root(1), uint64_root(2), bytes_root(b"\xab" * 20), uint64_root(3)]
    )
    assert withdrawal.hash_tree_root() == expected


def test_withdrawal_json_round_trip():
    withdrawal = Withdrawal(index=1, validator_index=2, address=b"\xab" * 20, amount=3)
    data = withdrawal.to_json()
    assert data["address"] == "0x" + "ab" * 20
    assert data["amount"] == 3
    assert Withdrawal.from_json(data) == withdrawal


def test_withdrawal_from_json_missing_field():
    with pytest.raises(ValueError):
        Withdrawal.from_json({"index": 1, "validator_index": 2, "amount": 3})


def test_withdrawal_rejects_short_address():
    with pytest.raises(ValueError):
        Withdrawal(index=0, validator_index=0, address=b"\x00" * 19, amount=0)