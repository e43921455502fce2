from dataclasses import replace

import pytest

from ream.bls import PubKey
from ream.constants import FAR_FUTURE_EPOCH, MAX_EFFECTIVE_BALANCE
from ream.validator import Validator

ETH1_CREDENTIALS = b"\x01" + bytes(31)
BLS_CREDENTIALS = b"\x00" + bytes(31)


def make_validator(**overrides):
    fields = dict(
        pubkey=PubKey(),
        withdrawal_credentials=ETH1_CREDENTIALS,
        effective_balance=MAX_EFFECTIVE_BALANCE,
        slashed=False,
        activation_eligibility_epoch=2,
        activation_epoch=3,
        exit_epoch=10,
        withdrawable_epoch=20,
    )
    fields.update(overrides)
    return Validator(**fields)


def test_eth1_withdrawal_credential():
    assert make_validator().has_eth1_withdrawal_credential() is True
    bls = make_validator(withdrawal_credentials=BLS_CREDENTIALS)
    assert bls.has_eth1_withdrawal_credential() is False


def test_fully_withdrawable():
    v = make_validator()
    assert v.is_fully_withdrawable_validator(1, 20) is True
    assert v.is_fully_withdrawable_validator(1, 19) is False
    assert v.is_fully_withdrawable_validator(0, 25) is False
    bls = make_validator(withdrawal_credentials=BLS_CREDENTIALS)
    assert bls.is_fully_withdrawable_validator(1, 25) is False


def test_partially_withdrawable():
    v = make_validator()
    assert v.is_partially_withdrawable_validator(MAX_EFFECTIVE_BALANCE + 1) is True
    assert v.is_partially_withdrawable_validator(MAX_EFFECTIVE_BALANCE) is False
    lower = make_validator(effective_balance=MAX_EFFECTIVE_BALANCE - 1)
    assert lower.is_partially_withdrawable_validator(MAX_EFFECTIVE_BALANCE + 1) is False


def test_slashable():
    v = make_validator()
    assert v.is_slashable_validator(3) is True
    assert v.is_slashable_validator(19) is True
    assert v.is_slashable_validator(2) is False
    assert v.is_slashable_validator(20) is False
    assert make_validator(slashed=True).is_slashable_validator(5) is False


def test_active_uses_eligibility_and_exit_epochs():
    v = make_validator()
    assert v.is_active_validator(2) is True
    assert v.is_active_validator(9) is True
    assert v.is_active_validator(1) is False
    assert v.is_active_validator(10) is False


def test_eligible_for_activation_queue():
    queued = make_validator(activation_eligibility_epoch=FAR_FUTURE_EPOCH)
    assert queued.is_eligible_for_activation_queue() is True
    assert make_validator().is_eligible_for_activation_queue() is False
    short = make_validator(
        activation_eligibility_epoch=FAR_FUTURE_EPOCH,
        effective_balance=MAX_EFFECTIVE_BALANCE - 1,
    )
    assert short.is_eligible_for_activation_queue() is False


def test_hash_tree_root_deterministic_and_sensitive():
    v = make_validator()
    assert v.hash_tree_root() == make_validator().hash_tree_root()
    assert len(v.hash_tree_root()) == 32
    assert replace(v, slashed=True).hash_tree_root() != v.hash_tree_root()
    assert replace(v, exit_epoch=11).hash_tree_root() != v.hash_tree_root()


def test_invalid_fields_rejected():
    with pytest.raises(ValueError):
        make_validator(withdrawal_credentials=bytes(31))
    with pytest.raises(ValueError):
        make_validator(exit_epoch=-1)
    with pytest.raises(ValueError):
        make_validator(effective_balance=2**64)