import pytest

from ream import rlp
from ream.rlp import RLPError
from ream.transaction import (
    AccessListItem,
    BlobTransaction,
    TransactionType,
    TransactionTypeError,
)


def _transaction(**overrides):
    fields = dict(
        chain_id=1,
        nonce=0,
        max_priority_fee_per_gas=1_000_000_000,
        max_fee_per_gas=30_000_000_000,
        gas_limit=21_000,
        to=bytes(range(20)),
        value=0,
        data=b"\x01\x02",
        access_list=[AccessListItem(address=b"\x22" * 20, storage_keys=[b"\x33" * 32])],
        max_fee_per_blob_gas=1,
        blob_versioned_hashes=[b"\x01" + b"\x44" * 31],
        y_parity=1,
        r=2**255,
        s=12345,
    )
    fields.update(overrides)
    return BlobTransaction(**fields)


@pytest.mark.parametrize(
    "first_byte, expected",
    [
        (3, TransactionType.BLOB_TRANSACTION),
        (2, TransactionType.FEE_MARKET_TRANSACTION),
        (1, TransactionType.ACCESS_LIST_TRANSACTION),
        (0, TransactionType.LEGACY_TRANSACTION),
        (0xF8, TransactionType.LEGACY_TRANSACTION),
    ],
)
def test_transaction_type(first_byte, expected):
    assert TransactionType.from_transaction(bytes([first_byte, 0xAA])) is expected


def test_empty_transaction_has_no_type():
    with pytest.raises(TransactionTypeError):
        TransactionType.from_transaction(b"")


def test_round_trip():
    transaction = _transaction()
    assert BlobTransaction.decode(transaction.encode()) == transaction


def test_round_trip_without_recipient():
    transaction = _transaction(to=None, access_list=[], blob_versioned_hashes=[])
    decoded = BlobTransaction.decode(transaction.encode())
    assert decoded == transaction
    assert decoded.to is None


def test_missing_recipient_encodes_as_empty_string():
    fields = rlp.decode(_transaction(to=None).encode())
    assert fields[5] == b""


def test_encoding_is_a_list_of_fourteen_fields():
    fields = rlp.decode(_transaction().encode())
    assert isinstance(fields, list)
    assert len(fields) == 14


def test_typed_envelope_decodes_after_type_byte():
    transaction = _transaction()
    raw = b"\x03" + transaction.encode()
    assert TransactionType.from_transaction(raw) is TransactionType.BLOB_TRANSACTION
    assert BlobTransaction.decode(raw[1:]).blob_versioned_hashes == [b"\x01" + b"\x44" * 31]


def test_wrong_field_count_raises():
    with pytest.raises(RLPError):
        BlobTransaction.decode(rlp.encode([1, 2, 3]))


def test_integer_with_leading_zero_raises():
    fields = rlp.decode(_transaction().encode())
    fields[0] = b"\x00\x01"
    with pytest.raises(RLPError):
        BlobTransaction.decode(rlp.encode(fields))


def test_short_address_raises():
    fields = rlp.decode(_transaction().encode())
    fields[5] = b"\x01" * 19
    with pytest.raises(RLPError):
        BlobTransaction.decode(rlp.encode(fields))


def test_bad_versioned_hash_length_raises():
    fields = rlp.decode(_transaction().encode())
    fields[10] = [b"\x01" * 31]
    with pytest.raises(RLPError):
        BlobTransaction.decode(rlp.encode(fields))


def test_oversized_y_parity_raises():
    fields = rlp.decode(_transaction().encode())
    fields[11] = b"\x01" + bytes(8)
    with pytest.raises(RLPError):
        BlobTransaction.decode(rlp.encode(fields))


def test_access_list_item_rejects_bad_key():
    with pytest.raises(ValueError):
        AccessListItem(address=b"\x22" * 20, storage_keys=[b"\x33" * 31])


def test_negative_value_rejected():
    with pytest.raises(ValueError):
        _transaction(value=-1)