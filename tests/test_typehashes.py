"""
Tests for the EIP-3009 type hash constants.
"""

import pytest
from eth_utils import keccak

from eip3009.signing.typehashes import (
    CANCEL_AUTHORIZATION_TYPE_STRING,
    CANCEL_AUTHORIZATION_TYPEHASH,
    RECEIVE_WITH_AUTHORIZATION_TYPE_STRING,
    RECEIVE_WITH_AUTHORIZATION_TYPEHASH,
    TRANSFER_WITH_AUTHORIZATION_TYPE_STRING,
    TRANSFER_WITH_AUTHORIZATION_TYPEHASH,
    eip712_types_for,
    type_hash_for,
    type_string_for,
)
from eip3009.types import AuthorizationIntent


@pytest.mark.parametrize(
    "type_string,type_hash",
    [
        (TRANSFER_WITH_AUTHORIZATION_TYPE_STRING, TRANSFER_WITH_AUTHORIZATION_TYPEHASH),
        (RECEIVE_WITH_AUTHORIZATION_TYPE_STRING, RECEIVE_WITH_AUTHORIZATION_TYPEHASH),
        (CANCEL_AUTHORIZATION_TYPE_STRING, CANCEL_AUTHORIZATION_TYPEHASH),
    ],
)
def test_constant_is_keccak_of_type_string(type_string, type_hash):
    assert keccak(text=type_string) == type_hash


def test_published_values():
    assert TRANSFER_WITH_AUTHORIZATION_TYPEHASH.hex() == (
        "7c7c6cdb67a18743f49ec6fa9b35f50d52ed05cbed4cc592e13b44501c1a2267"
    )
    assert RECEIVE_WITH_AUTHORIZATION_TYPEHASH.hex() == (
        "d099cc98ef71107a616c4f0f941f04c322d8e254fe26b3c6668db87aae413de8"
    )
    assert CANCEL_AUTHORIZATION_TYPEHASH.hex() == (
        "158b0a9edf7a828aad02f63cd515c68ef2f50ba807396f6d12842833a1597429"
    )


def test_lookup_by_intent():
    assert type_hash_for(AuthorizationIntent.TRANSFER) == TRANSFER_WITH_AUTHORIZATION_TYPEHASH
    assert type_hash_for("receive") == RECEIVE_WITH_AUTHORIZATION_TYPEHASH
    assert AuthorizationIntent.CANCEL.type_hash == CANCEL_AUTHORIZATION_TYPEHASH
    assert type_string_for(AuthorizationIntent.CANCEL) == CANCEL_AUTHORIZATION_TYPE_STRING


def test_type_hashes_are_distinct():
    hashes = {type_hash_for(intent) for intent in AuthorizationIntent}
    assert len(hashes) == 3


def test_eip712_types_include_domain():
    types = eip712_types_for(AuthorizationIntent.RECEIVE)
    assert set(types) == {"EIP712Domain", "ReceiveWithAuthorization"}
    assert [f["name"] for f in types["ReceiveWithAuthorization"]] == [
        "from",
        "to",
        "value",
        "validAfter",
        "validBefore",
        "nonce",
    ]
