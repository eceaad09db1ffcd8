"""
Tests for DigestBuilder.
"""

import dataclasses

import pytest

from eip3009.signing.digest import (
    build_digest,
    hash_cancel_authorization,
    hash_receive_with_authorization,
    hash_transfer_with_authorization,
)
from eip3009.types import AuthorizationIntent, CancelAuthorizationParams


def test_deterministic(usdc_domain, transfer_params):
    first = build_digest(usdc_domain, AuthorizationIntent.TRANSFER, transfer_params)
    second = build_digest(usdc_domain, AuthorizationIntent.TRANSFER, transfer_params)
    assert first == second
    assert len(first) == 32


def test_named_helpers_match_build_digest(usdc_domain, transfer_params):
    separator = usdc_domain.separator
    assert hash_transfer_with_authorization(separator, transfer_params) == build_digest(
        usdc_domain, AuthorizationIntent.TRANSFER, transfer_params
    )
    assert hash_receive_with_authorization(separator, transfer_params) == build_digest(
        usdc_domain, AuthorizationIntent.RECEIVE, transfer_params
    )


@pytest.mark.parametrize(
    "field,value",
    [
        ("from_address", "0x4444444444444444444444444444444444444444"),
        ("to", "0x5555555555555555555555555555555555555555"),
        ("value", 1_000_001),
        ("valid_after", 1),
        ("valid_before", 1_900_000_001),
        ("nonce", b"\xce" * 32),
    ],
)
def test_single_field_change_changes_digest(usdc_domain, transfer_params, field, value):
    changed = dataclasses.replace(transfer_params, **{field: value})
    assert build_digest(usdc_domain, "transfer", changed) != build_digest(
        usdc_domain, "transfer", transfer_params
    )


def test_transfer_and_receive_differ(usdc_domain, transfer_params):
    assert build_digest(usdc_domain, "transfer", transfer_params) != build_digest(
        usdc_domain, "receive", transfer_params
    )


def test_chain_id_changes_digest(usdc_domain, transfer_params):
    other_chain = dataclasses.replace(usdc_domain, chain_id=8453)
    assert build_digest(usdc_domain, "transfer", transfer_params) != build_digest(
        other_chain, "transfer", transfer_params
    )


def test_cancel_digest(usdc_domain, signer_address):
    params = CancelAuthorizationParams(authorizer=signer_address, nonce=b"\x01" * 32)
    digest = build_digest(usdc_domain, AuthorizationIntent.CANCEL, params)
    assert digest == hash_cancel_authorization(usdc_domain.separator, params)


def test_params_intent_mismatch(usdc_domain, transfer_params, signer_address):
    cancel_params = CancelAuthorizationParams(authorizer=signer_address, nonce=b"\x01" * 32)
    with pytest.raises(TypeError):
        build_digest(usdc_domain, AuthorizationIntent.CANCEL, transfer_params)
    with pytest.raises(TypeError):
        build_digest(usdc_domain, AuthorizationIntent.TRANSFER, cancel_params)
