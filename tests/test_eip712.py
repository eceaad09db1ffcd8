"""
Tests for EIP-712 encoding.
"""

import pytest
from eth_account.messages import encode_typed_data
from eth_utils import keccak

from eip3009.signing.digest import build_digest, hash_authorization_struct
from eip3009.signing.eip712 import (
    DOMAIN_TYPE_STRING,
    DOMAIN_TYPEHASH,
    compute_digest,
    encode_address,
    encode_bytes32,
    encode_string,
    encode_uint256,
    hash_domain,
    hash_struct,
)
from eip3009.signing.typehashes import TRANSFER_WITH_AUTHORIZATION_TYPEHASH, eip712_types_for
from eip3009.types import AuthorizationIntent, Domain, TransferAuthorizationParams


def _eth_account_signable(domain, intent, message):
    return encode_typed_data(
        full_message={
            "types": eip712_types_for(intent),
            "primaryType": AuthorizationIntent(intent).primary_type,
            "domain": domain.to_eip712_dict(),
            "message": message,
        }
    )


class TestEncoding:
    def test_domain_typehash_constant(self):
        assert DOMAIN_TYPEHASH == keccak(text=DOMAIN_TYPE_STRING)

    def test_encode_address_left_pads(self):
        word = encode_address("0x00000000000000000000000000000000000000ff")
        assert len(word) == 32
        assert word == b"\x00" * 31 + b"\xff"

    def test_encode_address_rejects_garbage(self):
        with pytest.raises(ValueError):
            encode_address("0x1234")

    def test_encode_uint256_big_endian(self):
        assert encode_uint256(1) == b"\x00" * 31 + b"\x01"
        assert encode_uint256(2**256 - 1) == b"\xff" * 32

    def test_encode_uint256_out_of_range(self):
        with pytest.raises(ValueError):
            encode_uint256(-1)
        with pytest.raises(ValueError):
            encode_uint256(2**256)

    def test_encode_uint256_rejects_non_int(self):
        with pytest.raises(TypeError):
            encode_uint256("1")
        with pytest.raises(TypeError):
            encode_uint256(True)

    def test_encode_bytes32_requires_exact_length(self):
        assert encode_bytes32(b"\x01" * 32) == b"\x01" * 32
        with pytest.raises(ValueError):
            encode_bytes32(b"\x01" * 31)

    def test_encode_string_hashes_utf8(self):
        assert encode_string("USD Coin") == keccak(text="USD Coin")

    def test_hash_struct_rejects_short_word(self):
        with pytest.raises(ValueError):
            hash_struct(TRANSFER_WITH_AUTHORIZATION_TYPEHASH, b"\x00" * 20)


class TestDomainSeparator:
    def test_deterministic(self, usdc_domain):
        same = Domain(
            name="USD Coin",
            version="2",
            chain_id=1,
            verifying_contract=usdc_domain.verifying_contract.lower(),
        )
        assert usdc_domain.separator == same.separator
        assert len(usdc_domain.separator) == 32

    def test_manual_layout(self, usdc_domain):
        expected = keccak(
            DOMAIN_TYPEHASH
            + keccak(text="USD Coin")
            + keccak(text="2")
            + (1).to_bytes(32, "big")
            + bytes.fromhex(usdc_domain.verifying_contract[2:]).rjust(32, b"\x00")
        )
        assert hash_domain(usdc_domain) == expected

    @pytest.mark.parametrize(
        "field,value",
        [
            ("name", "USDC"),
            ("version", "1"),
            ("chain_id", 8453),
            ("verifying_contract", "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"),
        ],
    )
    def test_every_field_matters(self, usdc_domain, field, value):
        fields = {
            "name": usdc_domain.name,
            "version": usdc_domain.version,
            "chain_id": usdc_domain.chain_id,
            "verifying_contract": usdc_domain.verifying_contract,
        }
        fields[field] = value
        assert Domain(**fields).separator != usdc_domain.separator


class TestAgainstEthAccount:
    """Cross-check against eth_account's independent EIP-712 implementation."""

    def test_domain_separator_matches(self, usdc_domain, transfer_params):
        signable = _eth_account_signable(
            usdc_domain, AuthorizationIntent.TRANSFER, transfer_params.to_eip712_message()
        )
        assert bytes(signable.header) == usdc_domain.separator

    def test_struct_hash_matches(self, usdc_domain, transfer_params):
        signable = _eth_account_signable(
            usdc_domain, AuthorizationIntent.TRANSFER, transfer_params.to_eip712_message()
        )
        struct_hash = hash_authorization_struct(
            TRANSFER_WITH_AUTHORIZATION_TYPEHASH, transfer_params
        )
        assert bytes(signable.body) == struct_hash

    @pytest.mark.parametrize("intent", [AuthorizationIntent.TRANSFER, AuthorizationIntent.RECEIVE])
    def test_digest_matches(self, usdc_domain, transfer_params, intent):
        signable = _eth_account_signable(usdc_domain, intent, transfer_params.to_eip712_message())
        expected = keccak(b"\x19" + signable.version + signable.header + signable.body)
        assert build_digest(usdc_domain, intent, transfer_params) == expected

    def test_compute_digest_prefix(self, usdc_domain):
        struct_hash = b"\x11" * 32
        assert compute_digest(usdc_domain.separator, struct_hash) == keccak(
            b"\x19\x01" + usdc_domain.separator + struct_hash
        )


def test_usdc_mainnet_scenario(usdc_domain):
    """USD Coin v2 on mainnet, one-hour window, fixed nonce."""
    params = TransferAuthorizationParams(
        from_address="0x" + "aa" * 20,
        to="0x" + "bb" * 20,
        value=1_000_000,
        valid_after=1_700_000_000,
        valid_before=1_700_003_600,
        nonce=bytes(range(32)),
    )
    digest = build_digest(usdc_domain, AuthorizationIntent.TRANSFER, params)

    signable = _eth_account_signable(
        usdc_domain, AuthorizationIntent.TRANSFER, params.to_eip712_message()
    )
    assert usdc_domain.separator.hex() == (
        "06c37168a7db5138defc7866392bb87a741f9b3d104deb5094588ce041cae335"
    )
    assert digest.hex() == "263110585c2ea2f43f098d5976968445b475a22d174119a044e63fb1478bf9e5"
    assert digest == keccak(b"\x19\x01" + bytes(signable.header) + bytes(signable.body))
    assert usdc_domain.verifying_contract == "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
