"""
Off-chain EIP-712 encoding, signing and verification for EIP-3009
"""

from eip3009.signing.digest import (
    build_digest,
    hash_cancel_authorization,
    hash_receive_with_authorization,
    hash_transfer_with_authorization,
)
from eip3009.signing.eip712 import DOMAIN_TYPEHASH, compute_digest, hash_domain, hash_struct
from eip3009.signing.nonce import NonceGenerator, compute_time_bounds, generate_nonce
from eip3009.signing.signer import AuthorizationSigner, sign
from eip3009.signing.typehashes import (
    CANCEL_AUTHORIZATION_TYPEHASH,
    RECEIVE_WITH_AUTHORIZATION_TYPEHASH,
    TRANSFER_WITH_AUTHORIZATION_TYPEHASH,
    type_hash_for,
)
from eip3009.signing.verifier import (
    AuthorizationVerifier,
    assert_authorization,
    recover_signer,
    verify,
    verify_authorization,
)

__all__ = [
    "DOMAIN_TYPEHASH",
    "TRANSFER_WITH_AUTHORIZATION_TYPEHASH",
    "RECEIVE_WITH_AUTHORIZATION_TYPEHASH",
    "CANCEL_AUTHORIZATION_TYPEHASH",
    "hash_domain",
    "hash_struct",
    "compute_digest",
    "type_hash_for",
    "build_digest",
    "hash_transfer_with_authorization",
    "hash_receive_with_authorization",
    "hash_cancel_authorization",
    "NonceGenerator",
    "generate_nonce",
    "compute_time_bounds",
    "AuthorizationSigner",
    "sign",
    "AuthorizationVerifier",
    "recover_signer",
    "verify",
    "verify_authorization",
    "assert_authorization",
]
