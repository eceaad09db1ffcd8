"""
EIP-712 digests for the three EIP-3009 authorization intents.
"""

from eip3009.signing.eip712 import (
    compute_digest,
    encode_address,
    encode_bytes32,
    encode_uint256,
    hash_struct,
)
from eip3009.signing.typehashes import (
    CANCEL_AUTHORIZATION_TYPEHASH,
    RECEIVE_WITH_AUTHORIZATION_TYPEHASH,
    TRANSFER_WITH_AUTHORIZATION_TYPEHASH,
)
from eip3009.types import (
    AuthorizationIntent,
    CancelAuthorizationParams,
    Domain,
    TransferAuthorizationParams,
)


def hash_authorization_struct(type_hash: bytes, params: TransferAuthorizationParams) -> bytes:
    """Struct hash of a Transfer/ReceiveWithAuthorization message."""
    return hash_struct(
        type_hash,
        encode_address(params.from_address),
        encode_address(params.to),
        encode_uint256(params.value),
        encode_uint256(params.valid_after),
        encode_uint256(params.valid_before),
        encode_bytes32(params.nonce),
    )


def hash_cancel_struct(params: CancelAuthorizationParams) -> bytes:
    """Struct hash of a CancelAuthorization message."""
    return hash_struct(
        CANCEL_AUTHORIZATION_TYPEHASH,
        encode_address(params.authorizer),
        encode_bytes32(params.nonce),
    )


def hash_transfer_with_authorization(
    domain_separator: bytes, params: TransferAuthorizationParams
) -> bytes:
    """Digest for ``transferWithAuthorization``.

    Args:
        domain_separator: The token's EIP-712 domain separator
        params: Authorization parameters

    Returns:
        The 32-byte digest to be signed by ``params.from_address``
    """
    struct_hash = hash_authorization_struct(TRANSFER_WITH_AUTHORIZATION_TYPEHASH, params)
    return compute_digest(domain_separator, struct_hash)


def hash_receive_with_authorization(
    domain_separator: bytes, params: TransferAuthorizationParams
) -> bytes:
    """Digest for ``receiveWithAuthorization``.

    Differs from the transfer digest only by type hash, so a transfer
    signature can never be replayed as a receive and vice versa.
    """
    struct_hash = hash_authorization_struct(RECEIVE_WITH_AUTHORIZATION_TYPEHASH, params)
    return compute_digest(domain_separator, struct_hash)


def hash_cancel_authorization(domain_separator: bytes, params: CancelAuthorizationParams) -> bytes:
    """Digest for ``cancelAuthorization``."""
    return compute_digest(domain_separator, hash_cancel_struct(params))


def build_digest(
    domain: Domain,
    intent: AuthorizationIntent,
    params: TransferAuthorizationParams | CancelAuthorizationParams,
) -> bytes:
    """Build the digest a signer must sign for *intent* on *domain*.

    Raises:
        TypeError: If *params* does not match the intent
    """
    intent = AuthorizationIntent(intent)
    separator = domain.separator

    if intent is AuthorizationIntent.CANCEL:
        if not isinstance(params, CancelAuthorizationParams):
            raise TypeError("cancel intent requires CancelAuthorizationParams")
        return hash_cancel_authorization(separator, params)

    if not isinstance(params, TransferAuthorizationParams):
        raise TypeError(f"{intent.value} intent requires TransferAuthorizationParams")
    if intent is AuthorizationIntent.RECEIVE:
        return hash_receive_with_authorization(separator, params)
    return hash_transfer_with_authorization(separator, params)
