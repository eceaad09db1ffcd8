"""
EIP-3009 type hashes and EIP-712 type definitions.

The hashes below are the constants deployed in FiatToken (USDC) and the
EIP-3009 reference implementation. They are literals on purpose: a hash that
differs by a single bit yields digests nobody has signed.
"""

from typing import Any

from eip3009.types import AuthorizationIntent

TRANSFER_WITH_AUTHORIZATION_TYPE_STRING = (
    "TransferWithAuthorization(address from,address to,uint256 value,"
    "uint256 validAfter,uint256 validBefore,bytes32 nonce)"
)
RECEIVE_WITH_AUTHORIZATION_TYPE_STRING = (
    "ReceiveWithAuthorization(address from,address to,uint256 value,"
    "uint256 validAfter,uint256 validBefore,bytes32 nonce)"
)
CANCEL_AUTHORIZATION_TYPE_STRING = "CancelAuthorization(address authorizer,bytes32 nonce)"

# keccak256(TRANSFER_WITH_AUTHORIZATION_TYPE_STRING)
TRANSFER_WITH_AUTHORIZATION_TYPEHASH = bytes.fromhex(
    "7c7c6cdb67a18743f49ec6fa9b35f50d52ed05cbed4cc592e13b44501c1a2267"
)
# keccak256(RECEIVE_WITH_AUTHORIZATION_TYPE_STRING)
RECEIVE_WITH_AUTHORIZATION_TYPEHASH = bytes.fromhex(
    "d099cc98ef71107a616c4f0f941f04c322d8e254fe26b3c6668db87aae413de8"
)
# keccak256(CANCEL_AUTHORIZATION_TYPE_STRING)
CANCEL_AUTHORIZATION_TYPEHASH = bytes.fromhex(
    "158b0a9edf7a828aad02f63cd515c68ef2f50ba807396f6d12842833a1597429"
)

_TYPE_HASHES: dict[AuthorizationIntent, bytes] = {
    AuthorizationIntent.TRANSFER: TRANSFER_WITH_AUTHORIZATION_TYPEHASH,
    AuthorizationIntent.RECEIVE: RECEIVE_WITH_AUTHORIZATION_TYPEHASH,
    AuthorizationIntent.CANCEL: CANCEL_AUTHORIZATION_TYPEHASH,
}

_TYPE_STRINGS: dict[AuthorizationIntent, str] = {
    AuthorizationIntent.TRANSFER: TRANSFER_WITH_AUTHORIZATION_TYPE_STRING,
    AuthorizationIntent.RECEIVE: RECEIVE_WITH_AUTHORIZATION_TYPE_STRING,
    AuthorizationIntent.CANCEL: CANCEL_AUTHORIZATION_TYPE_STRING,
}


def type_hash_for(intent: AuthorizationIntent) -> bytes:
    """Return the constant type hash for *intent*."""
    return _TYPE_HASHES[AuthorizationIntent(intent)]


def type_string_for(intent: AuthorizationIntent) -> str:
    """Return the canonical type string for *intent*."""
    return _TYPE_STRINGS[AuthorizationIntent(intent)]


# ---------------------------------------------------------------------------
# EIP-712 type definitions, for wallets that sign full typed data
# ---------------------------------------------------------------------------

EIP712_DOMAIN_TYPE = [
    {"name": "name", "type": "string"},
    {"name": "version", "type": "string"},
    {"name": "chainId", "type": "uint256"},
    {"name": "verifyingContract", "type": "address"},
]

_AUTHORIZATION_FIELDS = [
    {"name": "from", "type": "address"},
    {"name": "to", "type": "address"},
    {"name": "value", "type": "uint256"},
    {"name": "validAfter", "type": "uint256"},
    {"name": "validBefore", "type": "uint256"},
    {"name": "nonce", "type": "bytes32"},
]

TRANSFER_AUTH_EIP712_TYPES: dict[str, list[dict[str, str]]] = {
    "TransferWithAuthorization": list(_AUTHORIZATION_FIELDS),
}

RECEIVE_AUTH_EIP712_TYPES: dict[str, list[dict[str, str]]] = {
    "ReceiveWithAuthorization": list(_AUTHORIZATION_FIELDS),
}

CANCEL_AUTH_EIP712_TYPES: dict[str, list[dict[str, str]]] = {
    "CancelAuthorization": [
        {"name": "authorizer", "type": "address"},
        {"name": "nonce", "type": "bytes32"},
    ],
}

_EIP712_TYPES: dict[AuthorizationIntent, dict[str, list[dict[str, str]]]] = {
    AuthorizationIntent.TRANSFER: TRANSFER_AUTH_EIP712_TYPES,
    AuthorizationIntent.RECEIVE: RECEIVE_AUTH_EIP712_TYPES,
    AuthorizationIntent.CANCEL: CANCEL_AUTH_EIP712_TYPES,
}


def eip712_types_for(intent: AuthorizationIntent) -> dict[str, Any]:
    """Return the EIP-712 ``types`` mapping for *intent*, including EIP712Domain."""
    intent = AuthorizationIntent(intent)
    return {"EIP712Domain": list(EIP712_DOMAIN_TYPE), **_EIP712_TYPES[intent]}
