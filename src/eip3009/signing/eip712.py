"""
EIP-712 typed data encoding.

Implements the fixed byte layout of the EIP-712 hashing standard for the
subset of types used by EIP-3009: ``address``, ``uint256``, ``bytes32`` and
``string``. Every function here is pure.

    domainSeparator = keccak256(
        DOMAIN_TYPEHASH ‖ keccak256(name) ‖ keccak256(version)
        ‖ uint256(chainId) ‖ address(verifyingContract)
    )
    structHash = keccak256(typeHash ‖ encodeData(fields...))
    digest     = keccak256(0x19 ‖ 0x01 ‖ domainSeparator ‖ structHash)
"""

from typing import TYPE_CHECKING

from eth_utils import is_address, keccak, to_bytes

if TYPE_CHECKING:
    from eip3009.types import Domain

WORD_SIZE = 32
UINT256_MAX = 2**256 - 1

EIP712_PREFIX = b"\x19\x01"

DOMAIN_TYPE_STRING = (
    "EIP712Domain(string name,string version,uint256 chainId,address verifyingContract)"
)

# keccak256(DOMAIN_TYPE_STRING)
DOMAIN_TYPEHASH = bytes.fromhex(
    "8b73c3c69bb8fe3d512ecc4cf759cc79239f7b179b0ffacaa9a75d522b39400f"
)


def encode_address(address: str) -> bytes:
    """Encode a 20-byte address as a left-padded 32-byte word."""
    if not is_address(address):
        raise ValueError(f"Invalid address: {address}")
    return to_bytes(hexstr=address).rjust(WORD_SIZE, b"\x00")


def encode_uint256(value: int) -> bytes:
    """Encode an unsigned integer as a big-endian 32-byte word."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"uint256 must be an int, got {type(value).__name__}")
    if value < 0 or value > UINT256_MAX:
        raise ValueError(f"uint256 out of range: {value}")
    return value.to_bytes(WORD_SIZE, "big")


def encode_bytes32(value: bytes) -> bytes:
    """Use a bytes32 value verbatim."""
    if len(value) != WORD_SIZE:
        raise ValueError(f"bytes32 must be exactly 32 bytes, got {len(value)}")
    return bytes(value)


def encode_string(value: str) -> bytes:
    """Dynamic ``string`` values are encoded as the hash of their UTF-8 bytes."""
    return keccak(value.encode("utf-8"))


def hash_domain(domain: "Domain") -> bytes:
    """Compute the 32-byte domain separator for *domain*."""
    return keccak(
        DOMAIN_TYPEHASH
        + encode_string(domain.name)
        + encode_string(domain.version)
        + encode_uint256(domain.chain_id)
        + encode_address(domain.verifying_contract)
    )


def hash_struct(type_hash: bytes, *words: bytes) -> bytes:
    """Hash a struct from its type hash and already-encoded 32-byte fields.

    Fields must be given in their declared order.
    """
    encode_bytes32(type_hash)
    for index, word in enumerate(words):
        if len(word) != WORD_SIZE:
            raise ValueError(f"Field {index} is {len(word)} bytes, expected {WORD_SIZE}")
    return keccak(type_hash + b"".join(words))


def compute_digest(domain_separator: bytes, struct_hash: bytes) -> bytes:
    """Combine a domain separator and a struct hash into the final digest."""
    return keccak(EIP712_PREFIX + encode_bytes32(domain_separator) + encode_bytes32(struct_hash))
