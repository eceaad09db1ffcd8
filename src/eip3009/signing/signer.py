"""
AuthorizationSigner - canonical secp256k1 signing of EIP-3009 digests
"""

import logging
from typing import Any

from eth_account import Account
from eth_account.messages import encode_typed_data
from eth_keys import keys
from eth_keys.constants import SECPK1_N

from eip3009.exceptions import SignatureCreationError
from eip3009.signing.digest import build_digest
from eip3009.signing.typehashes import EIP712_DOMAIN_TYPE
from eip3009.types import (
    SECPK1_HALF_N,
    AuthorizationIntent,
    CancelAuthorizationParams,
    Domain,
    Signature,
    SignedAuthorization,
    TransferAuthorizationParams,
)

logger = logging.getLogger(__name__)

PrivateKeyLike = str | bytes


def _load_private_key(private_key: PrivateKeyLike) -> keys.PrivateKey:
    try:
        if isinstance(private_key, str):
            hex_str = private_key[2:] if private_key.startswith(("0x", "0X")) else private_key
            key_bytes = bytes.fromhex(hex_str)
        else:
            key_bytes = bytes(private_key)
        return keys.PrivateKey(key_bytes)
    except Exception as e:
        raise SignatureCreationError(f"Malformed private key: {e}")


def sign(digest: bytes, private_key: PrivateKeyLike) -> Signature:
    """Sign a 32-byte digest.

    Deterministic (RFC 6979 nonces): the same (digest, key) pair always yields
    the same signature. The result is canonical, with s in the lower half of
    the curve order and v adjusted to match.

    Raises:
        SignatureCreationError: If the key is malformed or the digest is not 32 bytes
    """
    if len(digest) != 32:
        raise SignatureCreationError(f"Digest must be 32 bytes, got {len(digest)}")
    key = _load_private_key(private_key)
    raw = key.sign_msg_hash(digest)

    s, recovery_id = raw.s, raw.v
    if s > SECPK1_HALF_N:
        s = SECPK1_N - s
        recovery_id ^= 1
    return Signature(r=raw.r, s=s, v=27 + recovery_id)


class AuthorizationSigner:
    """Holds one private key and signs authorizations for its address."""

    def __init__(self, private_key: PrivateKeyLike) -> None:
        self._key = _load_private_key(private_key)
        self._address = self._key.public_key.to_checksum_address()
        logger.debug("AuthorizationSigner initialized", extra={"address": self._address})

    @classmethod
    def from_private_key(cls, private_key: PrivateKeyLike) -> "AuthorizationSigner":
        """Create signer from private key."""
        return cls(private_key)

    @classmethod
    def random(cls) -> "AuthorizationSigner":
        """Create a signer for a freshly generated key."""
        return cls(Account.create().key)

    @property
    def address(self) -> str:
        return self._address

    def get_address(self) -> str:
        return self._address

    def sign_digest(self, digest: bytes) -> Signature:
        return sign(digest, self._key.to_bytes())

    def sign_authorization(
        self,
        domain: Domain,
        intent: AuthorizationIntent,
        params: TransferAuthorizationParams | CancelAuthorizationParams,
    ) -> Signature:
        """Sign *params* for *intent*; the signer must be the authorizer."""
        authorizer = (
            params.authorizer
            if isinstance(params, CancelAuthorizationParams)
            else params.from_address
        )
        if authorizer != self._address:
            raise SignatureCreationError(
                f"Signer {self._address} cannot authorize on behalf of {authorizer}"
            )
        digest = build_digest(domain, intent, params)
        logger.info(
            "[EIP3009] Signing %s: authorizer=%s, nonce=0x%s, token=%s",
            AuthorizationIntent(intent).primary_type,
            authorizer,
            params.nonce.hex(),
            domain.verifying_contract,
        )
        return self.sign_digest(digest)

    def sign_transfer_authorization(
        self, domain: Domain, params: TransferAuthorizationParams
    ) -> Signature:
        return self.sign_authorization(domain, AuthorizationIntent.TRANSFER, params)

    def sign_receive_authorization(
        self, domain: Domain, params: TransferAuthorizationParams
    ) -> Signature:
        """Sign for receiveWithAuthorization; only ``params.to`` can submit it."""
        return self.sign_authorization(domain, AuthorizationIntent.RECEIVE, params)

    def sign_cancel_authorization(
        self, domain: Domain, params: CancelAuthorizationParams
    ) -> Signature:
        return self.sign_authorization(domain, AuthorizationIntent.CANCEL, params)

    def create_signed_authorization(
        self,
        domain: Domain,
        intent: AuthorizationIntent,
        params: TransferAuthorizationParams | CancelAuthorizationParams,
    ) -> SignedAuthorization:
        """Sign and package *params* for handing to a relayer."""
        signature = self.sign_authorization(domain, intent, params)
        return SignedAuthorization.from_params(intent, params, signature)

    async def sign_typed_data(
        self,
        domain: dict[str, Any],
        types: dict[str, Any],
        message: dict[str, Any],
        primary_type: str,
    ) -> str:
        """Sign full EIP-712 typed data the way a browser wallet would.

        Returns the 65-byte signature as 0x-hex.
        """
        try:
            full_types = {"EIP712Domain": list(EIP712_DOMAIN_TYPE), **types}
            full_data = {
                "types": full_types,
                "domain": domain,
                "primaryType": primary_type,
                "message": message,
            }
            signable = encode_typed_data(full_message=full_data)
            signed = Account.sign_message(signable, private_key=self._key.to_bytes())
            return Signature(r=signed.r, s=signed.s, v=signed.v).to_hex()
        except Exception as e:
            raise SignatureCreationError(f"Failed to sign typed data: {e}")
