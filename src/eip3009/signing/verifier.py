"""
AuthorizationVerifier - recovers and checks the signer of an EIP-3009 digest
"""

import logging

from eth_keys import keys
from eth_keys.exceptions import BadSignature, ValidationError as EthKeysValidationError

from eip3009.exceptions import (
    NonCanonicalSignatureError,
    SignatureError,
    SignatureRecoveryFailedError,
)
from eip3009.signing.digest import build_digest
from eip3009.types import (
    AuthorizationIntent,
    CancelAuthorizationParams,
    Domain,
    Signature,
    SignedAuthorization,
    TransferAuthorizationParams,
    normalize_address,
)

logger = logging.getLogger(__name__)

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def recover_signer(digest: bytes, signature: Signature) -> str:
    """Recover the checksum address that signed *digest*.

    Raises:
        NonCanonicalSignatureError: If s is in the upper half of the curve order
        SignatureRecoveryFailedError: If no valid public key can be recovered
    """
    if len(digest) != 32:
        raise SignatureRecoveryFailedError(f"Digest must be 32 bytes, got {len(digest)}")
    if not signature.is_canonical:
        raise NonCanonicalSignatureError(
            f"Signature s={hex(signature.s)} is not in the lower half of the curve order"
        )

    try:
        eth_signature = keys.Signature(vrs=(signature.recovery_id, signature.r, signature.s))
        public_key = eth_signature.recover_public_key_from_msg_hash(digest)
    except (BadSignature, EthKeysValidationError, ValueError) as e:
        raise SignatureRecoveryFailedError(f"Failed to recover signer: {e}")

    address = public_key.to_checksum_address()
    if address == ZERO_ADDRESS:
        raise SignatureRecoveryFailedError("Signature recovers to the zero address")
    return address


def verify(digest: bytes, signature: Signature, expected_signer: str) -> bool:
    """True when *signature* over *digest* recovers to *expected_signer*.

    Address comparison is case-insensitive. A non-canonical or unrecoverable
    signature is a rejection like any other and yields False.

    Raises:
        InvalidParamsError: If *expected_signer* is not a valid address
    """
    expected = normalize_address(expected_signer, "expected signer")
    try:
        recovered = recover_signer(digest, signature)
    except SignatureError as e:
        logger.debug("Signature rejected: %s", e)
        return False
    return recovered == expected


def _authorizer_of(params: TransferAuthorizationParams | CancelAuthorizationParams) -> str:
    if isinstance(params, CancelAuthorizationParams):
        return params.authorizer
    return params.from_address


def assert_authorization(
    domain: Domain,
    intent: AuthorizationIntent,
    params: TransferAuthorizationParams | CancelAuthorizationParams,
    signature: Signature,
    expected_signer: str | None = None,
) -> str:
    """Check that *signature* over *params* was made by the expected signer.

    The digest is re-derived from *params*; a digest supplied by the caller is
    never trusted. Returns the recovered address.

    Raises:
        NonCanonicalSignatureError: If s is in the upper half of the curve order
        SignatureRecoveryFailedError: If recovery fails or yields someone else
    """
    expected = (
        normalize_address(expected_signer, "expected signer")
        if expected_signer is not None
        else _authorizer_of(params)
    )
    recovered = recover_signer(build_digest(domain, intent, params), signature)
    if recovered != expected:
        logger.warning(
            "Signature mismatch: expected=%s, recovered=%s, intent=%s",
            expected,
            recovered,
            AuthorizationIntent(intent).value,
        )
        raise SignatureRecoveryFailedError(
            f"Signature recovers to {recovered}, expected {expected}"
        )
    return recovered


def verify_authorization(
    domain: Domain,
    intent: AuthorizationIntent,
    params: TransferAuthorizationParams | CancelAuthorizationParams,
    signature: Signature,
    expected_signer: str | None = None,
) -> bool:
    """Boolean form of assert_authorization().

    Args:
        domain: Token domain the signature is bound to
        intent: Which authorization the signature is for
        params: The signed parameters
        signature: Signature to check
        expected_signer: Override of the address to compare against
            (default: ``from`` or ``authorizer`` of *params*)
    """
    try:
        assert_authorization(domain, intent, params, signature, expected_signer)
    except SignatureError:
        return False
    return True


class AuthorizationVerifier:
    """Verifier bound to one token domain, used by relayers before submitting."""

    def __init__(self, domain: Domain) -> None:
        self._domain = domain

    @property
    def domain(self) -> Domain:
        return self._domain

    def recover(
        self,
        intent: AuthorizationIntent,
        params: TransferAuthorizationParams | CancelAuthorizationParams,
        signature: Signature,
    ) -> str:
        return recover_signer(build_digest(self._domain, intent, params), signature)

    def verify_authorization(
        self,
        intent: AuthorizationIntent,
        params: TransferAuthorizationParams | CancelAuthorizationParams,
        signature: Signature,
        expected_signer: str | None = None,
    ) -> bool:
        return verify_authorization(self._domain, intent, params, signature, expected_signer)

    def assert_authorization(
        self,
        intent: AuthorizationIntent,
        params: TransferAuthorizationParams | CancelAuthorizationParams,
        signature: Signature,
        expected_signer: str | None = None,
    ) -> str:
        return assert_authorization(self._domain, intent, params, signature, expected_signer)

    def verify_signed(self, signed: SignedAuthorization) -> bool:
        """Verify a wire-format authorization against its own authorizer.

        Raises:
            InvalidParamsError: If the payload's parameters are malformed
        """
        return self.verify_authorization(signed.intent, signed.to_params(), signed.to_signature())
