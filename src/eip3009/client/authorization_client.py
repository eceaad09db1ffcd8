"""
AuthorizationClient - submits EIP-3009 authorizations to a token contract
"""

import logging
from typing import Any

from eip3009.abi import EIP3009_ABI, decode_output, encode_call
from eip3009.client.base import ContractSubmitter, PendingTransaction
from eip3009.exceptions import (
    AuthorizationAlreadyConsumedError,
    AuthorizationExpiredError,
    AuthorizationNotYetValidError,
    CallerNotPayeeError,
    InvalidAuthorizationSignatureError,
    InvalidParamsError,
    SubmissionRevertedError,
)
from eip3009.signing.verifier import assert_authorization
from eip3009.types import (
    AuthorizationIntent,
    CancelAuthorizationParams,
    Domain,
    Signature,
    SignedAuthorization,
    TransferAuthorizationParams,
    normalize_address,
    normalize_nonce,
)

logger = logging.getLogger(__name__)

# Substrings of FiatToken / EIP-3009 reference revert strings, matched lowercase
_REVERT_PATTERNS: list[tuple[str, type[SubmissionRevertedError]]] = [
    ("not yet valid", AuthorizationNotYetValidError),
    ("is expired", AuthorizationExpiredError),
    ("caller must be the payee", CallerNotPayeeError),
    ("invalid signature", InvalidAuthorizationSignatureError),
]
_CONSUMED_PATTERN = "authorization is used"


def map_revert(reason: str, authorizer: str, nonce: bytes) -> SubmissionRevertedError:
    """Translate a contract revert reason into the matching typed error."""
    lowered = reason.lower()
    if _CONSUMED_PATTERN in lowered:
        return AuthorizationAlreadyConsumedError(authorizer, nonce, reason)
    for pattern, error_cls in _REVERT_PATTERNS:
        if pattern in lowered:
            return error_cls(reason)
    return SubmissionRevertedError(reason)


class AuthorizationClient:
    """Relayer-side client for one EIP-3009 token contract.

    Args:
        token_address: Address of the token contract
        submitter: Collaborator that performs calls and sends transactions
        domain: Token EIP-712 domain; when given, signatures are checked
            locally before anything is sent
        check_state: Read authorizationState before every submission and
            refuse to send an already-consumed authorization
    """

    def __init__(
        self,
        token_address: str,
        submitter: ContractSubmitter,
        domain: Domain | None = None,
        check_state: bool = True,
    ) -> None:
        self._token_address = normalize_address(token_address, "token address")
        self._submitter = submitter
        self._domain = domain
        self._check_state = check_state
        if domain is not None and domain.verifying_contract != self._token_address:
            raise InvalidParamsError(
                f"Domain verifying contract {domain.verifying_contract} "
                f"does not match token {self._token_address}"
            )

    @property
    def token_address(self) -> str:
        return self._token_address

    @property
    def submitter(self) -> ContractSubmitter:
        return self._submitter

    async def _call(self, method: str, args: list[Any]) -> tuple[Any, ...]:
        data = await self._submitter.call(self._token_address, encode_call(EIP3009_ABI, method, args))
        return decode_output(EIP3009_ABI, method, data)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def authorization_state(self, authorizer: str, nonce: bytes | str) -> bool:
        """Whether (authorizer, nonce) has been used or canceled on-chain."""
        authorizer = normalize_address(authorizer, "authorizer")
        (used,) = await self._call("authorizationState", [authorizer, normalize_nonce(nonce)])
        return bool(used)

    async def domain_separator(self) -> bytes:
        (separator,) = await self._call("DOMAIN_SEPARATOR", [])
        return bytes(separator)

    async def nonces(self, owner: str) -> int:
        """Sequential EIP-2612 permit nonce of *owner*, where the token has one."""
        (value,) = await self._call("nonces", [normalize_address(owner, "owner")])
        return value

    async def transfer_with_authorization_typehash(self) -> bytes:
        (value,) = await self._call("TRANSFER_WITH_AUTHORIZATION_TYPEHASH", [])
        return bytes(value)

    async def receive_with_authorization_typehash(self) -> bytes:
        (value,) = await self._call("RECEIVE_WITH_AUTHORIZATION_TYPEHASH", [])
        return bytes(value)

    async def cancel_authorization_typehash(self) -> bytes:
        (value,) = await self._call("CANCEL_AUTHORIZATION_TYPEHASH", [])
        return bytes(value)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def transfer_with_authorization(
        self, params: TransferAuthorizationParams, signature: Signature
    ) -> PendingTransaction:
        """Submit transferWithAuthorization; anyone may relay it."""
        return await self._submit_transfer(AuthorizationIntent.TRANSFER, params, signature)

    async def receive_with_authorization(
        self, params: TransferAuthorizationParams, signature: Signature
    ) -> PendingTransaction:
        """Submit receiveWithAuthorization.

        Raises:
            CallerNotPayeeError: If the submitter is not ``params.to``
        """
        sender = self._submitter.get_address()
        if sender is None or normalize_address(sender, "sender") != params.to:
            raise CallerNotPayeeError(
                "caller must be the payee",
                f"receiveWithAuthorization must be sent by payee {params.to}, not {sender}",
            )
        return await self._submit_transfer(AuthorizationIntent.RECEIVE, params, signature)

    async def cancel_authorization(
        self,
        authorizer: str | CancelAuthorizationParams,
        nonce: bytes | str | None = None,
        signature: Signature | None = None,
    ) -> PendingTransaction:
        """Submit cancelAuthorization.

        Accepts either ``(authorizer, nonce, signature)`` or
        ``(CancelAuthorizationParams, signature=...)``.
        """
        if isinstance(authorizer, CancelAuthorizationParams):
            if nonce is not None:
                raise InvalidParamsError("nonce must not be given together with params")
            params = authorizer
        else:
            if nonce is None:
                raise InvalidParamsError("nonce is required")
            params = CancelAuthorizationParams(authorizer=authorizer, nonce=nonce)
        if signature is None:
            raise InvalidParamsError("signature is required")

        args = [params.authorizer, params.nonce, signature.v, signature.r_bytes, signature.s_bytes]
        return await self._submit(
            AuthorizationIntent.CANCEL, params, signature, params.authorizer, args
        )

    async def submit_signed(self, signed: SignedAuthorization) -> PendingTransaction:
        """Submit a wire-format authorization according to its intent."""
        params = signed.to_params()
        signature = signed.to_signature()
        if signed.intent is AuthorizationIntent.CANCEL:
            return await self.cancel_authorization(params, signature=signature)
        if signed.intent is AuthorizationIntent.RECEIVE:
            return await self.receive_with_authorization(params, signature)
        return await self.transfer_with_authorization(params, signature)

    async def _submit_transfer(
        self,
        intent: AuthorizationIntent,
        params: TransferAuthorizationParams,
        signature: Signature,
    ) -> PendingTransaction:
        args = [
            params.from_address,
            params.to,
            params.value,
            params.valid_after,
            params.valid_before,
            params.nonce,
            signature.v,
            signature.r_bytes,
            signature.s_bytes,
        ]
        return await self._submit(intent, params, signature, params.from_address, args)

    async def _submit(
        self,
        intent: AuthorizationIntent,
        params: TransferAuthorizationParams | CancelAuthorizationParams,
        signature: Signature,
        authorizer: str,
        args: list[Any],
    ) -> PendingTransaction:
        method = intent.method
        nonce_hex = "0x" + params.nonce.hex()

        if self._domain is not None:
            assert_authorization(self._domain, intent, params, signature)

        if self._check_state and await self.authorization_state(authorizer, params.nonce):
            logger.warning(
                "[EIP3009] Authorization already consumed: authorizer=%s, nonce=%s",
                authorizer,
                nonce_hex,
            )
            raise AuthorizationAlreadyConsumedError(authorizer, params.nonce)

        logger.info(
            "[EIP3009] Submitting %s: token=%s, authorizer=%s, nonce=%s",
            method,
            self._token_address,
            authorizer,
            nonce_hex,
        )
        calldata = encode_call(EIP3009_ABI, method, args)
        try:
            tx_hash = await self._submitter.send_transaction(self._token_address, calldata)
        except SubmissionRevertedError as e:
            mapped = map_revert(e.reason, authorizer, params.nonce)
            logger.warning(
                "[EIP3009] %s reverted: %s",
                method,
                e.reason,
                extra={"error_type": type(mapped).__name__},
            )
            raise mapped from e

        logger.info("[EIP3009] %s broadcast: %s", method, tx_hash)
        return PendingTransaction(tx_hash, method, self._submitter)
