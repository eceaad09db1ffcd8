"""
eip3009 - Transfer With Authorization for Python

Builds, signs and verifies EIP-3009 authorizations off-chain and submits them
to ERC-20 token contracts.
"""

__version__ = "0.1.0"

from eip3009.exceptions import (
    AuthorizationAlreadyConsumedError,
    AuthorizationExpiredError,
    AuthorizationNotYetValidError,
    CallerNotPayeeError,
    ConfigurationError,
    Eip3009Error,
    InvalidAuthorizationSignatureError,
    InvalidParamsError,
    InvalidTimeWindowError,
    MalformedDomainError,
    NonCanonicalSignatureError,
    NonceCollisionError,
    SignatureCreationError,
    SignatureError,
    SignatureRecoveryFailedError,
    SubmissionError,
    SubmissionFailedError,
    SubmissionRevertedError,
    TransactionError,
    TransactionFailedError,
    TransactionTimeoutError,
    UnknownTokenError,
    UnsupportedNetworkError,
    ValidationError,
)
from eip3009.types import (
    AuthorizationIntent,
    CancelAuthorizationParams,
    Domain,
    Receipt,
    Signature,
    SignedAuthorization,
    TransferAuthorizationParams,
)
from eip3009.signing import (
    AuthorizationSigner,
    AuthorizationVerifier,
    NonceGenerator,
    build_digest,
    compute_time_bounds,
    generate_nonce,
    recover_signer,
    sign,
    verify,
    verify_authorization,
)
from eip3009.client import (
    AuthorizationClient,
    ContractSubmitter,
    PendingTransaction,
    Web3ContractSubmitter,
)
from eip3009.config import NetworkConfig
from eip3009.tokens import LazyToken, TokenInfo, TokenRegistry

__all__ = [
    "__version__",
    # Types
    "Domain",
    "AuthorizationIntent",
    "TransferAuthorizationParams",
    "CancelAuthorizationParams",
    "Signature",
    "SignedAuthorization",
    "Receipt",
    # Signing
    "build_digest",
    "generate_nonce",
    "compute_time_bounds",
    "NonceGenerator",
    "sign",
    "AuthorizationSigner",
    "recover_signer",
    "verify",
    "verify_authorization",
    "AuthorizationVerifier",
    # Client
    "AuthorizationClient",
    "ContractSubmitter",
    "PendingTransaction",
    "Web3ContractSubmitter",
    # Configuration
    "NetworkConfig",
    "TokenInfo",
    "TokenRegistry",
    "LazyToken",
    # Exceptions
    "Eip3009Error",
    "ValidationError",
    "MalformedDomainError",
    "InvalidTimeWindowError",
    "InvalidParamsError",
    "NonceCollisionError",
    "SignatureError",
    "SignatureCreationError",
    "SignatureRecoveryFailedError",
    "NonCanonicalSignatureError",
    "SubmissionError",
    "SubmissionFailedError",
    "SubmissionRevertedError",
    "AuthorizationAlreadyConsumedError",
    "AuthorizationNotYetValidError",
    "AuthorizationExpiredError",
    "InvalidAuthorizationSignatureError",
    "CallerNotPayeeError",
    "TransactionError",
    "TransactionTimeoutError",
    "TransactionFailedError",
    "ConfigurationError",
    "UnsupportedNetworkError",
    "UnknownTokenError",
]
