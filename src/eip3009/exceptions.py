"""
eip3009 custom exception hierarchy
"""


class Eip3009Error(Exception):
    """eip3009 base exception"""

    pass


class ValidationError(Eip3009Error):
    """Validation-related error"""

    pass


class MalformedDomainError(ValidationError):
    """EIP-712 domain has a non-canonical field value"""

    pass


class InvalidTimeWindowError(ValidationError):
    """Authorization validity window is empty or inverted"""

    def __init__(self, valid_after: int, valid_before: int, message: str | None = None):
        self.valid_after = valid_after
        self.valid_before = valid_before
        super().__init__(
            message
            or f"Invalid time window: validAfter={valid_after} must be < validBefore={valid_before}"
        )


class InvalidParamsError(ValidationError):
    """Authorization parameter has an out-of-range value"""

    pass


class NonceCollisionError(Eip3009Error):
    """Nonce generator produced a nonce it had already issued"""

    pass


class SignatureError(Eip3009Error):
    """Signature-related error"""

    pass


class SignatureCreationError(SignatureError):
    """Signature creation failed"""

    pass


class SignatureRecoveryFailedError(SignatureError):
    """Signer could not be recovered, or recovered to the zero address"""

    pass


class NonCanonicalSignatureError(SignatureError):
    """Signature s value lies in the upper half of the curve order"""

    pass


class SubmissionError(Eip3009Error):
    """Submission to the token contract failed"""

    retryable = False


class SubmissionFailedError(SubmissionError):
    """Network or transport failure while talking to the node.

    Retry only after re-reading authorization state.
    """

    retryable = True


class SubmissionRevertedError(SubmissionError):
    """Contract rejected the call"""

    def __init__(self, reason: str, message: str | None = None):
        self.reason = reason
        super().__init__(message or f"Execution reverted: {reason}")


class AuthorizationAlreadyConsumedError(SubmissionRevertedError):
    """Authorization nonce was already used or canceled"""

    def __init__(self, authorizer: str, nonce: bytes, reason: str = "authorization is used or canceled"):
        self.authorizer = authorizer
        self.nonce = nonce
        super().__init__(
            reason,
            f"Authorization {('0x' + nonce.hex())} of {authorizer} is already used or canceled",
        )


class AuthorizationNotYetValidError(SubmissionRevertedError):
    """Block timestamp is before validAfter"""

    pass


class AuthorizationExpiredError(SubmissionRevertedError):
    """Block timestamp is at or after validBefore"""

    pass


class InvalidAuthorizationSignatureError(SubmissionRevertedError):
    """Contract could not recover the authorizer from the signature"""

    pass


class CallerNotPayeeError(SubmissionRevertedError):
    """receiveWithAuthorization was not sent by the payee"""

    pass


class TransactionError(Eip3009Error):
    """Transaction-related error"""

    pass


class TransactionTimeoutError(TransactionError):
    """Transaction timeout"""

    pass


class TransactionFailedError(TransactionError):
    """Transaction execution failed"""

    pass


class ConfigurationError(Eip3009Error):
    """Configuration-related error"""

    pass


class UnsupportedNetworkError(ConfigurationError):
    """Unsupported network"""

    pass


class UnknownTokenError(ConfigurationError):
    """Unknown token"""

    pass
