"""
Type definitions for EIP-3009 authorizations
"""

import enum
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from eth_keys.constants import SECPK1_N
from eth_utils import is_address, to_checksum_address
from pydantic import BaseModel, ConfigDict, Field

from eip3009.exceptions import (
    InvalidParamsError,
    InvalidTimeWindowError,
    MalformedDomainError,
    SignatureRecoveryFailedError,
)

UINT256_MAX = 2**256 - 1
UINT64_MAX = 2**64 - 1
NONCE_SIZE = 32

# s values above this are the "high" twin of a canonical signature
SECPK1_HALF_N = SECPK1_N // 2


def _is_uint(value: Any, maximum: int) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= maximum


def normalize_address(address: str, field_name: str = "address") -> str:
    """Validate *address* and return it in checksum form."""
    if not isinstance(address, str) or not is_address(address):
        raise InvalidParamsError(f"Invalid {field_name}: {address!r}")
    return to_checksum_address(address)


def normalize_nonce(nonce: bytes | str) -> bytes:
    """Accept a 32-byte nonce as bytes or 0x-hex and return bytes."""
    if isinstance(nonce, str):
        hex_str = nonce[2:] if nonce.startswith(("0x", "0X")) else nonce
        try:
            nonce = bytes.fromhex(hex_str)
        except ValueError:
            raise InvalidParamsError(f"Nonce is not valid hex: {nonce!r}")
    if not isinstance(nonce, (bytes, bytearray)):
        raise InvalidParamsError(f"Nonce must be bytes or hex string, got {type(nonce).__name__}")
    if len(nonce) != NONCE_SIZE:
        raise InvalidParamsError(f"Nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")
    return bytes(nonce)


class AuthorizationIntent(str, enum.Enum):
    """The three EIP-3009 authorization kinds"""

    TRANSFER = "transfer"
    RECEIVE = "receive"
    CANCEL = "cancel"

    @property
    def type_hash(self) -> bytes:
        from eip3009.signing.typehashes import type_hash_for

        return type_hash_for(self)

    @property
    def primary_type(self) -> str:
        return _PRIMARY_TYPES[self]

    @property
    def method(self) -> str:
        """Token contract function that consumes this intent"""
        return _METHODS[self]


_PRIMARY_TYPES = {
    AuthorizationIntent.TRANSFER: "TransferWithAuthorization",
    AuthorizationIntent.RECEIVE: "ReceiveWithAuthorization",
    AuthorizationIntent.CANCEL: "CancelAuthorization",
}

_METHODS = {
    AuthorizationIntent.TRANSFER: "transferWithAuthorization",
    AuthorizationIntent.RECEIVE: "receiveWithAuthorization",
    AuthorizationIntent.CANCEL: "cancelAuthorization",
}


@dataclass(frozen=True)
class Domain:
    """EIP-712 domain of a token contract"""

    name: str
    version: str
    chain_id: int
    verifying_contract: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise MalformedDomainError(f"Domain name must be a string, got {self.name!r}")
        if not isinstance(self.version, str):
            raise MalformedDomainError(f"Domain version must be a string, got {self.version!r}")
        if not _is_uint(self.chain_id, UINT64_MAX):
            raise MalformedDomainError(f"Invalid chain id: {self.chain_id!r}")
        if not isinstance(self.verifying_contract, str) or not is_address(
            self.verifying_contract
        ):
            raise MalformedDomainError(f"Invalid verifying contract: {self.verifying_contract!r}")
        object.__setattr__(self, "verifying_contract", to_checksum_address(self.verifying_contract))

    @property
    def separator(self) -> bytes:
        """32-byte EIP-712 domain separator"""
        from eip3009.signing.eip712 import hash_domain

        return hash_domain(self)

    def to_eip712_dict(self) -> dict[str, Any]:
        """Domain in the dict shape wallets and eth_account expect"""
        return {
            "name": self.name,
            "version": self.version,
            "chainId": self.chain_id,
            "verifyingContract": self.verifying_contract,
        }

    @classmethod
    def from_eip712_dict(cls, data: dict[str, Any]) -> "Domain":
        try:
            return cls(
                name=data["name"],
                version=data["version"],
                chain_id=data["chainId"],
                verifying_contract=data["verifyingContract"],
            )
        except KeyError as e:
            raise MalformedDomainError(f"Domain is missing field {e.args[0]}")


@dataclass(frozen=True)
class TransferAuthorizationParams:
    """Parameters of a transferWithAuthorization / receiveWithAuthorization"""

    from_address: str
    to: str
    value: int
    valid_after: int
    valid_before: int
    nonce: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "from_address", normalize_address(self.from_address, "from"))
        object.__setattr__(self, "to", normalize_address(self.to, "to"))
        object.__setattr__(self, "nonce", normalize_nonce(self.nonce))
        for name in ("value", "valid_after", "valid_before"):
            if not _is_uint(getattr(self, name), UINT256_MAX):
                raise InvalidParamsError(f"{name} must be a uint256, got {getattr(self, name)!r}")
        if self.valid_after >= self.valid_before:
            raise InvalidTimeWindowError(self.valid_after, self.valid_before)

    @classmethod
    def with_duration(
        cls,
        from_address: str,
        to: str,
        value: int,
        duration_seconds: int,
        nonce: bytes | str | None = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> "TransferAuthorizationParams":
        """Create an authorization valid from now for *duration_seconds*.

        A fresh random nonce is generated when none is given.
        """
        from eip3009.signing.nonce import compute_time_bounds, generate_nonce

        valid_after, valid_before = compute_time_bounds(duration_seconds, clock=clock)
        return cls(
            from_address=from_address,
            to=to,
            value=value,
            valid_after=valid_after,
            valid_before=valid_before,
            nonce=nonce if nonce is not None else generate_nonce(),
        )

    @classmethod
    def without_time_bounds(
        cls,
        from_address: str,
        to: str,
        value: int,
        nonce: bytes | str,
    ) -> "TransferAuthorizationParams":
        """Create an authorization that never expires.

        Not recommended: a leaked signature stays usable until the nonce is
        cancelled on-chain. Prefer with_duration().
        """
        return cls(
            from_address=from_address,
            to=to,
            value=value,
            valid_after=0,
            valid_before=UINT256_MAX,
            nonce=nonce,
        )

    def is_valid_at(self, timestamp: int | None = None) -> bool:
        """Mirror of the on-chain window check (validAfter < now < validBefore)"""
        now = int(time.time()) if timestamp is None else timestamp
        return self.valid_after < now < self.valid_before

    def to_eip712_message(self) -> dict[str, Any]:
        return {
            "from": self.from_address,
            "to": self.to,
            "value": self.value,
            "validAfter": self.valid_after,
            "validBefore": self.valid_before,
            "nonce": self.nonce,
        }


@dataclass(frozen=True)
class CancelAuthorizationParams:
    """Parameters of a cancelAuthorization"""

    authorizer: str
    nonce: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "authorizer", normalize_address(self.authorizer, "authorizer"))
        object.__setattr__(self, "nonce", normalize_nonce(self.nonce))

    def to_eip712_message(self) -> dict[str, Any]:
        return {"authorizer": self.authorizer, "nonce": self.nonce}


@dataclass(frozen=True)
class Signature:
    """secp256k1 signature split into (r, s, v) with v in {27, 28}"""

    r: int
    s: int
    v: int

    def __post_init__(self) -> None:
        if not _is_uint(self.r, SECPK1_N - 1) or self.r == 0:
            raise SignatureRecoveryFailedError(f"Signature r out of range: {self.r!r}")
        if not _is_uint(self.s, SECPK1_N - 1) or self.s == 0:
            raise SignatureRecoveryFailedError(f"Signature s out of range: {self.s!r}")
        v = self.v
        if v in (0, 1):
            v += 27
        if v not in (27, 28):
            raise SignatureRecoveryFailedError(f"Invalid recovery id v={self.v!r}")
        object.__setattr__(self, "v", v)

    @property
    def is_canonical(self) -> bool:
        """True when s lies in the lower half of the curve order"""
        return self.s <= SECPK1_HALF_N

    @property
    def recovery_id(self) -> int:
        return self.v - 27

    @property
    def r_bytes(self) -> bytes:
        return self.r.to_bytes(32, "big")

    @property
    def s_bytes(self) -> bytes:
        return self.s.to_bytes(32, "big")

    def to_bytes(self) -> bytes:
        """65-byte r ‖ s ‖ v encoding"""
        return self.r_bytes + self.s_bytes + bytes([self.v])

    def to_hex(self) -> str:
        return "0x" + self.to_bytes().hex()

    @classmethod
    def from_bytes(cls, data: bytes) -> "Signature":
        if len(data) != 65:
            raise SignatureRecoveryFailedError(f"Signature must be 65 bytes, got {len(data)}")
        return cls(
            r=int.from_bytes(data[:32], "big"),
            s=int.from_bytes(data[32:64], "big"),
            v=data[64],
        )

    @classmethod
    def from_hex(cls, signature: str) -> "Signature":
        hex_str = signature[2:] if signature.startswith(("0x", "0X")) else signature
        try:
            data = bytes.fromhex(hex_str)
        except ValueError:
            raise SignatureRecoveryFailedError("Signature is not valid hex")
        return cls.from_bytes(data)


@dataclass
class Receipt:
    """Outcome of a mined transaction"""

    tx_hash: str
    status: bool
    block_number: int | None = None
    raw: Any = field(default=None, repr=False)


# ---------------------------------------------------------------------------
# Wire format
# ---------------------------------------------------------------------------


def _hex(data: bytes) -> str:
    return "0x" + data.hex()


def _parse_word(value: str, name: str) -> int:
    hex_str = value[2:] if value.startswith(("0x", "0X")) else value
    try:
        data = bytes.fromhex(hex_str)
    except ValueError:
        raise SignatureRecoveryFailedError(f"Signature {name} is not valid hex")
    if len(data) != 32:
        raise SignatureRecoveryFailedError(f"Signature {name} must be 32 bytes, got {len(data)}")
    return int.from_bytes(data, "big")


class SignedAuthorization(BaseModel):
    """Signed authorization as handed from the signer to a relayer (JSON)"""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=False)

    intent: AuthorizationIntent
    from_address: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    value: Optional[str] = None
    valid_after: Optional[str] = Field(default=None, alias="validAfter")
    valid_before: Optional[str] = Field(default=None, alias="validBefore")
    authorizer: Optional[str] = None
    nonce: str  # 32-byte hex string (0x...)
    v: int
    r: str
    s: str

    @classmethod
    def from_params(
        cls,
        intent: AuthorizationIntent,
        params: TransferAuthorizationParams | CancelAuthorizationParams,
        signature: Signature,
    ) -> "SignedAuthorization":
        intent = AuthorizationIntent(intent)
        common = {
            "intent": intent,
            "nonce": _hex(params.nonce),
            "v": signature.v,
            "r": _hex(signature.r_bytes),
            "s": _hex(signature.s_bytes),
        }
        if intent is AuthorizationIntent.CANCEL:
            if not isinstance(params, CancelAuthorizationParams):
                raise TypeError("cancel intent requires CancelAuthorizationParams")
            return cls(authorizer=params.authorizer, **common)
        if not isinstance(params, TransferAuthorizationParams):
            raise TypeError(f"{intent.value} intent requires TransferAuthorizationParams")
        return cls(
            from_address=params.from_address,
            to=params.to,
            value=str(params.value),
            valid_after=str(params.valid_after),
            valid_before=str(params.valid_before),
            **common,
        )

    def to_params(self) -> TransferAuthorizationParams | CancelAuthorizationParams:
        if self.intent is AuthorizationIntent.CANCEL:
            if self.authorizer is None:
                raise InvalidParamsError("cancel authorization is missing authorizer")
            return CancelAuthorizationParams(authorizer=self.authorizer, nonce=self.nonce)
        missing = [
            name
            for name in ("from_address", "to", "value", "valid_after", "valid_before")
            if getattr(self, name) is None
        ]
        if missing:
            raise InvalidParamsError(f"authorization is missing fields: {', '.join(missing)}")
        try:
            value, valid_after, valid_before = (
                int(self.value),
                int(self.valid_after),
                int(self.valid_before),
            )
        except ValueError as e:
            raise InvalidParamsError(f"authorization has a non-integer field: {e}")
        return TransferAuthorizationParams(
            from_address=self.from_address,
            to=self.to,
            value=value,
            valid_after=valid_after,
            valid_before=valid_before,
            nonce=self.nonce,
        )

    def to_signature(self) -> Signature:
        return Signature(r=_parse_word(self.r, "r"), s=_parse_word(self.s, "s"), v=self.v)
