"""
Nonce generation and validity windows for EIP-3009 authorizations.

EIP-3009 nonces are random 32-byte values rather than sequential counters, so
any number of authorizations can be prepared in parallel without the signer
coordinating with itself. Predictable nonces (counters, hashes of caller data)
would let an attacker pre-compute and front-run them, so only a CSPRNG is used.
"""

import logging
import secrets
import threading
import time
from typing import Callable

from eip3009.exceptions import InvalidTimeWindowError, NonceCollisionError

logger = logging.getLogger(__name__)

NONCE_SIZE = 32

# Default validity period (1 hour)
DEFAULT_VALIDITY_SECONDS = 3600


def generate_nonce() -> bytes:
    """Generate a cryptographically secure random 32-byte nonce."""
    return secrets.token_bytes(NONCE_SIZE)


class NonceGenerator:
    """Random nonce source that also refuses to repeat itself.

    The record of issued nonces is scoped to the instance. A duplicate draw is
    retried once; a second consecutive duplicate means the random source is
    broken and raises NonceCollisionError. A source that returns the wrong number
    of bytes raises ValueError.
    """

    def __init__(self, random_bytes: Callable[[int], bytes] = secrets.token_bytes) -> None:
        self._random_bytes = random_bytes
        self._issued: set[bytes] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._issued)

    def generate(self) -> bytes:
        with self._lock:
            for attempt in range(2):
                nonce = self._random_bytes(NONCE_SIZE)
                if len(nonce) != NONCE_SIZE:
                    raise ValueError(
                        f"Random source returned {len(nonce)} bytes, expected {NONCE_SIZE}"
                    )
                if nonce not in self._issued:
                    self._issued.add(nonce)
                    return nonce
                logger.warning("Duplicate nonce drawn, retrying", extra={"attempt": attempt})
            raise NonceCollisionError("Random source produced the same nonce twice in a row")


def compute_time_bounds(
    duration: int = DEFAULT_VALIDITY_SECONDS,
    clock: Callable[[], float] | None = None,
    skew: int = 0,
) -> tuple[int, int]:
    """Create (validAfter, validBefore) timestamps.

    Both bounds come from one clock read. *skew* moves validAfter back to
    tolerate a chain whose block timestamps lag the signer's clock; choosing it
    is the caller's job.

    Args:
        duration: Seconds the authorization stays valid
        clock: Callable returning unix time (default: time.time)
        skew: Seconds subtracted from validAfter

    Returns:
        (valid_after, valid_before)
    """
    if duration <= 0:
        raise InvalidTimeWindowError(0, duration, f"Duration must be positive, got {duration}")
    if skew < 0:
        raise InvalidTimeWindowError(0, duration, f"Skew must not be negative, got {skew}")

    now = int((clock or time.time)())
    return max(now - skew, 0), now + duration
