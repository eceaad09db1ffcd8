"""
Contract submitter base interface
"""

import logging
from abc import ABC, abstractmethod

from eip3009.exceptions import TransactionFailedError
from eip3009.types import Receipt

logger = logging.getLogger(__name__)

# Default receipt timeout in seconds
DEFAULT_RECEIPT_TIMEOUT = 120


class ContractSubmitter(ABC):
    """
    Abstract base class for contract submitters.

    Responsible for read-only calls and for broadcasting transactions to a
    token contract. Calldata is already encoded by the caller.
    """

    @abstractmethod
    def get_address(self) -> str | None:
        """Get the sender address, or None for a read-only submitter"""
        pass

    @abstractmethod
    async def call(self, to: str, data: bytes) -> bytes:
        """
        Execute a read-only call.

        Args:
            to: Contract address
            data: Calldata (selector followed by encoded arguments)

        Returns:
            Raw return data

        Raises:
            SubmissionRevertedError: If the call reverts
            SubmissionFailedError: On transport failure
        """
        pass

    @abstractmethod
    async def send_transaction(self, to: str, data: bytes) -> str:
        """
        Sign and broadcast a transaction.

        Returns:
            Transaction hash (0x-hex)

        Raises:
            SubmissionRevertedError: If the node rejects it as a revert
            SubmissionFailedError: On transport failure
        """
        pass

    @abstractmethod
    async def wait_for_transaction_receipt(
        self,
        tx_hash: str,
        timeout: float = DEFAULT_RECEIPT_TIMEOUT,
    ) -> Receipt:
        """
        Wait for transaction confirmation.

        Raises:
            TransactionTimeoutError: If no receipt arrives within *timeout*
        """
        pass


class PendingTransaction:
    """A broadcast transaction whose outcome is not yet known.

    Until wait() returns, the authorization it carries may or may not have
    been consumed; re-read authorizationState before resubmitting.
    """

    def __init__(self, tx_hash: str, method: str, submitter: ContractSubmitter) -> None:
        self.tx_hash = tx_hash
        self.method = method
        self._submitter = submitter
        self._receipt: Receipt | None = None

    def __repr__(self) -> str:
        return f"PendingTransaction(tx_hash={self.tx_hash!r}, method={self.method!r})"

    @property
    def receipt(self) -> Receipt | None:
        return self._receipt

    async def wait(self, timeout: float = DEFAULT_RECEIPT_TIMEOUT) -> Receipt:
        """Wait for the receipt.

        Raises:
            TransactionTimeoutError: If no receipt arrives within *timeout*
            TransactionFailedError: If the transaction was mined but reverted
        """
        if self._receipt is None:
            logger.info("Waiting for %s receipt: %s", self.method, self.tx_hash)
            self._receipt = await self._submitter.wait_for_transaction_receipt(
                self.tx_hash, timeout
            )
        if not self._receipt.status:
            logger.error("Transaction failed: %s (%s)", self.tx_hash, self.method)
            raise TransactionFailedError(f"Transaction {self.tx_hash} ({self.method}) reverted")
        logger.info(
            "Transaction confirmed: %s (block %s)", self.tx_hash, self._receipt.block_number
        )
        return self._receipt
