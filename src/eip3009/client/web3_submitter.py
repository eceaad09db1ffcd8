"""
Web3ContractSubmitter - ContractSubmitter backed by web3.py
"""

import logging
from typing import Any

from eth_account import Account
from web3 import AsyncHTTPProvider, AsyncWeb3
from web3.exceptions import ContractLogicError, TimeExhausted, Web3Exception
from web3.middleware import ExtraDataToPOAMiddleware

from eip3009.client.base import DEFAULT_RECEIPT_TIMEOUT, ContractSubmitter
from eip3009.config import resolve_provider_uri
from eip3009.exceptions import (
    ConfigurationError,
    SubmissionFailedError,
    SubmissionRevertedError,
    TransactionTimeoutError,
)
from eip3009.types import Receipt

logger = logging.getLogger(__name__)

_REVERT_PREFIX = "execution reverted:"


def revert_reason(error: ContractLogicError) -> str:
    """Extract the bare revert string from a web3 contract error"""
    message = error.message if getattr(error, "message", None) else str(error)
    message = message.strip()
    if message.lower().startswith(_REVERT_PREFIX):
        message = message[len(_REVERT_PREFIX):].strip()
    return message


class Web3ContractSubmitter(ContractSubmitter):
    """Submits calls and transactions through an AsyncWeb3 HTTP provider.

    Transactions are signed locally with eth_account. Without a private key the
    submitter can only perform read-only calls.
    """

    def __init__(
        self,
        private_key: str | None = None,
        network: str = "eip155:8453",
        rpc_url: str | None = None,
    ) -> None:
        if private_key is not None and not private_key.startswith("0x"):
            private_key = "0x" + private_key
        self._private_key = private_key
        self._network = network
        self._address = Account.from_key(private_key).address if private_key else None

        provider_uri = rpc_url or resolve_provider_uri(network)
        if not provider_uri:
            raise ConfigurationError(f"No RPC URL configured for network {network}")
        self._provider_uri = provider_uri
        self._w3: AsyncWeb3 | None = None
        logger.debug(
            "Web3ContractSubmitter initialized",
            extra={"address": self._address, "network": network},
        )

    @classmethod
    def from_private_key(
        cls, private_key: str, network: str = "eip155:8453"
    ) -> "Web3ContractSubmitter":
        """Create submitter from private key"""
        return cls(private_key, network)

    def get_address(self) -> str | None:
        return self._address

    @property
    def network(self) -> str:
        return self._network

    def _ensure_web3(self) -> AsyncWeb3:
        """Lazy initialize the async web3 client."""
        if self._w3 is None:
            w3 = AsyncWeb3(AsyncHTTPProvider(self._provider_uri))
            w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
            self._w3 = w3
        return self._w3

    async def call(self, to: str, data: bytes) -> bytes:
        w3 = self._ensure_web3()
        try:
            result = await w3.eth.call({"to": to, "data": data})
        except ContractLogicError as e:
            raise SubmissionRevertedError(revert_reason(e))
        except (Web3Exception, OSError) as e:
            logger.error("eth_call failed: %s", e, extra={"contract": to})
            raise SubmissionFailedError(f"eth_call to {to} failed: {e}")
        return bytes(result)

    async def _build_transaction(self, w3: AsyncWeb3, to: str, data: bytes) -> dict[str, Any]:
        tx: dict[str, Any] = {
            "from": self._address,
            "to": to,
            "data": data,
            "value": 0,
            "nonce": await w3.eth.get_transaction_count(self._address, "pending"),
            "chainId": await w3.eth.chain_id,
        }
        # Estimation executes the call, so a revert surfaces here with its reason
        tx["gas"] = await w3.eth.estimate_gas(tx)
        tx["gasPrice"] = await w3.eth.gas_price
        return tx

    async def send_transaction(self, to: str, data: bytes) -> str:
        if self._private_key is None:
            raise ConfigurationError("Web3ContractSubmitter has no private key; it is read-only")

        w3 = self._ensure_web3()
        try:
            tx = await self._build_transaction(w3, to, data)
            signed_tx = w3.eth.account.sign_transaction(tx, private_key=self._private_key)
            tx_hash = await w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        except ContractLogicError as e:
            reason = revert_reason(e)
            logger.warning("Transaction would revert: %s", reason, extra={"contract": to})
            raise SubmissionRevertedError(reason)
        except (Web3Exception, OSError) as e:
            logger.error(
                "Contract write failed: %s",
                e,
                exc_info=True,
                extra={"contract": to},
            )
            raise SubmissionFailedError(f"Transaction to {to} failed: {e}")

        tx_hash_hex = tx_hash.hex()
        if not tx_hash_hex.startswith("0x"):
            tx_hash_hex = "0x" + tx_hash_hex
        return tx_hash_hex

    async def wait_for_transaction_receipt(
        self,
        tx_hash: str,
        timeout: float = DEFAULT_RECEIPT_TIMEOUT,
    ) -> Receipt:
        """Wait for EVM transaction confirmation"""
        w3 = self._ensure_web3()
        try:
            receipt = await w3.eth.wait_for_transaction_receipt(tx_hash, timeout=timeout)
        except TimeExhausted:
            raise TransactionTimeoutError(
                f"Transaction {tx_hash} not confirmed within {timeout} seconds"
            )
        except (Web3Exception, OSError) as e:
            raise SubmissionFailedError(f"Failed to fetch receipt for {tx_hash}: {e}")

        return Receipt(
            tx_hash=tx_hash,
            status=receipt["status"] == 1,
            block_number=receipt["blockNumber"],
            raw=receipt,
        )
