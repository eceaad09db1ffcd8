"""
LazyToken - ERC-20 contract wrapper that memoizes immutable metadata
"""

import logging
from decimal import Decimal
from typing import Any

from eip3009.abi import ERC20_ABI, decode_output, encode_call
from eip3009.client.base import ContractSubmitter, PendingTransaction
from eip3009.types import normalize_address

logger = logging.getLogger(__name__)


class LazyToken:
    """ERC-20 token that queries the chain on first use.

    name, symbol and decimals never change after deployment and are fetched
    at most once per instance. Balances, allowances and total supply are
    always read fresh. A failed read is not cached.
    """

    def __init__(self, address: str, submitter: ContractSubmitter) -> None:
        self._address = normalize_address(address, "token address")
        self._submitter = submitter
        self._name: str | None = None
        self._symbol: str | None = None
        self._decimals: int | None = None

    @property
    def address(self) -> str:
        return self._address

    async def _call(self, method: str, args: list[Any] | None = None) -> Any:
        data = await self._submitter.call(
            self._address, encode_call(ERC20_ABI, method, args or [])
        )
        (value,) = decode_output(ERC20_ABI, method, data)
        return value

    async def _send(self, method: str, args: list[Any]) -> PendingTransaction:
        tx_hash = await self._submitter.send_transaction(
            self._address, encode_call(ERC20_ABI, method, args)
        )
        logger.info("%s broadcast on %s: %s", method, self._address, tx_hash)
        return PendingTransaction(tx_hash, method, self._submitter)

    async def name(self) -> str:
        if self._name is None:
            self._name = await self._call("name")
        return self._name

    async def symbol(self) -> str:
        if self._symbol is None:
            self._symbol = await self._call("symbol")
        return self._symbol

    async def decimals(self) -> int:
        if self._decimals is None:
            self._decimals = await self._call("decimals")
        return self._decimals

    async def total_supply(self) -> int:
        return await self._call("totalSupply")

    async def balance_of(self, account: str) -> int:
        return await self._call("balanceOf", [normalize_address(account, "account")])

    async def allowance(self, owner: str, spender: str) -> int:
        """Remaining amount *spender* may transfer on behalf of *owner*."""
        return await self._call(
            "allowance",
            [normalize_address(owner, "owner"), normalize_address(spender, "spender")],
        )

    async def get_balance(self, amount: int) -> Decimal:
        """Scale a raw token amount by the token's decimals.

        Example:
            With 6 decimals, ``1_500_000`` becomes ``Decimal("1.500000")``.
        """
        decimals = await self.decimals()
        return Decimal(amount).scaleb(-decimals)

    async def transfer(self, to: str, amount: int) -> PendingTransaction:
        return await self._send("transfer", [normalize_address(to, "to"), amount])

    async def approve(self, spender: str, amount: int) -> PendingTransaction:
        return await self._send("approve", [normalize_address(spender, "spender"), amount])

    async def transfer_from(self, from_address: str, to: str, amount: int) -> PendingTransaction:
        return await self._send(
            "transferFrom",
            [normalize_address(from_address, "from"), normalize_address(to, "to"), amount],
        )
