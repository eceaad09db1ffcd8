"""
Pytest configuration and fixtures
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from eth_abi import encode
from eth_account import Account

from eip3009.types import Domain, TransferAuthorizationParams

USDC_MAINNET = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
PAYEE = "0x2222222222222222222222222222222222222222"
RELAYER = "0x3333333333333333333333333333333333333333"

PRIVATE_KEY = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
PRIVATE_KEY_ADDRESS = Account.from_key(PRIVATE_KEY).address
OTHER_PRIVATE_KEY = "0x" + "42" * 32


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def private_key():
    return PRIVATE_KEY


@pytest.fixture
def signer_address():
    return PRIVATE_KEY_ADDRESS


@pytest.fixture
def other_private_key():
    return OTHER_PRIVATE_KEY


@pytest.fixture
def other_address():
    return Account.from_key(OTHER_PRIVATE_KEY).address


@pytest.fixture
def usdc_domain():
    return Domain(
        name="USD Coin",
        version="2",
        chain_id=1,
        verifying_contract=USDC_MAINNET,
    )


@pytest.fixture
def transfer_params():
    return TransferAuthorizationParams(
        from_address=PRIVATE_KEY_ADDRESS,
        to=PAYEE,
        value=1_000_000,
        valid_after=0,
        valid_before=1_900_000_000,
        nonce=b"\xcd" * 32,
    )


@pytest.fixture
def mock_submitter():
    submitter = MagicMock()
    submitter.get_address.return_value = RELAYER
    submitter.call = AsyncMock(return_value=encode(["bool"], [False]))
    submitter.send_transaction = AsyncMock(return_value="0x" + "ab" * 32)
    submitter.wait_for_transaction_receipt = AsyncMock()
    return submitter
