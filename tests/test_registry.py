"""
Tests for TokenRegistry.
"""

import pytest
from eth_utils import to_checksum_address

from eip3009.config import NetworkConfig
from eip3009.exceptions import UnknownTokenError
from eip3009.tokens import TokenInfo, TokenRegistry

BASE_USDC = "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"


def test_default_usdc_deployment():
    registry = TokenRegistry()
    token = registry.get_token(NetworkConfig.BASE_MAINNET, "usdc")
    assert token.address == BASE_USDC
    assert token.decimals == 6
    assert token.version == "2"


def test_domain_for():
    domain = TokenRegistry().domain_for("eip155:8453", "USDC")
    assert domain.name == "USD Coin"
    assert domain.version == "2"
    assert domain.chain_id == 8453
    assert domain.verifying_contract == BASE_USDC


def test_unknown_token():
    with pytest.raises(UnknownTokenError):
        TokenRegistry().get_token("eip155:8453", "DAI")


def test_empty_registry():
    registry = TokenRegistry(include_defaults=False)
    assert registry.all_symbols() == set()


def test_register_is_per_instance():
    registry = TokenRegistry()
    registry.register_token(
        "eip155:8453",
        TokenInfo(
            address="0x50c5725949a6f0c72e6c4a641f24049a917db0cb",
            decimals=18,
            name="Dai Stablecoin",
            symbol="dai",
            version="1",
        ),
    )

    assert registry.get_token("eip155:8453", "DAI").address == to_checksum_address(
        "0x50c5725949a6f0c72e6c4a641f24049a917db0cb"
    )
    with pytest.raises(UnknownTokenError):
        TokenRegistry().get_token("eip155:8453", "DAI")


def test_defaults_are_not_shared():
    first = TokenRegistry()
    first.get_token("eip155:8453", "USDC").name = "Changed"
    assert TokenRegistry().get_token("eip155:8453", "USDC").name == "USD Coin"


def test_find_by_address():
    registry = TokenRegistry()
    assert registry.find_by_address("eip155:8453", BASE_USDC.lower()).symbol == "USDC"
    assert registry.find_by_address("eip155:1", BASE_USDC) is None
