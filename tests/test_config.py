"""
Tests for network configuration.
"""

import pytest

from eip3009.config import NetworkConfig, resolve_provider_uri
from eip3009.exceptions import UnsupportedNetworkError


def test_chain_id_from_caip2():
    assert NetworkConfig.get_chain_id("eip155:8453") == 8453
    assert NetworkConfig.get_chain_id("eip155:999999") == 999999


@pytest.mark.parametrize("network", ["eip155:abc", "tron:nile", "mainnet"])
def test_unsupported_network(network):
    with pytest.raises(UnsupportedNetworkError):
        NetworkConfig.get_chain_id(network)


def test_rpc_url_lookup():
    assert NetworkConfig.get_rpc_url("eip155:8453") == "https://mainnet.base.org"
    assert NetworkConfig.get_rpc_url("eip155:999999") is None
    assert NetworkConfig.get_rpc_url("bogus") is None


def test_rpc_url_env_override(monkeypatch):
    monkeypatch.setenv("EIP3009_RPC_URL_8453", "http://localhost:8545")
    assert NetworkConfig.get_rpc_url("eip155:8453") == "http://localhost:8545"
    assert resolve_provider_uri("eip155:8453") == "http://localhost:8545"


def test_resolve_provider_uri_passthrough():
    assert resolve_provider_uri("https://rpc.example.com") == "https://rpc.example.com"
    assert resolve_provider_uri("wss://rpc.example.com") == "wss://rpc.example.com"


def test_network_for_chain_id():
    assert NetworkConfig.network_for_chain_id(1) == NetworkConfig.EVM_MAINNET
