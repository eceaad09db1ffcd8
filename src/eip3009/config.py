"""
Network Configuration
Centralized configuration for chain IDs and RPC endpoints
"""

import os
from typing import Dict

from eip3009.exceptions import UnsupportedNetworkError

# Environment variable prefix for RPC overrides, e.g. EIP3009_RPC_URL_8453
RPC_URL_ENV_PREFIX = "EIP3009_RPC_URL_"


class NetworkConfig:
    """Network configuration for chain IDs and RPC endpoints"""

    # EVM Networks
    EVM_MAINNET = "eip155:1"
    EVM_SEPOLIA = "eip155:11155111"
    BASE_MAINNET = "eip155:8453"
    BASE_SEPOLIA = "eip155:84532"
    POLYGON_MAINNET = "eip155:137"
    ARBITRUM_MAINNET = "eip155:42161"

    CHAIN_IDS: Dict[str, int] = {
        "eip155:1": 1,
        "eip155:11155111": 11155111,
        "eip155:8453": 8453,
        "eip155:84532": 84532,
        "eip155:137": 137,
        "eip155:42161": 42161,
    }

    # Public RPC URLs for EVM networks
    RPC_URLS: Dict[str, str] = {
        "eip155:1": "https://eth.llamarpc.com",
        "eip155:11155111": "https://rpc.sepolia.org",
        "eip155:8453": "https://mainnet.base.org",
        "eip155:84532": "https://sepolia.base.org",
        "eip155:137": "https://polygon-rpc.com",
        "eip155:42161": "https://arb1.arbitrum.io/rpc",
    }

    @classmethod
    def get_rpc_url(cls, network: str) -> str | None:
        """Get RPC URL for an EVM network.

        An ``EIP3009_RPC_URL_<chainId>`` environment variable takes precedence
        over the built-in table.

        Args:
            network: Network identifier (e.g., "eip155:8453")

        Returns:
            RPC URL string, or None if not configured
        """
        try:
            chain_id = cls.get_chain_id(network)
        except UnsupportedNetworkError:
            return None
        override = os.environ.get(f"{RPC_URL_ENV_PREFIX}{chain_id}")
        if override:
            return override
        return cls.RPC_URLS.get(network)

    @classmethod
    def get_chain_id(cls, network: str) -> int:
        """Get chain ID for network

        Args:
            network: Network identifier (e.g., "eip155:1")

        Returns:
            Chain ID as integer

        Raises:
            UnsupportedNetworkError: If network is not supported
        """
        # EVM networks encode chain ID directly in the identifier
        if network.startswith("eip155:"):
            try:
                return int(network.split(":", 1)[1])
            except (ValueError, IndexError):
                raise UnsupportedNetworkError(f"Invalid EVM network: {network}")

        chain_id = cls.CHAIN_IDS.get(network)
        if chain_id is None:
            raise UnsupportedNetworkError(f"Unsupported network: {network}")
        return chain_id

    @classmethod
    def network_for_chain_id(cls, chain_id: int) -> str:
        """Build the CAIP-2 identifier for an EVM chain ID"""
        return f"eip155:{chain_id}"


def resolve_provider_uri(network: str) -> str | None:
    """Resolve a network identifier to an RPC provider URI.

    Checks in order:
    1. If network is already an HTTP/WS URL, return as-is
    2. Look up in NetworkConfig (environment override, then RPC_URLS)
    3. Return None (no provider available)

    Args:
        network: Network identifier (e.g., "eip155:8453") or direct URL

    Returns:
        Provider URI string, or None if not resolvable
    """
    if network.startswith(("http://", "https://", "ws://", "wss://")):
        return network
    return NetworkConfig.get_rpc_url(network)
