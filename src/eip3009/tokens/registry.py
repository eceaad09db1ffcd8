"""
Token registry - known EIP-3009 token deployments per network
"""

from dataclasses import dataclass

from eth_utils import to_checksum_address

from eip3009.config import NetworkConfig
from eip3009.exceptions import UnknownTokenError
from eip3009.types import Domain


@dataclass
class TokenInfo:
    """Token information"""

    address: str
    decimals: int
    name: str
    symbol: str
    version: str = "2"


def _usdc(address: str, name: str = "USD Coin") -> TokenInfo:
    # FiatToken v2 EIP-712 domain: the token name and version "2"
    return TokenInfo(address=address, decimals=6, name=name, symbol="USDC", version="2")


_DEFAULT_TOKENS: dict[str, dict[str, TokenInfo]] = {
    NetworkConfig.EVM_MAINNET: {"USDC": _usdc("0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48")},
    NetworkConfig.EVM_SEPOLIA: {"USDC": _usdc("0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238", "USDC")},
    NetworkConfig.BASE_MAINNET: {"USDC": _usdc("0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913")},
    NetworkConfig.BASE_SEPOLIA: {"USDC": _usdc("0x036CbD53842c5426634e7929541eC2318f3dCF7e", "USDC")},
    NetworkConfig.POLYGON_MAINNET: {"USDC": _usdc("0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359")},
    NetworkConfig.ARBITRUM_MAINNET: {"USDC": _usdc("0xaf88d065e77c8cC2239327C5EDb3A432268e5831")},
}


class TokenRegistry:
    """Token registry

    Each instance starts from the built-in deployments and can be extended
    with register_token() without affecting other instances.
    """

    def __init__(self, include_defaults: bool = True) -> None:
        self._tokens: dict[str, dict[str, TokenInfo]] = {}
        if include_defaults:
            for network, tokens in _DEFAULT_TOKENS.items():
                for token in tokens.values():
                    self.register_token(network, TokenInfo(**vars(token)))

    def register_token(self, network: str, token: TokenInfo) -> None:
        """Register a custom token for specified network

        Args:
            network: Network identifier (e.g. "eip155:8453")
            token: TokenInfo to register
        """
        token.address = to_checksum_address(token.address)
        self._tokens.setdefault(network, {})[token.symbol.upper()] = token

    def get_token(self, network: str, symbol: str) -> TokenInfo:
        """Get token information for specified network and symbol

        Raises:
            UnknownTokenError: If token does not exist
        """
        token = self._tokens.get(network, {}).get(symbol.upper())
        if token is None:
            raise UnknownTokenError(f"Unknown token {symbol} on network {network}")
        return token

    def find_by_address(self, network: str, address: str) -> TokenInfo | None:
        """Find token information by address"""
        normalized = to_checksum_address(address)
        for info in self._tokens.get(network, {}).values():
            if info.address == normalized:
                return info
        return None

    def all_symbols(self) -> set[str]:
        """Return all known token symbols across all networks."""
        symbols: set[str] = set()
        for tokens in self._tokens.values():
            symbols.update(tokens.keys())
        return symbols

    def domain_for(self, network: str, symbol: str) -> Domain:
        """Build the EIP-712 domain of a registered token.

        Raises:
            UnknownTokenError: If token does not exist
            UnsupportedNetworkError: If the network id is not an EVM chain
        """
        token = self.get_token(network, symbol)
        return Domain(
            name=token.name,
            version=token.version,
            chain_id=NetworkConfig.get_chain_id(network),
            verifying_contract=token.address,
        )
