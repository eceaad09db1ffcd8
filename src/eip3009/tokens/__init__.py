"""
Token metadata: registry of known deployments and lazy on-chain reads
"""

from eip3009.tokens.lazy_token import LazyToken
from eip3009.tokens.registry import TokenInfo, TokenRegistry

__all__ = ["TokenInfo", "TokenRegistry", "LazyToken"]
