"""
Contract-facing clients
"""

from eip3009.client.authorization_client import AuthorizationClient, map_revert
from eip3009.client.base import ContractSubmitter, PendingTransaction
from eip3009.client.web3_submitter import Web3ContractSubmitter

__all__ = [
    "AuthorizationClient",
    "ContractSubmitter",
    "PendingTransaction",
    "Web3ContractSubmitter",
    "map_revert",
]
