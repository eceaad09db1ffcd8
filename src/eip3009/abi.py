"""
ABI definitions for ERC-20 / EIP-3009 token contracts
"""

from typing import Any, List, Sequence

from eth_abi import decode, encode
from eth_utils import keccak

# ERC20 Token ABI
ERC20_ABI: List[dict[str, Any]] = [
    {
        "name": "name",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "string"}],
    },
    {
        "name": "symbol",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "string"}],
    },
    {
        "name": "decimals",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint8"}],
    },
    {
        "name": "totalSupply",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "name": "balanceOf",
        "type": "function",
        "stateMutability": "view",
        "inputs": [{"name": "account", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "name": "allowance",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "owner", "type": "address"},
            {"name": "spender", "type": "address"},
        ],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    {
        "name": "approve",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "spender", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {
        "name": "transfer",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "to", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {
        "name": "transferFrom",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "from", "type": "address"},
            {"name": "to", "type": "address"},
            {"name": "amount", "type": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    },
]

_AUTHORIZATION_INPUTS = [
    {"name": "from", "type": "address"},
    {"name": "to", "type": "address"},
    {"name": "value", "type": "uint256"},
    {"name": "validAfter", "type": "uint256"},
    {"name": "validBefore", "type": "uint256"},
    {"name": "nonce", "type": "bytes32"},
    {"name": "v", "type": "uint8"},
    {"name": "r", "type": "bytes32"},
    {"name": "s", "type": "bytes32"},
]


def _constant_getter(name: str) -> dict[str, Any]:
    return {
        "name": name,
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "bytes32"}],
    }


# EIP-3009 ABI (FiatToken v2 / reference implementation)
EIP3009_ABI: List[dict[str, Any]] = [
    {
        "name": "transferWithAuthorization",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": list(_AUTHORIZATION_INPUTS),
        "outputs": [],
    },
    {
        "name": "receiveWithAuthorization",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": list(_AUTHORIZATION_INPUTS),
        "outputs": [],
    },
    {
        "name": "cancelAuthorization",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "authorizer", "type": "address"},
            {"name": "nonce", "type": "bytes32"},
            {"name": "v", "type": "uint8"},
            {"name": "r", "type": "bytes32"},
            {"name": "s", "type": "bytes32"},
        ],
        "outputs": [],
    },
    {
        "name": "authorizationState",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "authorizer", "type": "address"},
            {"name": "nonce", "type": "bytes32"},
        ],
        "outputs": [{"name": "", "type": "bool"}],
    },
    {
        "name": "nonces",
        "type": "function",
        "stateMutability": "view",
        "inputs": [{"name": "owner", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
    },
    _constant_getter("DOMAIN_SEPARATOR"),
    _constant_getter("TRANSFER_WITH_AUTHORIZATION_TYPEHASH"),
    _constant_getter("RECEIVE_WITH_AUTHORIZATION_TYPEHASH"),
    _constant_getter("CANCEL_AUTHORIZATION_TYPEHASH"),
]


def _find_function(abi: List[dict[str, Any]], method_name: str) -> dict[str, Any]:
    for item in abi:
        if item.get("type") == "function" and item.get("name") == method_name:
            return item
    raise ValueError(f"Function '{method_name}' not found in ABI")


def _type_string(param: dict[str, Any]) -> str:
    """Recursively build parameter type string"""
    param_type = param["type"]
    if param_type == "tuple":
        components = param.get("components", [])
        if not components:
            return "tuple"
        return f"({','.join(_type_string(c) for c in components)})"
    return param_type


def get_input_types(abi: List[dict[str, Any]], method_name: str) -> List[str]:
    return [_type_string(p) for p in _find_function(abi, method_name).get("inputs", [])]


def get_output_types(abi: List[dict[str, Any]], method_name: str) -> List[str]:
    return [_type_string(p) for p in _find_function(abi, method_name).get("outputs", [])]


def get_function_signature(abi: List[dict[str, Any]], method_name: str) -> str:
    """Get complete function signature string.

    Example:
        >>> get_function_signature(EIP3009_ABI, "cancelAuthorization")
        'cancelAuthorization(address,bytes32,uint8,bytes32,bytes32)'
    """
    return f"{method_name}({','.join(get_input_types(abi, method_name))})"


def calculate_method_id(abi: List[dict[str, Any]], method_name: str) -> str:
    """Calculate Method ID from ABI dynamically.

    Args:
        abi: Contract ABI definition list
        method_name: Function name

    Returns:
        Method ID (8 hex characters)

    Raises:
        ValueError: If function not found in ABI

    Example:
        >>> calculate_method_id(ERC20_ABI, "transfer")
        'a9059cbb'
    """
    signature = get_function_signature(abi, method_name)
    return keccak(text=signature)[:4].hex()


def get_all_method_ids(abi: List[dict[str, Any]]) -> dict[str, str]:
    """Get Method IDs for all functions in ABI."""
    return {
        item["name"]: calculate_method_id(abi, item["name"])
        for item in abi
        if item.get("type") == "function"
    }


def encode_call(abi: List[dict[str, Any]], method_name: str, args: Sequence[Any]) -> bytes:
    """Build calldata: 4-byte selector followed by the ABI-encoded arguments."""
    selector = bytes.fromhex(calculate_method_id(abi, method_name))
    return selector + encode(get_input_types(abi, method_name), list(args))


def decode_output(abi: List[dict[str, Any]], method_name: str, data: bytes) -> tuple[Any, ...]:
    """Decode the return data of *method_name*."""
    return decode(get_output_types(abi, method_name), data)
