"""
ERC20 function selectors.

A selector is the first 4 bytes of keccak256 of a function's canonical
signature. The values below are constants; nothing is hashed at runtime.

Usage:
    from erc20_decoder.decoders.selectors import lookup

    lookup(bytes.fromhex("a9059cbb"))  # TransferMethod.ERC20_TRANSFER
"""

from enum import Enum
from types import MappingProxyType

from ..transfer import TransferMethod


class ERC20Method(Enum):
    """ERC20 functions recognized by selector, valued by canonical signature."""

    ALLOWANCE = "allowance(address,address)"
    APPROVE = "approve(address,uint256)"
    BALANCE_OF = "balanceOf(address)"
    TOTAL_SUPPLY = "totalSupply()"
    TRANSFER = "transfer(address,uint256)"
    TRANSFER_FROM = "transferFrom(address,address,uint256)"

    @property
    def function_name(self) -> str:
        return self.value.split("(", 1)[0]

    @property
    def selector(self) -> bytes:
        return METHOD_SELECTORS[self]


METHOD_SELECTORS = MappingProxyType(
    {
        ERC20Method.ALLOWANCE: bytes.fromhex("dd62ed3e"),
        ERC20Method.APPROVE: bytes.fromhex("095ea7b3"),
        ERC20Method.BALANCE_OF: bytes.fromhex("70a08231"),
        ERC20Method.TOTAL_SUPPLY: bytes.fromhex("18160ddd"),
        ERC20Method.TRANSFER: bytes.fromhex("a9059cbb"),
        ERC20Method.TRANSFER_FROM: bytes.fromhex("23b872dd"),
    }
)

SELECTOR_METHODS = MappingProxyType(
    {selector: method for method, selector in METHOD_SELECTORS.items()}
)

TRANSFER_SELECTOR = METHOD_SELECTORS[ERC20Method.TRANSFER]
TRANSFER_FROM_SELECTOR = METHOD_SELECTORS[ERC20Method.TRANSFER_FROM]

# Methods whose arguments are decoded, and the transfer kind they produce
TRANSFER_METHODS = MappingProxyType(
    {
        ERC20Method.TRANSFER: TransferMethod.ERC20_TRANSFER,
        ERC20Method.TRANSFER_FROM: TransferMethod.ERC20_TRANSFER_FROM,
    }
)

# Number of 32-byte argument words following the selector
ARGUMENT_WORDS = MappingProxyType(
    {
        TransferMethod.ERC20_TRANSFER: 2,
        TransferMethod.ERC20_TRANSFER_FROM: 3,
    }
)


def lookup_method(selector: bytes) -> ERC20Method | None:
    """Return the ERC20 method for a selector, or None if it is not one."""
    return SELECTOR_METHODS.get(bytes(selector))


def lookup(selector: bytes) -> TransferMethod:
    """
    Map a selector to the transfer kind it encodes.

    Total function: anything other than the ``transfer`` and
    ``transferFrom`` selectors maps to ``TransferMethod.UNKNOWN_CALL``.
    """
    method = lookup_method(selector)
    if method is None:
        return TransferMethod.UNKNOWN_CALL
    return TRANSFER_METHODS.get(method, TransferMethod.UNKNOWN_CALL)
