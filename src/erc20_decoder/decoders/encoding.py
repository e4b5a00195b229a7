"""
Encode ERC20 transfer calldata.

The inverse of the transfer decoder, used to build calldata for tests,
fixtures and re-encoding of decoded transfers.

Usage:
    from erc20_decoder.decoders.encoding import encode_transfer

    calldata = encode_transfer("0x6748f50f686bfbca6fe8ad62b22228b87f31ff2b", 10**21)
"""

from eth_abi import encode
from hexbytes import HexBytes

from ..core.normalization import address_to_text, normalize_address
from ..transfer import DecodedTransfer, TransferMethod
from .selectors import TRANSFER_FROM_SELECTOR, TRANSFER_SELECTOR


def encode_transfer(recipient: str | HexBytes | bytes, amount: int) -> bytes:
    """Encode a ``transfer(address,uint256)`` call."""
    args = encode(
        ["address", "uint256"],
        [address_to_text(normalize_address(recipient)), amount],
    )
    return TRANSFER_SELECTOR + args


def encode_transfer_from(
    owner: str | HexBytes | bytes, recipient: str | HexBytes | bytes, amount: int
) -> bytes:
    """Encode a ``transferFrom(address,address,uint256)`` call."""
    args = encode(
        ["address", "address", "uint256"],
        [
            address_to_text(normalize_address(owner)),
            address_to_text(normalize_address(recipient)),
            amount,
        ],
    )
    return TRANSFER_FROM_SELECTOR + args


def encode_call(decoded: DecodedTransfer) -> bytes:
    """
    Re-encode the calldata of a decoded ERC20 transfer.

    Raises:
        ValueError: If the transfer is not an ERC20 contract call
    """
    if decoded.method is TransferMethod.ERC20_TRANSFER:
        return encode_transfer(decoded.recipient, decoded.amount)
    if decoded.method is TransferMethod.ERC20_TRANSFER_FROM:
        return encode_transfer_from(decoded.owner, decoded.recipient, decoded.amount)
    raise ValueError(f"Cannot encode calldata for {decoded.method.value}")
