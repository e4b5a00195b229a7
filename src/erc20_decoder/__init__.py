"""
ERC20 Transfer Decoder

Decodes raw Ethereum transactions into a generic representation of asset
transfers. Native Ether transfers and ERC20 ``transfer``/``transferFrom``
contract calls are exposed through the same typed interface.
"""

from .decoders.registry import DEFAULT_REGISTRY, ContractRegistry, KnownToken
from .decoders.transfer import (
    TransferDecoder,
    decode_transaction,
    decode_transactions_batch,
)
from .errors import (
    ERC20Error,
    InvalidLength,
    MalformedArgument,
    NoTransferTransaction,
    OutOfBounds,
    UnsupportedMethod,
)
from .transaction import RawTransaction, TransactionKind, classify_transaction
from .transfer import (
    DecodedTransfer,
    TransactionAndTransferType,
    TransferMethod,
    TransferType,
)

__version__ = "0.1.0"

__all__ = [
    "ContractRegistry",
    "DEFAULT_REGISTRY",
    "DecodedTransfer",
    "ERC20Error",
    "InvalidLength",
    "KnownToken",
    "MalformedArgument",
    "NoTransferTransaction",
    "OutOfBounds",
    "RawTransaction",
    "TransactionAndTransferType",
    "TransactionKind",
    "TransferDecoder",
    "TransferMethod",
    "TransferType",
    "UnsupportedMethod",
    "classify_transaction",
    "decode_transaction",
    "decode_transactions_batch",
]
