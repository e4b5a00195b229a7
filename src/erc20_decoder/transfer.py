"""
Typed results of transfer decoding.

``TransactionAndTransferType`` pairs the original transaction with its
decoded transfer and exposes a single view (sender, recipient, value,
contract) whether the asset moved is Ether or an ERC20 token.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .core.normalization import address_to_text
from .decoders.registry import KnownToken
from .errors import NoTransferTransaction
from .transaction import RawTransaction

logger = logging.getLogger(__name__)


class TransferMethod(Enum):
    """How a transaction moves value. Exactly one applies per transaction."""

    NATIVE_TRANSFER = "nativeTransfer"
    ERC20_TRANSFER = "erc20Transfer"
    ERC20_TRANSFER_FROM = "erc20TransferFrom"
    UNKNOWN_CALL = "unknownCall"


class TransferType(Enum):
    """Asset kind of a transfer."""

    ETHEREUM = "ethereum"
    ERC20 = "erc20"


ERC20_METHODS = frozenset(
    {TransferMethod.ERC20_TRANSFER, TransferMethod.ERC20_TRANSFER_FROM}
)


@dataclass(frozen=True)
class DecodedTransfer:
    """
    Arguments recovered from a transaction.

    ``recipient`` and ``amount`` are None only for ``UNKNOWN_CALL``.
    ``owner`` and ``spender`` are set only for ``ERC20_TRANSFER_FROM``:
    the owner is the account debited and the spender is the transaction
    sender spending its allowance. ``selector`` holds the raw 4-byte
    selector for contract calls. ``erc20_method`` names the ERC20 function
    when an ``UNKNOWN_CALL`` targets one that does not move tokens
    (approve, allowance, balanceOf, totalSupply).
    """

    method: TransferMethod
    recipient: bytes | None = None
    amount: int | None = None
    spender: bytes | None = None
    owner: bytes | None = None
    selector: bytes | None = None
    erc20_method: str | None = None

    @property
    def is_transfer(self) -> bool:
        return self.method is not TransferMethod.UNKNOWN_CALL


def _hex_or_none(value: bytes | None) -> str | None:
    return "0x" + value.hex() if value is not None else None


@dataclass(frozen=True)
class TransactionAndTransferType:
    """A transaction together with its decoded transfer."""

    transaction: RawTransaction
    transfer: DecodedTransfer
    token: KnownToken | None = None

    @property
    def method(self) -> TransferMethod:
        return self.transfer.method

    @property
    def is_transfer(self) -> bool:
        return self.transfer.is_transfer

    @property
    def transfer_type(self) -> TransferType | None:
        """ETHEREUM or ERC20 for transfers, None for anything else."""
        if self.transfer.method is TransferMethod.NATIVE_TRANSFER:
            return TransferType.ETHEREUM
        if self.transfer.method in ERC20_METHODS:
            return TransferType.ERC20
        return None

    @property
    def is_ethereum(self) -> bool:
        return self.transfer_type is TransferType.ETHEREUM

    @property
    def is_erc20(self) -> bool:
        return self.transfer_type is TransferType.ERC20

    def _require_transfer(self) -> None:
        if not self.is_transfer:
            raise NoTransferTransaction(
                f"Transaction {_hex_or_none(self.transaction.hash)} is not a transfer"
            )

    @property
    def sender(self) -> bytes:
        """
        Account the asset leaves.

        For ``transferFrom`` this is the owner argument, not the
        transaction sender.

        Raises:
            NoTransferTransaction: If the transaction is not a transfer
        """
        self._require_transfer()
        if self.transfer.method is TransferMethod.ERC20_TRANSFER_FROM:
            return self.transfer.owner
        return self.transaction.from_

    @property
    def recipient(self) -> bytes:
        """Account the asset arrives at."""
        self._require_transfer()
        return self.transfer.recipient

    @property
    def value(self) -> int:
        """Amount moved, in wei or in the token's smallest unit."""
        self._require_transfer()
        return self.transfer.amount

    @property
    def contract(self) -> bytes | None:
        """Token contract for ERC20 transfers, None for Ether transfers."""
        self._require_transfer()
        if self.is_erc20:
            return self.transaction.to
        return None

    @property
    def tx_hash(self) -> bytes | None:
        return self.transaction.hash

    @property
    def block_hash(self) -> bytes | None:
        return self.transaction.block_hash

    @property
    def block_number(self) -> int | None:
        return self.transaction.block_number

    @property
    def transaction_index(self) -> int | None:
        return self.transaction.transaction_index

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to a JSON-safe dictionary with camelCase keys.

        Addresses and hashes are lowercase 0x-prefixed hex and amounts are
        ints. Fields that do not apply are None.
        """
        tx = self.transaction
        transfer = self.transfer
        transfer_type = self.transfer_type
        is_transfer = transfer.is_transfer

        return {
            "txHash": _hex_or_none(tx.hash),
            "blockHash": _hex_or_none(tx.block_hash),
            "blockNumber": tx.block_number,
            "transactionIndex": tx.transaction_index,
            "method": transfer.method.value,
            "transferType": transfer_type.value if transfer_type else None,
            "from": address_to_text(self.sender) if is_transfer else None,
            "to": address_to_text(self.recipient) if is_transfer else None,
            "value": transfer.amount,
            "contract": (
                address_to_text(tx.to) if transfer_type is TransferType.ERC20 else None
            ),
            "spender": _hex_or_none(transfer.spender),
            "selector": _hex_or_none(transfer.selector),
            "erc20Method": transfer.erc20_method,
            "tokenSymbol": self.token.symbol if self.token else None,
            "tokenName": self.token.name if self.token else None,
        }
