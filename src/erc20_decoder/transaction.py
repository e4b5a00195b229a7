"""
Transaction records supplied to the decoder.

The decoder never fetches transactions itself. Callers hand over a
``RawTransaction``, usually built with ``RawTransaction.from_dict`` from a
Web3.py transaction or a JSON record written by a fetching script.

Usage:
    from erc20_decoder.transaction import RawTransaction, classify_transaction

    tx = RawTransaction.from_dict(w3.eth.get_transaction(tx_hash))
    kind = classify_transaction(tx)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from .core.normalization import (
    ADDRESS_SIZE,
    normalize_address,
    normalize_hex_field,
    normalize_optional_address,
    normalize_quantity,
)

logger = logging.getLogger(__name__)


class TransactionKind(Enum):
    """Coarse classification of a transaction by its ``to`` and ``input`` fields."""

    ETHEREUM_TRANSFER = "ethereumTransfer"
    CONTRACT_INVOCATION = "contractInvocation"
    CONTRACT_CREATION = "contractCreation"
    OTHER = "other"


def _first_present(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None


@dataclass(frozen=True)
class RawTransaction:
    """
    An already-populated Ethereum transaction.

    ``from_`` carries the sender (``from`` is a Python keyword). ``to`` is
    None for contract creation. ``value`` is in wei and ``input`` is the raw
    calldata. The remaining fields are optional chain metadata passed
    through to the decoded result.
    """

    from_: bytes
    to: bytes | None
    value: int = 0
    input: bytes = b""
    hash: bytes | None = None
    block_hash: bytes | None = None
    block_number: int | None = None
    transaction_index: int | None = None

    def __post_init__(self):
        """Validate field types so decoding only ever sees raw values."""
        if not isinstance(self.from_, bytes) or len(self.from_) != ADDRESS_SIZE:
            raise ValueError(
                f"from_ must be {ADDRESS_SIZE} raw bytes, got {self.from_!r}"
            )
        if self.to is not None and (
            not isinstance(self.to, bytes) or len(self.to) != ADDRESS_SIZE
        ):
            raise ValueError(
                f"to must be {ADDRESS_SIZE} raw bytes or None, got {self.to!r}"
            )
        if not isinstance(self.input, bytes):
            raise ValueError(
                f"input must be raw bytes, got {type(self.input).__name__}; "
                f"use RawTransaction.from_dict for hex records"
            )
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"value must be an int, got {self.value!r}")
        if self.value < 0:
            raise ValueError(f"value must be non-negative, got {self.value}")

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "RawTransaction":
        """
        Build a transaction from a Web3.py or JSON transaction record.

        Both Web3.py key names (``blockNumber``, ``transactionIndex``) and
        the snake_case names used in JSON dumps (``block_number``,
        ``tx_hash``) are accepted. Hex fields may be strings, HexBytes or
        bytes; Web3.py's ``data`` key is accepted as an alias of ``input``.

        Raises:
            ValueError: If a required field is missing or malformed
        """
        if not isinstance(record, Mapping):
            raise ValueError(
                f"Transaction record must be a mapping, got {type(record).__name__}"
            )

        for key in ("from", "value"):
            if record.get(key) is None:
                raise ValueError(f"Transaction record has no '{key}' field")

        tx_hash = _first_present(record, "hash", "tx_hash")
        block_hash = _first_present(record, "blockHash", "block_hash")
        block_number = _first_present(record, "blockNumber", "block_number")
        tx_index = _first_present(record, "transactionIndex", "transaction_index")

        return cls(
            from_=normalize_address(record["from"]),
            to=normalize_optional_address(record.get("to")),
            value=normalize_quantity(record["value"]),
            input=normalize_hex_field(_first_present(record, "input", "data")),
            hash=normalize_hex_field(tx_hash) if tx_hash is not None else None,
            block_hash=(
                normalize_hex_field(block_hash) if block_hash is not None else None
            ),
            block_number=(
                normalize_quantity(block_number) if block_number is not None else None
            ),
            transaction_index=(
                normalize_quantity(tx_index) if tx_index is not None else None
            ),
        )

    @property
    def is_contract_creation(self) -> bool:
        return self.to is None and len(self.input) > 0


def classify_transaction(tx: RawTransaction) -> TransactionKind:
    """
    Classify a transaction without decoding its calldata.

    Returns:
        ETHEREUM_TRANSFER when ``to`` is set and there is no input,
        CONTRACT_INVOCATION when ``to`` is set and there is input,
        CONTRACT_CREATION when ``to`` is missing and there is input,
        OTHER when both are missing.
    """
    if tx.to is None:
        if tx.input:
            return TransactionKind.CONTRACT_CREATION
        return TransactionKind.OTHER
    if tx.input:
        return TransactionKind.CONTRACT_INVOCATION
    return TransactionKind.ETHEREUM_TRANSFER
