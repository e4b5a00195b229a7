"""
Export decoded transfers to CSV format.

Usage:
    from erc20_decoder.export import export_to_csv

    export_to_csv(results, "data/processed/transfers.csv")
"""

import logging
from pathlib import Path
from typing import Any

import pandas as pd

from .core.normalization import address_to_checksum
from .transfer import TransactionAndTransferType

logger = logging.getLogger(__name__)

CSV_COLUMNS = [
    "tx_hash",
    "block",
    "from",
    "to",
    "value",
    "method",
    "transfer_type",
    "contract",
    "token_symbol",
    "spender",
    "selector",
    "erc20_method",
]


def _checksum_or_empty(address: bytes | None) -> str:
    return address_to_checksum(address) if address is not None else ""


def result_to_row(result: TransactionAndTransferType) -> dict[str, Any]:
    """
    Convert a decoded result to a CSV row dictionary.

    Addresses are EIP-55 checksummed. Amounts are written as decimal
    strings because uint256 values overflow pandas' integer columns.
    """
    tx = result.transaction
    transfer = result.transfer
    transfer_type = result.transfer_type

    if result.is_transfer:
        from_address = _checksum_or_empty(result.sender)
        to_address = _checksum_or_empty(result.recipient)
        value = str(result.value)
        contract = _checksum_or_empty(result.contract)
    else:
        from_address = _checksum_or_empty(tx.from_)
        to_address = _checksum_or_empty(tx.to)
        value = str(tx.value)
        contract = ""

    return {
        "tx_hash": "0x" + tx.hash.hex() if tx.hash else "",
        "block": tx.block_number if tx.block_number is not None else "",
        "from": from_address,
        "to": to_address,
        "value": value,
        "method": transfer.method.value,
        "transfer_type": transfer_type.value if transfer_type else "",
        "contract": contract,
        "token_symbol": result.token.symbol if result.token else "",
        "spender": _checksum_or_empty(transfer.spender),
        "selector": "0x" + transfer.selector.hex() if transfer.selector else "",
        "erc20_method": transfer.erc20_method or "",
    }


def export_to_csv(
    results: list[TransactionAndTransferType], output_path: str | Path
) -> None:
    """
    Export decoded transfers to a CSV file.

    Args:
        results: Decoded results, Ether and ERC20 transfers may be mixed
        output_path: Path to output CSV file (will create parent directories)

    Raises:
        ValueError: If results is empty
        IOError: If file cannot be written

    Notes:
        - Overwrites existing file at output_path
        - Non-transfer results are written with the raw transaction fields
    """
    if not results:
        raise ValueError("Cannot export empty result list")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    rows = [result_to_row(result) for result in results]

    df = pd.DataFrame(rows, columns=CSV_COLUMNS)
    df.to_csv(output_path, index=False)

    logger.info(f"Exported {len(rows)} transactions to {output_path}")
