"""
Data normalization utilities for Ethereum transaction processing.

This module converts the field formats found in transaction records
(Web3.py ``HexBytes``, JSON hex strings, raw bytes, integers) into the raw
values the decoder works with.

The normalization layer ensures:
- Addresses are always compared as raw 20-byte values, never as text
- Hex payloads are parsed in one place with consistent error messages
- Decoders don't need to handle format variations

Usage:
    from erc20_decoder.core.normalization import (
        normalize_address,
        normalize_hex_field,
        address_to_text,
    )

    recipient = normalize_address("0x6748F50F686bfbcA6Fe8ad62b22228b87F31ff2b")
    print(address_to_text(recipient))  # 0x6748f50f686bfbca6fe8ad62b22228b87f31ff2b
"""

import logging
from typing import Any

from hexbytes import HexBytes
from web3 import Web3

logger = logging.getLogger(__name__)

ADDRESS_SIZE = 20


def normalize_hex_field(hex_string: str | HexBytes | bytes | None) -> bytes:
    """
    Normalize a hex field to bytes, handling various input formats.

    This function is the primary interface for decoders to parse hex data.
    It handles:
    - Strings with 0x prefix: "0x1234..."
    - Strings without 0x prefix: "1234..."
    - HexBytes objects (from Web3.py)
    - Raw bytes objects
    - Empty values: "0x", "", None

    Args:
        hex_string: Hex data in any supported format

    Returns:
        Raw bytes representation of the hex data

    Raises:
        ValueError: If the input cannot be parsed as hex data

    Examples:
        >>> normalize_hex_field("0x1234")
        b'\\x12\\x34'
        >>> normalize_hex_field("0X1234")
        b'\\x12\\x34'
        >>> normalize_hex_field(HexBytes("0x1234"))
        b'\\x12\\x34'
    """
    if hex_string is None or hex_string == "" or hex_string == "0x":
        return b""

    # HexBytes is a bytes subclass; return a plain copy
    if isinstance(hex_string, (bytes, bytearray, memoryview)):
        return bytes(hex_string)

    if isinstance(hex_string, str):
        hex_clean = hex_string.strip()
        if hex_clean[:2] in ("0x", "0X"):
            hex_clean = hex_clean[2:]

        if not hex_clean:
            return b""

        try:
            return bytes.fromhex(hex_clean)
        except ValueError as e:
            raise ValueError(f"Invalid hex string: {hex_string}") from e

    raise ValueError(f"Unsupported hex field type: {type(hex_string)}")


def normalize_address(address: str | HexBytes | bytes) -> bytes:
    """
    Normalize an address to its raw 20-byte value.

    Text input is accepted in any letter case (lowercase, uppercase or
    EIP-55 checksummed); the checksum itself is not enforced.

    Args:
        address: Address as hex text, HexBytes or raw bytes

    Returns:
        The 20 raw address bytes

    Raises:
        ValueError: If the input is not valid hex or not exactly 20 bytes
    """
    raw = normalize_hex_field(address)
    if len(raw) != ADDRESS_SIZE:
        raise ValueError(
            f"Invalid address length: expected {ADDRESS_SIZE} bytes, "
            f"got {len(raw)} ({address!r})"
        )
    return raw


def normalize_optional_address(address: Any) -> bytes | None:
    """Like ``normalize_address`` but maps None and empty values to None."""
    if address is None or address == "" or address == "0x" or address == b"":
        return None
    return normalize_address(address)


def normalize_quantity(value: Any) -> int:
    """
    Normalize a numeric field (value, block number, index) to an int.

    Accepts ints, hex strings ("0x3e8"), decimal strings ("1000") and raw
    big-endian bytes.

    Raises:
        ValueError: If the value cannot be interpreted as a non-negative integer
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"Unsupported quantity type: {type(value)}")

    if isinstance(value, int):
        result = value
    elif isinstance(value, (bytes, bytearray)):
        result = int.from_bytes(value, byteorder="big")
    elif isinstance(value, str):
        text = value.strip()
        try:
            if text[:2] in ("0x", "0X"):
                result = int(text, 16) if len(text) > 2 else 0
            else:
                result = int(text)
        except ValueError as e:
            raise ValueError(f"Invalid quantity: {value}") from e
    else:
        raise ValueError(f"Unsupported quantity type: {type(value)}")

    if result < 0:
        raise ValueError(f"Quantity must be non-negative, got {result}")
    return result


def address_to_text(address: bytes) -> str:
    """Return the canonical lowercase ``0x``-prefixed form of an address."""
    return "0x" + bytes(address).hex()


def address_to_checksum(address: bytes) -> str:
    """Return the EIP-55 checksummed form of an address."""
    return Web3.to_checksum_address(address_to_text(address))
