"""
Sequential reader for ABI-encoded calldata.

ABI arguments are laid out as 32-byte big-endian words. ``ByteCursor``
reads them back with bounds checking.

Usage:
    from erc20_decoder.core.cursor import ByteCursor

    cursor = ByteCursor(calldata)
    selector = cursor.read_bytes(4)
    recipient = cursor.read_address()
    amount = cursor.read_u256()
"""

from ..errors import MalformedArgument, OutOfBounds

WORD_SIZE = 32
ADDRESS_SIZE = 20
ADDRESS_PADDING = WORD_SIZE - ADDRESS_SIZE


class ByteCursor:
    """
    Read-only cursor over a fixed byte buffer.

    The buffer is wrapped in a ``memoryview`` so reads slice the caller's
    data without copying it up front. A failed read leaves the position
    unchanged.
    """

    def __init__(self, data: bytes):
        self._view = memoryview(data)
        self._position = 0

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._position

    def remaining(self) -> int:
        """Number of bytes not yet read."""
        return len(self._view) - self._position

    def _advance(self, size: int) -> memoryview:
        if size < 0:
            raise ValueError(f"Read size must be non-negative, got {size}")
        if size > self.remaining():
            raise OutOfBounds(size, self.remaining())
        chunk = self._view[self._position : self._position + size]
        self._position += size
        return chunk

    def read_bytes(self, size: int) -> bytes:
        """
        Return the next ``size`` bytes and advance past them.

        Raises:
            OutOfBounds: If fewer than ``size`` bytes remain
        """
        return self._advance(size).tobytes()

    def skip(self, size: int) -> None:
        """Advance ``size`` bytes without returning them."""
        self._advance(size)

    def read_u256(self) -> int:
        """Read a 32-byte word as a big-endian unsigned integer."""
        return int.from_bytes(self._advance(WORD_SIZE), byteorder="big")

    def read_address(self) -> bytes:
        """
        Read a 32-byte word holding a right-aligned 20-byte address.

        Raises:
            OutOfBounds: If fewer than 32 bytes remain
            MalformedArgument: If any of the 12 padding bytes is non-zero
        """
        word = self._advance(WORD_SIZE)
        if any(word[:ADDRESS_PADDING]):
            raise MalformedArgument(
                f"Address word at offset {self._position - WORD_SIZE} has "
                f"non-zero padding: 0x{word.hex()}"
            )
        return word[ADDRESS_PADDING:].tobytes()
