"""
Decode failures raised by the transfer decoder.

All errors derive from ``ERC20Error`` so callers can catch a single type and
decide whether to skip, log, or abort on a bad transaction. Decoding is a
pure function of its input, so none of these are worth retrying.
"""


class ERC20Error(Exception):
    """Base class for transaction decoding failures."""


class OutOfBounds(ERC20Error):
    """The payload ended before the expected number of bytes could be read."""

    def __init__(self, requested: int, remaining: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"Attempted to read {requested} bytes but only {remaining} remain"
        )


class InvalidLength(ERC20Error):
    """The payload length does not match the layout of the called method."""

    def __init__(self, method: str, expected: int, actual: int):
        self.method = method
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid calldata length for {method}: "
            f"expected {expected} bytes, got {actual}"
        )


class MalformedArgument(ERC20Error):
    """An argument word is not a valid encoding of its declared type."""


class NoTransferTransaction(ERC20Error):
    """The transaction is neither an Ether transfer nor an ERC20 transfer."""


class UnsupportedMethod(NoTransferTransaction):
    """
    A transfer was required but the selector names another ERC20 method.

    Only raised by strict decoding; ``decode`` reports these calls as
    ``UNKNOWN_CALL`` annotated with the method name.
    """

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"ERC20 method '{method}' is not a transfer")
