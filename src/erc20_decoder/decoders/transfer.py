"""
Decode Ether and ERC20 transfers from raw transactions.

The decoder classifies a transaction from its ``to`` and ``input`` fields,
decodes the arguments of ERC20 ``transfer`` and ``transferFrom`` calls,
and annotates the result with the token identity when the contract is in
the registry.

Usage:
    from erc20_decoder.decoders.transfer import TransferDecoder

    decoder = TransferDecoder()
    result = decoder.decode(transaction)
    print(result.method, result.recipient.hex(), result.value)
"""

import logging
from typing import Any, Iterable, Mapping

from ..core.cursor import WORD_SIZE, ByteCursor
from ..errors import ERC20Error, InvalidLength, NoTransferTransaction, UnsupportedMethod
from ..transaction import RawTransaction
from ..transfer import DecodedTransfer, TransactionAndTransferType, TransferMethod
from .registry import DEFAULT_REGISTRY, ContractRegistry
from .selectors import ARGUMENT_WORDS, lookup, lookup_method

logger = logging.getLogger(__name__)

SELECTOR_SIZE = 4


def _as_transaction(tx: RawTransaction | Mapping[str, Any]) -> RawTransaction:
    if isinstance(tx, RawTransaction):
        return tx
    return RawTransaction.from_dict(tx)


def _label(tx: RawTransaction) -> str:
    return "0x" + tx.hash.hex() if tx.hash else "unknown"


class TransferDecoder:
    """
    Decoder for native and ERC20 transfers.

    Instances hold no per-call state and can be shared between threads.

    Args:
        registry: Contract registry used to annotate token identities
        annotate_tokens: If False, results never carry a token identity
    """

    def __init__(
        self,
        registry: ContractRegistry = DEFAULT_REGISTRY,
        annotate_tokens: bool = True,
    ):
        self.registry = registry
        self.annotate_tokens = annotate_tokens

    def decode(
        self, tx: RawTransaction | Mapping[str, Any]
    ) -> TransactionAndTransferType:
        """
        Decode a transaction into a classified transfer.

        Args:
            tx: A RawTransaction or a Web3.py / JSON transaction record

        Returns:
            TransactionAndTransferType. Contract creation and calls with an
            unknown selector decode as ``TransferMethod.UNKNOWN_CALL``, as do
            calls to ERC20 methods that move no tokens; those carry the
            method name in ``transfer.erc20_method``.

        Raises:
            OutOfBounds: If the calldata is shorter than its method requires
            InvalidLength: If the calldata is longer than its method's layout
            MalformedArgument: If an address word has non-zero padding
            ValueError: If a transaction record cannot be normalized
        """
        tx = _as_transaction(tx)

        if tx.to is None:
            logger.debug(f"Transaction {_label(tx)} creates a contract")
            return TransactionAndTransferType(
                transaction=tx,
                transfer=DecodedTransfer(method=TransferMethod.UNKNOWN_CALL),
            )

        if not tx.input:
            transfer = DecodedTransfer(
                method=TransferMethod.NATIVE_TRANSFER,
                recipient=tx.to,
                amount=tx.value,
            )
        else:
            transfer = self._decode_call(tx)

        token = self.registry.resolve(tx.to) if self.annotate_tokens else None

        logger.debug(
            f"Decoded transaction {_label(tx)} as {transfer.method.value}"
            + (f" ({token.symbol})" if token else "")
        )

        return TransactionAndTransferType(transaction=tx, transfer=transfer, token=token)

    def _decode_call(self, tx: RawTransaction) -> DecodedTransfer:
        cursor = ByteCursor(tx.input)
        selector = cursor.read_bytes(SELECTOR_SIZE)
        method = lookup(selector)

        if method is TransferMethod.UNKNOWN_CALL:
            erc20_method = lookup_method(selector)
            return DecodedTransfer(
                method=method,
                selector=selector,
                erc20_method=erc20_method.function_name if erc20_method else None,
            )

        expected = SELECTOR_SIZE + ARGUMENT_WORDS[method] * WORD_SIZE
        # Short payloads fail on the read below with OutOfBounds
        if len(tx.input) > expected:
            raise InvalidLength(method.value, expected, len(tx.input))

        if method is TransferMethod.ERC20_TRANSFER:
            return DecodedTransfer(
                method=method,
                recipient=cursor.read_address(),
                amount=cursor.read_u256(),
                selector=selector,
            )

        owner = cursor.read_address()
        recipient = cursor.read_address()
        amount = cursor.read_u256()
        return DecodedTransfer(
            method=method,
            recipient=recipient,
            amount=amount,
            spender=tx.from_,
            owner=owner,
            selector=selector,
        )

    def decode_transfer(
        self, tx: RawTransaction | Mapping[str, Any]
    ) -> TransactionAndTransferType:
        """
        Decode a transaction that is expected to be a transfer.

        Raises:
            UnsupportedMethod: If the call targets an ERC20 method other than
                transfer or transferFrom
            NoTransferTransaction: If the transaction is a contract creation
                or a call to an unrecognized method
            ERC20Error: Any failure raised by ``decode``
        """
        result = self.decode(tx)
        if result.transfer.erc20_method is not None:
            raise UnsupportedMethod(result.transfer.erc20_method)
        if not result.is_transfer:
            raise NoTransferTransaction(
                f"Transaction {_label(result.transaction)} is neither an Ether "
                f"nor an ERC20 transfer"
            )
        return result

    def decode_batch(
        self,
        transactions: Iterable[RawTransaction | Mapping[str, Any]],
        skip_errors: bool = True,
    ) -> list[TransactionAndTransferType]:
        """
        Decode multiple transactions.

        Args:
            transactions: RawTransactions or transaction records
            skip_errors: If True, log and skip transactions that fail to
                decode; otherwise re-raise the first failure

        Returns:
            Decoded results in input order, without the skipped transactions
        """
        results = []
        failed_count = 0

        for index, tx in enumerate(transactions):
            try:
                results.append(self.decode(tx))
            except (ERC20Error, ValueError) as e:
                if not skip_errors:
                    raise
                failed_count += 1
                logger.warning(f"Failed to decode transaction #{index}: {e}")

        logger.info(
            f"Decoded {len(results)} transactions ({failed_count} failed)"
        )
        return results


_default_decoder = TransferDecoder()


def decode_transaction(
    tx: RawTransaction | Mapping[str, Any]
) -> TransactionAndTransferType:
    """Decode a transaction with the default registry."""
    return _default_decoder.decode(tx)


def decode_transactions_batch(
    transactions: Iterable[RawTransaction | Mapping[str, Any]],
    skip_errors: bool = True,
) -> list[TransactionAndTransferType]:
    """Decode multiple transactions with the default registry."""
    return _default_decoder.decode_batch(transactions, skip_errors=skip_errors)
