"""
Registry of well-known ERC20 token contracts on Ethereum mainnet.

The registry is static: it is built once from ``KNOWN_TOKENS`` and cannot
be modified at runtime. Add a token by extending that table.

Usage:
    from erc20_decoder.decoders.registry import DEFAULT_REGISTRY

    token = DEFAULT_REGISTRY.resolve("0x0000000000085d4780B73119b644AE5ecd22b376")
    print(token.symbol)  # TUSD
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator

from hexbytes import HexBytes

from ..core.normalization import address_to_text, normalize_address

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KnownToken:
    """A recognized token contract."""

    symbol: str
    name: str
    address: bytes

    @property
    def address_text(self) -> str:
        return address_to_text(self.address)


def _token(symbol: str, name: str, address: str) -> KnownToken:
    return KnownToken(symbol=symbol, name=name, address=normalize_address(address))


KNOWN_TOKENS: tuple[KnownToken, ...] = (
    _token("TUSD", "TrueUSD", "0x0000000000085d4780B73119b644AE5ecd22b376"),
    _token("LINK", "ChainLink Token", "0x514910771af9ca656af840dff83e8264ecf986ca"),
    _token("BNB", "Binance Token", "0xB8c77482e45F1F44dE1745F52C74426C631bDD52"),
    _token("USDC", "USD Coin", "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"),
    _token("WBTC", "Wrapped BTC", "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599"),
    _token("cDAI", "Compound Dai", "0x5d3a536E4D6DbD6114cc1Ead35777bAB948E3643"),
    _token("OKB", "OKB", "0x75231f58b43240c9718dd58b4967c5114342a86c"),
    _token("CRO", "Crypto.com Coin", "0xa0b73e1ff0b80914ab6fe0444e65848c4c34450b"),
    _token("WFIL", "Wrapped Filecoin", "0x6e1A19F235bE7ED8E3369eF73b196C07257494DE"),
    _token("BAT", "Basic Attention Token", "0x0d8775f648430679a709e98d2b0cb6250d2887ef"),
    _token("BUSD", "Binance USD", "0x4fabb145d64652a948d72533023f6e7a623c7c53"),
    _token("USDT", "Tether USD", "0xdac17f958d2ee523a2206206994597c13d831ec7"),
    _token("LEO", "Bitfinex LEO Token", "0x2af5d2ad76741191d15dfe7bf6ac92d4bd912ca3"),
    _token("VEN", "VeChain", "0xd850942ef8811f2a866692a623011bde52a462c1"),
    _token("DAI", "Dai Stablecoin", "0x6b175474e89094c44da98b954eedeac495271d0f"),
    _token("UNI", "Uniswap", "0x1f9840a85d5af5bf1d1762f925bdaddc4201f984"),
)


class ContractRegistry:
    """
    Bidirectional, read-only mapping between contract addresses and tokens.

    Lookups always normalize the address to raw bytes first, so hex text in
    any letter case resolves to the same token.
    """

    def __init__(self, tokens: Iterable[KnownToken] = KNOWN_TOKENS):
        by_address: dict[bytes, KnownToken] = {}
        by_symbol: dict[str, KnownToken] = {}

        for token in tokens:
            if token.address in by_address:
                raise ValueError(
                    f"Duplicate registry address {token.address_text} "
                    f"({by_address[token.address].symbol}, {token.symbol})"
                )
            if token.symbol in by_symbol:
                raise ValueError(f"Duplicate registry symbol {token.symbol}")
            by_address[token.address] = token
            by_symbol[token.symbol] = token

        self._by_address = MappingProxyType(by_address)
        self._by_symbol = MappingProxyType(by_symbol)

    def resolve(self, address: str | HexBytes | bytes) -> KnownToken | None:
        """
        Find the token deployed at ``address``.

        Args:
            address: Contract address as hex text, HexBytes or raw bytes

        Returns:
            The matching KnownToken, or None if the address is unregistered

        Raises:
            ValueError: If ``address`` is not a well-formed 20-byte address
        """
        return self._by_address.get(normalize_address(address))

    def is_known(self, address: str | HexBytes | bytes) -> bool:
        return self.resolve(address) is not None

    def address_of(self, symbol: str) -> bytes:
        """
        Return the contract address registered for ``symbol``.

        Raises:
            KeyError: If no token with that symbol is registered
        """
        try:
            return self._by_symbol[symbol].address
        except KeyError:
            raise KeyError(f"Unknown token symbol: {symbol}") from None

    def tokens(self) -> Iterator[KnownToken]:
        return iter(self._by_address.values())

    def __len__(self) -> int:
        return len(self._by_address)

    def __contains__(self, address: object) -> bool:
        try:
            return self.is_known(address)  # type: ignore[arg-type]
        except ValueError:
            return False


DEFAULT_REGISTRY = ContractRegistry()
