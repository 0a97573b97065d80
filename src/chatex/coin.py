"""Coin identities used by the Chatex API."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Coin(str, Enum):
    """Coins known at the time of writing.

    The set of tradable coins is owned by the exchange and can grow, so any
    symbol not listed here is represented by ``UnknownCoin``.
    """

    BTC = "btc"
    LTC = "ltc"
    BCH = "bch"
    XRP = "xrp"
    BTG = "btg"
    ETH = "eth"
    TRX = "trx"
    DASH = "dash"
    USDT = "usdt"
    TON = "ton_crystal"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class UnknownCoin:
    """Coin symbol the client does not know about."""

    name: str

    def __str__(self) -> str:
        return self.name


CoinId = Union[Coin, UnknownCoin]

_KNOWN_COINS: dict[str, Coin] = {coin.value: coin for coin in Coin}


def coin_from_str(symbol: str) -> CoinId:
    """Map an exchange symbol to a coin identity. Never fails."""
    return _KNOWN_COINS.get(symbol, UnknownCoin(symbol))


def coin_to_str(coin: CoinId) -> str:
    """Wire form of a coin identity."""
    if isinstance(coin, Coin):
        return coin.value
    return coin.name


@dataclass(frozen=True, slots=True)
class CoinPair:
    """Ordered trading pair, e.g. ``btc/usdt``."""

    left: CoinId
    right: CoinId

    def __str__(self) -> str:
        return f"{coin_to_str(self.left)}/{coin_to_str(self.right)}"

    @classmethod
    def parse(cls, pair: str) -> "CoinPair":
        """Parse ``"left/right"``.

        Raises:
            ValueError: If the string has no ``/`` separator or an empty side
        """
        left, sep, right = pair.partition("/")
        if not sep or not left or not right:
            raise ValueError(f"Invalid coin pair: {pair!r}")
        return cls(coin_from_str(left), coin_from_str(right))
