"""Coin catalog operations."""

from __future__ import annotations

from .coin import CoinId
from .core import ClientCore
from .endpoints import CoinEndpoints
from .extractor import extract_coin, extract_coins
from .models import CoinInfo, Coins


class CoinClient:
    """Operations on ``/coins``."""

    def __init__(self, base: ClientCore, coin: CoinEndpoints):
        self.base = base
        self.coin = coin

    async def get_available_coins(self) -> Coins:
        return await self.base.call(self.coin.coins, extract_coins)

    async def get_coin(self, coin: CoinId | str) -> CoinInfo:
        """Fetch metadata of a single coin.

        Args:
            coin: Coin identity or raw exchange symbol
        """
        return await self.base.call(
            lambda access_token: self.coin.coin(coin, access_token),
            extract_coin,
        )
