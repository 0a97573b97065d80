"""Tests for coin identities."""

import pytest

from chatex.coin import Coin, CoinPair, UnknownCoin, coin_from_str, coin_to_str


class TestCoin:
    """Tests for symbol <-> coin mapping."""

    @pytest.mark.parametrize("coin", list(Coin))
    def test_known_symbols_round_trip(self, coin):
        assert coin_from_str(coin.value) is coin
        assert coin_to_str(coin_from_str(coin.value)) == coin.value

    def test_ton_uses_exchange_symbol(self):
        assert coin_from_str("ton_crystal") is Coin.TON
        assert str(Coin.TON) == "ton_crystal"

    @pytest.mark.parametrize("symbol", ["doge", "BTC", "", "usdt_trc20"])
    def test_unknown_symbols_are_preserved(self, symbol):
        coin = coin_from_str(symbol)
        assert coin == UnknownCoin(symbol)
        assert coin_to_str(coin) == symbol
        assert str(coin) == symbol

    def test_str_is_wire_form(self):
        assert str(Coin.ETH) == "eth"
        assert f"{Coin.BTC}" == "btc"


class TestCoinPair:
    """Tests for coin pairs."""

    def test_to_string(self):
        assert str(CoinPair(Coin.BTC, Coin.USDT)) == "btc/usdt"

    def test_to_string_with_unknown(self):
        assert str(CoinPair(UnknownCoin("doge"), Coin.TON)) == "doge/ton_crystal"

    def test_parse(self):
        pair = CoinPair.parse("eth/usdt")
        assert pair == CoinPair(Coin.ETH, Coin.USDT)
        assert str(pair) == "eth/usdt"

    @pytest.mark.parametrize("raw", ["btc", "/usdt", "btc/", ""])
    def test_parse_invalid(self, raw):
        with pytest.raises(ValueError):
            CoinPair.parse(raw)
