"""chatex: typed async client for the Chatex exchange API."""

from .client import ChatexClient
from .coin import Coin, CoinId, CoinPair, UnknownCoin, coin_from_str, coin_to_str
from .errors import (
    AuthUnavailable,
    ChatexError,
    DecodeError,
    DecodeStage,
    HttpError,
    RequestBuildError,
    TransportError,
)
from .settings import Settings
from .transport import AiohttpTransport, HttpResponse, ProxyConfig, Transport

__all__ = [
    "ChatexClient",
    "Coin",
    "CoinId",
    "CoinPair",
    "UnknownCoin",
    "coin_from_str",
    "coin_to_str",
    "AuthUnavailable",
    "ChatexError",
    "DecodeError",
    "DecodeStage",
    "HttpError",
    "RequestBuildError",
    "TransportError",
    "Settings",
    "AiohttpTransport",
    "HttpResponse",
    "ProxyConfig",
    "Transport",
]
