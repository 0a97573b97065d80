"""Request builders for each API operation.

Builders are pure: they only combine the base URL, the operation path and the
credentials into an ``HttpRequest``. Nothing here touches the network.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from yarl import URL

from .coin import Coin, CoinId, UnknownCoin, coin_from_str, coin_to_str
from .context import ApiContext, BaseContext
from .errors import RequestBuildError


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """Transport-level request description."""

    method: str
    url: URL
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


def _bearer(token: str) -> str:
    if not token:
        raise RequestBuildError("Bearer token must not be empty")
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in token):
        raise RequestBuildError("Bearer token contains control characters")
    return f"Bearer {token}"


def _join(base: BaseContext, *segments: str) -> URL:
    url = base.base_url
    for segment in segments:
        if not segment or segment in {".", ".."} or "/" in segment:
            raise RequestBuildError(f"Invalid path segment: {segment!r}")
        url = url / segment
    return url


def _request(method: str, url: URL, token: str) -> HttpRequest:
    return HttpRequest(
        method=method,
        url=url,
        headers={
            "Authorization": _bearer(token),
            "Accept": "application/json",
        },
    )


class ProfileEndpoints:
    """Endpoints of the profile group: ``/access_token``, ``/me``, ``/balance``."""

    def __init__(self, base: BaseContext):
        self.base = base

    def get_access_token(self, api_context: ApiContext) -> HttpRequest:
        """``POST /access_token`` authenticated with the shared secret."""
        return _request("POST", _join(api_context.base, "access_token"), api_context.secret)

    def get_me(self, access_token: str) -> HttpRequest:
        return _request("GET", _join(self.base, "me"), access_token)

    def get_balance(self, access_token: str) -> HttpRequest:
        return _request("GET", _join(self.base, "balance"), access_token)


class CoinEndpoints:
    """Endpoints of the coin catalog: ``/coins`` and ``/coins/{name}``."""

    def __init__(self, base: BaseContext):
        self.base = base

    def coins(self, access_token: str) -> HttpRequest:
        return _request("GET", _join(self.base, "coins"), access_token)

    def coin(self, coin: CoinId | str, access_token: str) -> HttpRequest:
        if not isinstance(coin, (Coin, UnknownCoin)):
            coin = coin_from_str(coin)
        return _request("GET", _join(self.base, "coins", coin_to_str(coin)), access_token)
