"""Entry point client for the Chatex API."""

from __future__ import annotations

from typing import Generic, TypeVar

from yarl import URL

from .access import AccessController
from .coins import CoinClient
from .context import ApiContext, BaseContext
from .core import ClientCore
from .endpoints import CoinEndpoints, ProfileEndpoints
from .profile import ProfileClient
from .transport import AiohttpTransport, Transport

TTransport = TypeVar("TTransport", bound=Transport)


class ChatexClient(Generic[TTransport]):
    """Chatex API client.

    Usage::

        async with ChatexClient("https://api.chatex.com/v1", secret) as client:
            info = await client.profile.get_account_information()
            btc = await client.coin.get_coin(Coin.BTC)
    """

    def __init__(
        self,
        base_url: str | URL,
        secret: str,
        transport: TTransport | None = None,
    ):
        """Initialize client.

        Args:
            base_url: API base URL
            secret: Shared secret exchanged for access tokens
            transport: HTTP transport (default: ``AiohttpTransport``)

        Raises:
            RequestBuildError: If ``base_url`` is not an absolute http(s) URL
        """
        base_context = BaseContext.from_url(base_url)
        api_context = ApiContext(base_context, secret)
        self._profile = ProfileEndpoints(base_context)
        self._coin = CoinEndpoints(base_context)
        access_controller = AccessController(api_context, self._profile)
        self.transport = transport if transport is not None else AiohttpTransport()
        self.base: ClientCore[TTransport] = ClientCore(self.transport, api_context, access_controller)

    @property
    def profile(self) -> ProfileClient:
        return ProfileClient(self.base, self._profile)

    @property
    def coin(self) -> CoinClient:
        return CoinClient(self.base, self._coin)

    async def close(self) -> None:
        await self.transport.close()

    async def __aenter__(self) -> "ChatexClient[TTransport]":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
