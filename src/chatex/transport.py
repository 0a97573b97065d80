"""HTTP transport capability and its aiohttp implementation."""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Awaitable, Callable, Mapping, Protocol

import aiohttp
from multidict import CIMultiDict, CIMultiDictProxy

from .endpoints import HttpRequest
from .errors import TransportError

logger = logging.getLogger(__name__)


class HttpResponse:
    """Status code plus a streamed body.

    ``release`` must be awaited once the body is consumed or abandoned.
    """

    def __init__(
        self,
        status: int,
        body: AsyncIterator[bytes],
        *,
        headers: Mapping[str, str] | None = None,
        release: Callable[[], Awaitable[None]] | None = None,
    ):
        self.status = status
        self.body = body
        self.headers: CIMultiDictProxy[str] = CIMultiDictProxy(CIMultiDict(headers or {}))
        self._release = release

    async def release(self) -> None:
        if self._release is not None:
            release, self._release = self._release, None
            await release()


class Transport(Protocol):
    """Anything that can dispatch an ``HttpRequest``.

    Implementations must be safe to share between concurrent calls.
    """

    async def send(self, request: HttpRequest) -> HttpResponse:
        """Dispatch a request.

        Raises:
            TransportError: On connection, timeout or protocol failures
        """
        ...

    async def close(self) -> None:
        """Close connections."""
        ...


class ProxyConfig:
    """HTTP proxy configuration."""

    def __init__(self, url: str | None = None, username: str | None = None, password: str | None = None):
        self.url = url
        self.username = username
        self.password = password

    @property
    def proxy_url(self) -> str | None:
        if not self.url:
            return None
        if self.username and self.password:
            protocol = self.url.split("://")[0] if "://" in self.url else "http"
            rest = self.url.split("://")[1] if "://" in self.url else self.url
            return f"{protocol}://{self.username}:{self.password}@{rest}"
        return self.url


class AiohttpTransport:
    """Transport backed by a lazily created ``aiohttp.ClientSession``."""

    DEFAULT_CHUNK_SIZE = 64 * 1024

    def __init__(
        self,
        *,
        proxy: ProxyConfig | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        session: aiohttp.ClientSession | None = None,
    ):
        self.proxy = proxy or ProxyConfig()
        self.chunk_size = chunk_size
        self.session = session
        self._owns_session = session is None
        self._session_lock = asyncio.Lock()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        async with self._session_lock:
            if self.session is None:
                self.session = aiohttp.ClientSession(
                    connector=aiohttp.TCPConnector(),
                    headers={"User-Agent": "chatex-client/1.0"},
                )
        return self.session

    async def send(self, request: HttpRequest) -> HttpResponse:
        session = await self._ensure_session()
        logger.debug("%s %s", request.method, request.url)
        try:
            resp = await session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body,
                proxy=self.proxy.proxy_url,
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"{request.method} {request.url} failed: {exc}", cause=exc) from exc

        return HttpResponse(
            resp.status,
            self._iter_body(resp),
            headers=resp.headers,
            release=self._releaser(resp),
        )

    async def _iter_body(self, resp: aiohttp.ClientResponse) -> AsyncIterator[bytes]:
        try:
            async for chunk in resp.content.iter_chunked(self.chunk_size):
                yield chunk
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"Failed reading body of {resp.url}: {exc}", cause=exc) from exc

    @staticmethod
    def _releaser(resp: aiohttp.ClientResponse) -> Callable[[], Awaitable[None]]:
        async def release() -> None:
            # A fully read body has already handed its connection back to the pool.
            resp.close()

        return release

    async def close(self) -> None:
        """Close connections."""
        if self.session and self._owns_session:
            await self.session.close()
        self.session = None
