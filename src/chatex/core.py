"""Authenticated request pipeline shared by all resource clients."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

from .access import AccessController
from .context import ApiContext
from .dispatch import Extractor, dispatch
from .endpoints import HttpRequest
from .transport import Transport

T = TypeVar("T")
TTransport = TypeVar("TTransport", bound=Transport)


class ClientCore(Generic[TTransport]):
    """Composes a transport, the access controller and response decoding.

    Generic over the transport so production and test transports run the
    same code path.
    """

    def __init__(
        self,
        transport: TTransport,
        api_context: ApiContext,
        access_controller: AccessController,
    ):
        self.transport = transport
        self.api_context = api_context
        self.access_controller = access_controller

    async def get_access_token(self) -> str:
        return await self.access_controller.get_or_fetch_token(self.transport)

    async def call(self, build: Callable[[str], HttpRequest], extract: Extractor[T]) -> T:
        """Run one authenticated call.

        Args:
            build: Endpoint builder taking the bearer token
            extract: Body decoder for the expected model

        Returns:
            Decoded model

        Raises:
            AuthUnavailable: If no token could be obtained; the target
                endpoint is not contacted
            RequestBuildError: If ``build`` fails
            TransportError, HttpError, DecodeError: From dispatch
        """
        access_token = await self.get_access_token()
        request = build(access_token)
        return await dispatch(self.transport, request, extract)

    async def dispatch(self, request: HttpRequest, extract: Extractor[T]) -> T:
        """Run a call that needs no access token."""
        return await dispatch(self.transport, request, extract)
