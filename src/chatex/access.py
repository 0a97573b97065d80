"""Memoized bearer token shared by all authenticated calls."""

from __future__ import annotations

import asyncio
import logging

from .context import AccessContext, ApiContext
from .dispatch import dispatch
from .endpoints import ProfileEndpoints
from .errors import AuthUnavailable, DecodeError, HttpError, TransportError
from .extractor import extract_access_token
from .transport import Transport

logger = logging.getLogger(__name__)


class AccessController:
    """Owns the single cached ``AccessContext``.

    The slot is only written under ``_lock`` and only after a fetch fully
    succeeds, so concurrent first calls share one fetch and a cancelled fetch
    leaves nothing behind. Failed fetches are not cached.
    """

    def __init__(self, api_context: ApiContext, profile: ProfileEndpoints):
        self.api_context = api_context
        self.profile = profile
        self._access_context: AccessContext | None = None
        self._lock = asyncio.Lock()

    @property
    def access_context(self) -> AccessContext | None:
        return self._access_context

    async def get_or_fetch_token(self, transport: Transport) -> str:
        """Return the cached token, fetching it first if needed.

        Raises:
            AuthUnavailable: If the token request fails at any stage
            RequestBuildError: If the token request cannot be built
        """
        cached = self._access_context
        if cached is not None:
            return cached.access_token

        async with self._lock:
            if self._access_context is None:
                request = self.profile.get_access_token(self.api_context)
                try:
                    token = await dispatch(transport, request, extract_access_token)
                except (TransportError, HttpError, DecodeError) as exc:
                    logger.error("Failed to obtain access token: %s", exc)
                    raise AuthUnavailable(f"Access token unavailable: {exc}", cause=exc) from exc
                self._access_context = AccessContext(self.api_context.base, token.access_token)
                logger.info("Obtained access token (expires_at=%s)", token.expires_at)
            return self._access_context.access_token
