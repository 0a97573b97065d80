"""Client construction from settings."""

from __future__ import annotations

import logging

from .client import ChatexClient
from .settings import Settings
from .transport import AiohttpTransport, ProxyConfig

logger = logging.getLogger(__name__)


def create_client_from_settings(settings: Settings) -> ChatexClient[AiohttpTransport]:
    """Create a client with an aiohttp transport.

    Raises:
        ValueError: If no secret is configured
        RequestBuildError: If the base URL is invalid
    """
    if settings.secret is None:
        raise ValueError("Chatex secret is not configured (set `secret` or CHATEX_SECRET)")

    proxy_config = None
    if settings.proxy.enabled:
        proxy_config = ProxyConfig(
            url=settings.proxy.url,
            username=settings.proxy.username,
            password=settings.proxy.password.get_secret_value() if settings.proxy.password else None,
        )
        logger.debug("Using proxy %s", settings.proxy.url)

    transport = AiohttpTransport(proxy=proxy_config)
    client = ChatexClient(settings.base_url, settings.secret.get_secret_value(), transport)
    logger.info("Initialized Chatex client for %s", settings.base_url)
    return client
