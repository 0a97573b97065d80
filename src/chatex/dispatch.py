"""Send a request and turn its response into a model or an error."""

from __future__ import annotations

import logging
from typing import AsyncIterator, Awaitable, Callable, TypeVar

from .endpoints import HttpRequest
from .errors import classify_error, is_error_status
from .transport import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")

Extractor = Callable[[AsyncIterator[bytes]], Awaitable[T]]


async def dispatch(transport: Transport, request: HttpRequest, extract: Extractor[T]) -> T:
    """Dispatch ``request`` and decode the response with ``extract``.

    Raises:
        TransportError: If the transport fails
        HttpError: For non-2xx responses
        DecodeError: If a 2xx body does not decode
    """
    response = await transport.send(request)
    try:
        if is_error_status(response.status):
            error = await classify_error(response.status, response.body)
            logger.warning("%s %s -> %s", request.method, request.url.path, error)
            raise error
        return await extract(response.body)
    finally:
        await response.release()
