"""Decoding of streamed response bodies into models."""

from __future__ import annotations

import logging
from typing import AsyncIterator, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError, DecodeStage, TransportError
from .models import AccessToken, Balance, BasicInfo, CoinInfo, Coins, ErrorPayload

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ADAPTERS: dict[object, TypeAdapter] = {}


def _adapter(schema: type[T]) -> TypeAdapter[T]:
    adapter = _ADAPTERS.get(schema)
    if adapter is None:
        adapter = TypeAdapter(schema)
        _ADAPTERS[schema] = adapter
    return adapter


async def read_body(body: AsyncIterator[bytes]) -> bytes:
    """Accumulate all chunks of a body stream.

    Raises:
        DecodeError: With stage READ if the stream fails mid-way
    """
    chunks: list[bytes] = []
    try:
        async for chunk in body:
            chunks.append(chunk)
    except (TransportError, OSError) as exc:
        raise DecodeError(DecodeStage.READ, str(exc), cause=exc) from exc
    return b"".join(chunks)


async def extract(body: AsyncIterator[bytes], schema: type[T]) -> T:
    """Read a JSON body and validate it against ``schema``.

    Args:
        body: Body byte stream, possibly delivered in several chunks
        schema: Model class or typing construct such as ``list[Currency]``

    Returns:
        Decoded value

    Raises:
        DecodeError: READ stage for stream failures, PARSE stage for invalid
            JSON or schema mismatch
    """
    raw = await read_body(body)
    try:
        return _adapter(schema).validate_json(raw)
    except ValidationError as exc:
        logger.debug("Body of %d bytes does not match %s", len(raw), schema)
        raise DecodeError(DecodeStage.PARSE, str(exc), cause=exc) from exc


async def extract_access_token(body: AsyncIterator[bytes]) -> AccessToken:
    return await extract(body, AccessToken)


async def extract_basic_info(body: AsyncIterator[bytes]) -> BasicInfo:
    return await extract(body, BasicInfo)


async def extract_balance(body: AsyncIterator[bytes]) -> Balance:
    return await extract(body, Balance)


async def extract_coins(body: AsyncIterator[bytes]) -> Coins:
    return await extract(body, Coins)


async def extract_coin(body: AsyncIterator[bytes]) -> CoinInfo:
    return await extract(body, CoinInfo)


async def extract_error_payload(body: AsyncIterator[bytes]) -> ErrorPayload:
    return await extract(body, ErrorPayload)
