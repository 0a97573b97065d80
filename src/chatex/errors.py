"""Error hierarchy for the Chatex client and HTTP error classification."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, AsyncIterator

if TYPE_CHECKING:
    from .models import ErrorPayload

logger = logging.getLogger(__name__)


class ChatexError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
        }


class RequestBuildError(ChatexError):
    """Request could not be built from the endpoint inputs (bad URL or header)."""


class TransportError(ChatexError):
    """Connection or IO failure below the HTTP layer."""


class HttpError(ChatexError):
    """Non-2xx response from the exchange."""

    def __init__(self, status: int, payload: "ErrorPayload | None" = None):
        if payload is not None:
            message = f"HTTP {status}: {payload.code}: {payload.message}"
        else:
            message = f"HTTP error with status {status}"
        super().__init__(message)
        self.status = status
        self.payload = payload

    @property
    def code(self) -> str | None:
        return self.payload.code if self.payload else None

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status < 600

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "status": self.status,
            "payload": self.payload.model_dump() if self.payload else None,
        })
        return data


class DecodeStage(Enum):
    """Where body decoding failed."""

    READ = "read"
    PARSE = "parse"


class DecodeError(ChatexError):
    """Response body could not be decoded into the expected model."""

    def __init__(self, stage: DecodeStage, message: str, *, cause: Exception | None = None):
        super().__init__(f"{stage.value} failed: {message}", cause=cause)
        self.stage = stage

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["stage"] = self.stage.value
        return data


class AuthUnavailable(ChatexError):
    """No access token could be obtained."""


def is_error_status(status: int) -> bool:
    """True for any status outside the 2xx range."""
    return not 200 <= status < 300


async def classify_error(status: int, body: AsyncIterator[bytes]) -> HttpError:
    """Build an ``HttpError`` from an error response.

    The exchange's ``{code, message}`` payload is attached when the body
    decodes; otherwise the error carries the status only.
    """
    from .extractor import extract_error_payload

    try:
        payload = await extract_error_payload(body)
    except DecodeError as exc:
        logger.warning("Unparsable error payload for HTTP %s: %s", status, exc)
        return HttpError(status)
    return HttpError(status, payload)
