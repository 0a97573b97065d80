"""Pytest configuration and fixtures."""

from __future__ import annotations

import asyncio
import json
from collections import defaultdict, deque
from typing import Any, AsyncIterator

import pytest

from chatex.endpoints import HttpRequest
from chatex.transport import HttpResponse

BASE_URL = "https://api.test/v1"


class ScriptedResponse:
    """Blueprint for a response; a fresh body stream is made on every send."""

    def __init__(
        self,
        status: int = 200,
        payload: Any = None,
        *,
        raw: bytes | None = None,
        chunk_size: int = 16,
        read_error: Exception | None = None,
    ):
        self.status = status
        self.raw = raw if raw is not None else json.dumps(payload).encode()
        self.chunk_size = chunk_size
        self.read_error = read_error

    async def _body(self) -> AsyncIterator[bytes]:
        for start in range(0, len(self.raw), self.chunk_size):
            # Suspend between chunks like a real socket read would.
            await asyncio.sleep(0)
            yield self.raw[start:start + self.chunk_size]
            if self.read_error is not None:
                raise self.read_error


class FakeTransport:
    """Deterministic in-memory transport.

    Responses are scripted per ``(method, path)``. Each send consumes the
    next scripted entry; the last entry keeps answering once the queue is
    down to one. An entry that is an exception is raised from ``send``.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], deque] = defaultdict(deque)
        self.requests: list[HttpRequest] = []
        self.released = 0
        self.closed = False

    def add(self, method: str, path: str, *entries: ScriptedResponse | Exception) -> "FakeTransport":
        self.routes[(method, path)].extend(entries)
        return self

    def calls(self, method: str, path: str) -> int:
        return sum(1 for r in self.requests if r.method == method and r.url.path == path)

    async def send(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        await asyncio.sleep(0)
        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            raise AssertionError(f"Unexpected request {request.method} {request.url}")
        entry = queue.popleft() if len(queue) > 1 else queue[0]
        if isinstance(entry, Exception):
            raise entry
        return HttpResponse(entry.status, entry._body(), release=self._release)

    async def _release(self) -> None:
        self.released += 1

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def base_url():
    """Test API base URL."""
    return BASE_URL


@pytest.fixture
def secret():
    """Test shared secret."""
    return "test_secret_789012"


@pytest.fixture
def transport():
    """Empty scripted transport."""
    return FakeTransport()


@pytest.fixture
def respond():
    """Factory for scripted responses."""
    return ScriptedResponse


@pytest.fixture
def access_token_response():
    """Sample /access_token response data."""
    return {"access_token": "token_abc123", "expires_at": 1700000000}


@pytest.fixture
def basic_info_response():
    """Sample /me response data."""
    return {
        "id": 42,
        "merchant_info": {"name": "Shop", "usd_amount_max_limit": "1000.00"},
        "profile": {
            "country_code": "EE",
            "email": "user@example.com",
            "is_finance_blocked": False,
            "lang_id": "en",
            "limits": {
                "current_turnover": "10.00",
                "current_withdraw": "5.00",
                "turnover_limit": "10000.00",
                "withdraw_limit": "5000.00",
                "withdraw_limit_daily": "500.00",
            },
            "phone": "+3725550000",
            "username": "satoshi",
            "verification": {"current_level": "AML5"},
        },
    }


@pytest.fixture
def balance_response():
    """Sample /balance response data."""
    return [
        {"amount": "0.50000000", "coin": "btc", "held": "0.10000000"},
        {"amount": "1000.000000", "coin": "usdt", "held": "0.000000"},
    ]


@pytest.fixture
def coins_response():
    """Sample /coins response data."""
    return [
        {"decimals": 8, "full_name": "Bitcoin", "name": "btc"},
        {"decimals": 18, "full_name": "Ethereum", "name": "eth"},
        {"decimals": 9, "full_name": "TON Crystal", "name": "ton_crystal"},
    ]
