"""Connection contexts shared by every request."""

from __future__ import annotations

from dataclasses import dataclass, field

from yarl import URL

from .errors import RequestBuildError


@dataclass(frozen=True, slots=True)
class BaseContext:
    """Base URL of the API, e.g. ``https://api.chatex.com/v1``."""

    base_url: URL

    @classmethod
    def from_url(cls, base_url: str | URL) -> "BaseContext":
        """Parse and validate a base URL.

        Raises:
            RequestBuildError: If the URL is not an absolute http(s) URL
        """
        try:
            url = base_url if isinstance(base_url, URL) else URL(base_url)
        except (TypeError, ValueError) as exc:
            raise RequestBuildError(f"Invalid base URL: {base_url!r}", cause=exc) from exc
        if not url.is_absolute() or url.scheme not in {"http", "https"}:
            raise RequestBuildError(f"Base URL must be an absolute http(s) URL: {base_url!r}")
        if url.path != "/" and url.path.endswith("/"):
            url = url.with_path(url.path.rstrip("/"))
        return cls(url)


@dataclass(frozen=True, slots=True)
class ApiContext:
    """Base connection info plus the shared secret used to obtain tokens."""

    base: BaseContext
    secret: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class AccessContext:
    """Base connection info plus a bearer token obtained from the API."""

    base: BaseContext
    access_token: str = field(repr=False)
