"""Profile and account operations."""

from __future__ import annotations

from .core import ClientCore
from .endpoints import ProfileEndpoints
from .extractor import extract_access_token, extract_balance, extract_basic_info
from .models import AccessToken, Balance, BasicInfo


class ProfileClient:
    """Operations on ``/access_token``, ``/me`` and ``/balance``."""

    def __init__(self, base: ClientCore, profile: ProfileEndpoints):
        self.base = base
        self.profile = profile

    async def create_access_token(self) -> AccessToken:
        """Request a new access token.

        Always hits the API and leaves the cached token untouched.
        """
        request = self.profile.get_access_token(self.base.api_context)
        return await self.base.dispatch(request, extract_access_token)

    async def get_account_information(self) -> BasicInfo:
        return await self.base.call(self.profile.get_me, extract_basic_info)

    async def get_balance_summary(self) -> Balance:
        return await self.base.call(self.profile.get_balance, extract_balance)
