"""Response models of the Chatex API."""

from __future__ import annotations

from pydantic import BaseModel, NonNegativeInt

from .coin import CoinId, coin_from_str


class ApiModel(BaseModel):
    model_config = {"extra": "ignore", "frozen": True}


class AccessToken(ApiModel):
    access_token: str
    # Decoded but not used for refresh; a cached token lives until process end.
    expires_at: int


class MerchantInfo(ApiModel):
    name: str
    usd_amount_max_limit: str


class AML5Limits(ApiModel):
    current_turnover: str
    current_withdraw: str
    turnover_limit: str
    withdraw_limit: str
    withdraw_limit_daily: str


class Verification(ApiModel):
    current_level: str


class Profile(ApiModel):
    country_code: str
    email: str | None = None
    is_finance_blocked: bool
    lang_id: str
    limits: AML5Limits
    phone: str
    username: str
    verification: Verification


class BasicInfo(ApiModel):
    """Payload of ``GET /me``."""

    id: int
    merchant_info: MerchantInfo | None = None
    profile: Profile


class Currency(ApiModel):
    """Balance of a single coin."""

    amount: str
    coin: str
    held: str


Balance = list[Currency]


class CoinInfo(ApiModel):
    """Coin metadata from ``GET /coins``."""

    decimals: NonNegativeInt
    full_name: str
    name: str

    @property
    def coin(self) -> CoinId:
        return coin_from_str(self.name)


Coins = list[CoinInfo]


class ErrorPayload(ApiModel):
    """Error body returned with non-2xx responses."""

    code: str
    message: str
