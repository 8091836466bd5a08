# core/settings/app.py
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator

from core.domain.enums import FailurePolicy
from core.settings.base import RestaurantBaseSettings


class AppSettings(RestaurantBaseSettings):
    """
    Application settings.
    Loaded from the environment (or .env) with exact variable name matching.
    Defaults reproduce the reference demo run.
    """

    currency: str = Field(default="USD", alias="ORDER_CURRENCY")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    failure_policy: FailurePolicy = Field(
        default=FailurePolicy.ABORT, alias="CHAIN_FAILURE_POLICY"
    )
    require_items: bool = Field(default=False, alias="ORDER_REQUIRE_ITEMS")

    @field_validator("currency")
    @classmethod
    def _currency_code(cls, value: str) -> str:
        if len(value) != 3 or not value.isalpha():
            raise ValueError(f"Currency must be 3-letter ISO code, got: {value}")
        return value.upper()

    @field_validator("log_level")
    @classmethod
    def _log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()
