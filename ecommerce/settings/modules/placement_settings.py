from __future__ import annotations

from decimal import Decimal

from pydantic import Field, field_validator

from ecommerce.settings.base_settings import EcommerceBaseSettings


class PlacementSettings(EcommerceBaseSettings):
    """
    Order placement business settings.
    Loaded from .env with exact variable name matching.
    """

    vip_discount_rate: Decimal = Field(Decimal("0.10"), alias="ORDER_VIP_DISCOUNT_RATE")

    @field_validator("vip_discount_rate")
    @classmethod
    def _rate_is_a_fraction(cls, value: Decimal) -> Decimal:
        if not Decimal("0") <= value <= Decimal("1"):
            raise ValueError(f"VIP discount rate must be between 0 and 1, got: {value}")
        return value
