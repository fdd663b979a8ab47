"""Pydantic v2 schemas for reservations and environmental rate ranges."""

from pydantic import BaseModel, Field, model_validator

from ecostay.config import settings

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class ReservationCreate(BaseModel):
    """Schema for creating a new reservation."""

    guest_name: str = Field(..., min_length=1)
    check_in: int = Field(..., ge=1, le=settings.calendar_days - 1)
    check_out: int = Field(..., ge=2, le=settings.calendar_days)

    @model_validator(mode="after")
    def check_dates(self) -> "ReservationCreate":
        """Validate that check_out is strictly after check_in."""
        if self.check_out <= self.check_in:
            raise ValueError("check_out must be after check_in")
        return self


class RateRangeUpdate(BaseModel):
    """Schema for applying one environmental rate to an inclusive day range."""

    start: int = Field(..., ge=1, le=settings.calendar_days)
    end: int = Field(..., ge=1, le=settings.calendar_days)
    rate: float = Field(..., ge=settings.environmental_rate_min, le=settings.environmental_rate_max)

    @model_validator(mode="after")
    def check_range(self) -> "RateRangeUpdate":
        if self.start > self.end:
            raise ValueError("start must not be after end")
        return self


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class PriceQuote(BaseModel):
    """Total and per-night prices of a stay on one property."""

    property_name: str
    guest_name: str
    check_in: int
    check_out: int
    nights: int
    nightly_prices: list[float]
    total_price: float
