"""CalendarDay model — one bookable day slot on a property's calendar."""

import logging

from ecostay.config import settings
from ecostay.results import ErrorKind, OperationResult

logger = logging.getLogger(__name__)


def is_valid_day(day: int) -> bool:
    """True if ``day`` is a calendar slot number (1 to ``calendar_days``)."""
    return isinstance(day, int) and 1 <= day <= settings.calendar_days


def is_valid_price(price: float) -> bool:
    return price >= settings.min_price


def is_valid_environmental_rate(rate: float) -> bool:
    return settings.environmental_rate_min <= rate <= settings.environmental_rate_max


class CalendarDay:
    """A single day a property lists for booking.

    Carries its own base price and environmental-impact rate. The reserved flag
    is flipped only by the owning Property while it adds or removes a
    reservation.
    """

    def __init__(
        self,
        day: int,
        base_price: float | None = None,
        environmental_rate: float | None = None,
    ) -> None:
        if not is_valid_day(day):
            raise ValueError(f"day must be between 1 and {settings.calendar_days}, got {day!r}")
        if base_price is None:
            base_price = settings.default_base_price
        if environmental_rate is None:
            environmental_rate = settings.default_environmental_rate
        if not is_valid_price(base_price):
            raise ValueError(f"base_price must be at least {settings.min_price}, got {base_price!r}")
        if not is_valid_environmental_rate(environmental_rate):
            raise ValueError(f"environmental_rate out of bounds: {environmental_rate!r}")

        self._day = day
        self.base_price = float(base_price)
        self.environmental_rate = float(environmental_rate)
        self.reserved = False

    @property
    def day(self) -> int:
        return self._day

    def set_price(self, value: float) -> OperationResult:
        """Update the base price if it is at least the configured minimum."""
        if not is_valid_price(value):
            logger.warning("Rejected price %s for day %s (minimum %s)", value, self._day, settings.min_price)
            return OperationResult.failure(
                ErrorKind.VALIDATION,
                f"Price cannot be less than {settings.min_price}.",
            )
        self.base_price = float(value)
        return OperationResult.success(self.base_price)

    def set_environmental_rate(self, value: float) -> OperationResult:
        """Update the environmental rate if it lies within the allowed band."""
        if not is_valid_environmental_rate(value):
            logger.warning("Rejected environmental rate %s for day %s", value, self._day)
            return OperationResult.failure(
                ErrorKind.VALIDATION,
                f"Environmental rate must be between {settings.environmental_rate_min:.2f} "
                f"and {settings.environmental_rate_max:.2f}.",
            )
        self.environmental_rate = float(value)
        return OperationResult.success(self.environmental_rate)

    def final_price(self, category_multiplier: float) -> float:
        """Nightly price: base price x category multiplier x environmental rate."""
        return self.base_price * category_multiplier * self.environmental_rate

    def is_available(self) -> bool:
        return not self.reserved

    def book(self) -> None:
        self.reserved = True

    def unbook(self) -> None:
        self.reserved = False

    def __repr__(self) -> str:
        status = "reserved" if self.reserved else "available"
        return (
            f"<CalendarDay(day={self._day}, base_price={self.base_price}, "
            f"environmental_rate={self.environmental_rate}, {status})>"
        )
