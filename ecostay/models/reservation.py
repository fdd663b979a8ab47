"""Reservation model — a guest's claim over a contiguous day range."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ecostay.models.property import Property


@dataclass(frozen=True)
class Reservation:
    """An immutable guest / check-in / check-out triple.

    Covers the nights ``[check_in, check_out)``. Two reservations are equal when
    all three fields match, which is how a Property finds the one to remove.
    Prices are computed on demand against the Property passed in; the
    reservation keeps no reference to it.
    """

    guest_name: str
    check_in: int
    check_out: int

    @property
    def nights(self) -> int:
        return max(self.check_out - self.check_in, 0)

    @property
    def days(self) -> range:
        """Day numbers of every night covered by the stay."""
        return range(self.check_in, self.check_out)

    def total_price(self, prop: Property) -> float:
        """Sum of the final nightly prices over the stay.

        If any night falls on a day the property does not list, the whole
        reservation is priced at 0.0 rather than as a partial sum.
        """
        multiplier = prop.category_multiplier
        total = 0.0
        for day in self.days:
            calendar_day = prop.date_by_day(day)
            if calendar_day is None:
                return 0.0
            total += calendar_day.final_price(multiplier)
        return total

    def nightly_breakdown(self, prop: Property) -> list[float]:
        """Final price of each night, in order.

        Unlike ``total_price``, a day the property does not list only zeroes
        that single night.
        """
        multiplier = prop.category_multiplier
        breakdown: list[float] = []
        for day in self.days:
            calendar_day = prop.date_by_day(day)
            breakdown.append(calendar_day.final_price(multiplier) if calendar_day is not None else 0.0)
        return breakdown
