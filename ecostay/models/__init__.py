"""Ledger domain models.

Import models from here rather than from the individual modules.
"""

from ecostay.models.calendar_day import CalendarDay
from ecostay.models.category import RATE_CARDS, PropertyCategory, RateCard
from ecostay.models.property import Property
from ecostay.models.reservation import Reservation

__all__ = [
    "CalendarDay",
    "Property",
    "PropertyCategory",
    "RATE_CARDS",
    "RateCard",
    "Reservation",
]
