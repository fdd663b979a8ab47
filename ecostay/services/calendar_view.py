"""Calendar grid view model — what a month view of one property shows.

The presentation layer renders these cells; nothing here formats text.
"""

from dataclasses import dataclass
from enum import Enum

from ecostay.config import settings
from ecostay.models.property import Property


class DayStatus(str, Enum):
    AVAILABLE = "available"
    BOOKED = "booked"
    NOT_LISTED = "not_listed"


class RateBand(str, Enum):
    """Colour band of a day's environmental rate relative to 100%."""

    GREEN = "green"  # below 100%
    NEUTRAL = "neutral"  # exactly 100%
    YELLOW = "yellow"  # above 100%


@dataclass(frozen=True)
class CalendarCell:
    day: int
    status: DayStatus
    final_price: float | None = None
    rate_band: RateBand | None = None


def rate_band(environmental_rate: float) -> RateBand:
    percent = round(environmental_rate * 100)
    if percent < 100:
        return RateBand.GREEN
    if percent > 100:
        return RateBand.YELLOW
    return RateBand.NEUTRAL


def build_calendar_cell(prop: Property, day: int) -> CalendarCell:
    calendar_day = prop.date_by_day(day)
    if calendar_day is None:
        return CalendarCell(day=day, status=DayStatus.NOT_LISTED)
    return CalendarCell(
        day=day,
        status=DayStatus.AVAILABLE if calendar_day.is_available() else DayStatus.BOOKED,
        final_price=calendar_day.final_price(prop.category_multiplier),
        rate_band=rate_band(calendar_day.environmental_rate),
    )


def build_calendar_grid(prop: Property, columns: int = 7) -> list[list[CalendarCell]]:
    """Lay out every calendar day of ``prop`` in rows of ``columns`` cells.

    The last row is shorter when the calendar does not fill it.
    """
    if columns < 1:
        raise ValueError("columns must be at least 1")
    cells = [build_calendar_cell(prop, day) for day in range(1, settings.calendar_days + 1)]
    return [cells[start : start + columns] for start in range(0, len(cells), columns)]
