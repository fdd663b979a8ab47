"""Property model — a listing with its calendar days and reservations."""

import logging

from ecostay.config import settings
from ecostay.models.calendar_day import CalendarDay, is_valid_day, is_valid_price
from ecostay.models.category import PropertyCategory, get_rate_card
from ecostay.models.reservation import Reservation
from ecostay.results import ErrorKind, OperationResult

logger = logging.getLogger(__name__)


class Property:
    """An eco-apartment, house, resort, or glamping site offered for rent.

    Days are kept in a mapping keyed by day number, so a day can be listed at
    most once. Reservations are kept in booking order and are the only thing
    that flips a day's reserved flag.
    """

    def __init__(self, name: str, category: PropertyCategory) -> None:
        self.name = name
        self.category = PropertyCategory(category)
        self._days: dict[int, CalendarDay] = {}
        self._reservations: list[Reservation] = []

    # ------------------------------------------------------------------
    # Category
    # ------------------------------------------------------------------

    @property
    def category_multiplier(self) -> float:
        return get_rate_card(self.category).multiplier

    @property
    def category_display_name(self) -> str:
        return get_rate_card(self.category).display_name

    # ------------------------------------------------------------------
    # Calendar days
    # ------------------------------------------------------------------

    def add_date(self, day: int, initial_price: float | None = None) -> OperationResult:
        """List a new day. A day number that is already listed is left untouched."""
        if not is_valid_day(day):
            return OperationResult.failure(
                ErrorKind.VALIDATION,
                f"Day must be between 1 and {settings.calendar_days}.",
            )
        if day in self._days:
            logger.debug("Day %s already listed on %r", day, self.name)
            return OperationResult.failure(ErrorKind.CONFLICT, f"Day {day} is already listed.")
        if initial_price is not None and not is_valid_price(initial_price):
            return OperationResult.failure(
                ErrorKind.VALIDATION,
                f"Price cannot be less than {settings.min_price}.",
            )

        calendar_day = CalendarDay(day, base_price=initial_price)
        self._days[day] = calendar_day
        return OperationResult.success(calendar_day)

    def remove_date(self, day: int) -> OperationResult:
        """Unlist a day. Reserved days cannot be removed."""
        calendar_day = self._days.get(day)
        if calendar_day is None:
            return OperationResult.failure(ErrorKind.NOT_FOUND, f"Day {day} is not listed.")
        if not calendar_day.is_available():
            logger.warning("Refused to remove reserved day %s from %r", day, self.name)
            return OperationResult.failure(ErrorKind.CONFLICT, f"Day {day} is reserved and cannot be removed.")

        del self._days[day]
        return OperationResult.success(calendar_day)

    def date_by_day(self, day: int) -> CalendarDay | None:
        return self._days.get(day)

    def listed_days(self) -> list[int]:
        return sorted(self._days)

    def dates(self) -> list[CalendarDay]:
        """All listed days, ordered by day number."""
        return [self._days[day] for day in sorted(self._days)]

    def available_dates(self) -> list[CalendarDay]:
        return [calendar_day for calendar_day in self.dates() if calendar_day.is_available()]

    def is_range_available(self, check_in: int, check_out: int) -> bool:
        """True if every night in ``[check_in, check_out)`` is listed and free."""
        if check_out <= check_in:
            return False
        for day in range(check_in, check_out):
            calendar_day = self._days.get(day)
            if calendar_day is None or not calendar_day.is_available():
                return False
        return True

    # ------------------------------------------------------------------
    # Reservations
    # ------------------------------------------------------------------

    @property
    def reservations(self) -> tuple[Reservation, ...]:
        return tuple(self._reservations)

    def has_reservations(self) -> bool:
        return bool(self._reservations)

    def add_reservation(self, reservation: Reservation) -> OperationResult:
        """Book every night of ``reservation`` or none of them."""
        if reservation.check_out <= reservation.check_in:
            return OperationResult.failure(ErrorKind.VALIDATION, "check_out must be after check_in.")
        if not self.is_range_available(reservation.check_in, reservation.check_out):
            logger.info(
                "Rejected reservation for %r on %r: days %s-%s not all listed and available",
                reservation.guest_name,
                self.name,
                reservation.check_in,
                reservation.check_out,
            )
            return OperationResult.failure(
                ErrorKind.CONFLICT,
                "Some of the requested days are not listed or already reserved.",
            )

        self._reservations.append(reservation)
        for day in reservation.days:
            self._days[day].book()
        return OperationResult.success(reservation)

    def remove_reservation(self, reservation: Reservation) -> OperationResult:
        """Drop the first stored reservation equal to ``reservation`` and free its days."""
        for position, stored in enumerate(self._reservations):
            if stored == reservation:
                for day in stored.days:
                    calendar_day = self._days.get(day)
                    if calendar_day is not None:
                        calendar_day.unbook()
                del self._reservations[position]
                return OperationResult.success(stored)
        return OperationResult.failure(ErrorKind.NOT_FOUND, "Reservation not found.")

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    def update_base_price(self, new_price: float) -> OperationResult:
        """Set the same base price on every listed day.

        Does not look at reservations; the registry refuses the update while
        any exist.
        """
        if not is_valid_price(new_price):
            return OperationResult.failure(
                ErrorKind.VALIDATION,
                f"Price cannot be less than {settings.min_price}.",
            )
        for calendar_day in self._days.values():
            calendar_day.set_price(new_price)
        return OperationResult.success(float(new_price))

    def estimated_earnings(self) -> float:
        """Sum of final prices over all reserved days."""
        multiplier = self.category_multiplier
        return sum(
            calendar_day.final_price(multiplier)
            for calendar_day in self._days.values()
            if not calendar_day.is_available()
        )

    def __repr__(self) -> str:
        return (
            f"<Property(name={self.name!r}, category={self.category.value!r}, "
            f"days={len(self._days)}, reservations={len(self._reservations)})>"
        )
