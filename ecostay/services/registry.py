"""Property registry — the facade every caller goes through.

Owns the ordered list of properties and mediates all create / read / update /
delete operations on them. Properties are addressed by their position in the
list, as the presentation layer enumerates them.

Reservations are read through each Property's own accessor, so there is a
single source of truth for which stays are active.
"""

import logging
import random

from pydantic import ValidationError

from ecostay.config import settings
from ecostay.models.calendar_day import is_valid_day, is_valid_environmental_rate, is_valid_price
from ecostay.models.category import PropertyCategory
from ecostay.models.property import Property
from ecostay.models.reservation import Reservation
from ecostay.results import ErrorKind, OperationResult
from ecostay.schemas.property import PropertyCreate, PropertyRename
from ecostay.schemas.reservation import PriceQuote, RateRangeUpdate, ReservationCreate

logger = logging.getLogger(__name__)


def _validation_failure(exc: ValidationError) -> OperationResult:
    """Turn the first pydantic error into a VALIDATION result."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", str(exc))
    return OperationResult.failure(ErrorKind.VALIDATION, f"{location}: {message}" if location else message)


def _property_not_found(index: int) -> OperationResult:
    return OperationResult.failure(ErrorKind.NOT_FOUND, f"No property at index {index}.")


class PropertyRegistry:
    """In-memory collection of all properties."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._properties: list[Property] = []
        self._rng = rng if rng is not None else random.Random(settings.random_seed)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def property_count(self) -> int:
        return len(self._properties)

    def get_property(self, index: int) -> Property | None:
        """Return the property at ``index``, or None for an invalid index."""
        if isinstance(index, int) and 0 <= index < len(self._properties):
            return self._properties[index]
        return None

    def list_properties(self) -> list[Property]:
        return list(self._properties)

    def property_name_exists(self, name: str) -> bool:
        return any(prop.name == name for prop in self._properties)

    # ------------------------------------------------------------------
    # Property CRUD
    # ------------------------------------------------------------------

    def create_property(
        self,
        name: str,
        category: PropertyCategory | None,
        days: list[int],
    ) -> OperationResult:
        """Create a property listing the valid days among ``days``.

        Days outside the calendar are skipped and repeated days are listed
        once. On success the result value is the new property's index.
        """
        try:
            body = PropertyCreate(name=name, category=category, days=days)
        except ValidationError as exc:
            return _validation_failure(exc)

        if self.property_name_exists(body.name):
            return OperationResult.failure(ErrorKind.VALIDATION, f"Property name {body.name!r} already exists.")

        prop = Property(body.name, body.category)
        for day in body.days:
            if is_valid_day(day):
                prop.add_date(day)

        if not prop.listed_days():
            return OperationResult.failure(ErrorKind.VALIDATION, "No valid days to list.")

        self._properties.append(prop)
        index = len(self._properties) - 1
        logger.info(
            "Created property %r (%s) at index %s with %s days",
            prop.name,
            prop.category.value,
            index,
            len(prop.listed_days()),
        )
        return OperationResult.success(index)

    def change_property_name(self, index: int, new_name: str) -> OperationResult:
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)
        try:
            body = PropertyRename(name=new_name)
        except ValidationError as exc:
            return _validation_failure(exc)
        if self.property_name_exists(body.name):
            return OperationResult.failure(ErrorKind.VALIDATION, f"Property name {body.name!r} already exists.")

        old_name = prop.name
        prop.name = body.name
        logger.info("Renamed property %r to %r", old_name, prop.name)
        return OperationResult.success(prop.name)

    def change_property_type(self, index: int, new_category: PropertyCategory | None) -> OperationResult:
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)
        if new_category is None:
            return OperationResult.failure(ErrorKind.VALIDATION, "Category is required.")
        try:
            category = PropertyCategory(new_category)
        except ValueError:
            return OperationResult.failure(ErrorKind.VALIDATION, f"Unknown category {new_category!r}.")

        prop.category = category
        logger.info("Changed category of %r to %s", prop.name, category.value)
        return OperationResult.success(category)

    def remove_property(self, index: int) -> OperationResult:
        """Remove a property that holds no reservations."""
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)
        if prop.has_reservations():
            return OperationResult.failure(
                ErrorKind.CONFLICT,
                f"Property {prop.name!r} has active reservations.",
            )

        del self._properties[index]
        logger.info("Removed property %r", prop.name)
        return OperationResult.success(prop)

    def has_reservations(self, index: int) -> bool:
        prop = self.get_property(index)
        return prop is not None and prop.has_reservations()

    def update_base_price(self, index: int, new_price: float) -> OperationResult:
        """Set the base price of every listed day on a property.

        Refused while the property holds any reservation, so booked stays keep
        the price they were quoted.
        """
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)
        if prop.has_reservations():
            return OperationResult.failure(
                ErrorKind.CONFLICT,
                "Cannot change prices while the property has reservations.",
            )

        result = prop.update_base_price(new_price)
        if result:
            logger.info("Updated base price of %r to %s", prop.name, new_price)
        return result

    # ------------------------------------------------------------------
    # Calendar days
    # ------------------------------------------------------------------

    def add_date(self, index: int, day: int, price: float | None = None) -> OperationResult:
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)
        return prop.add_date(day, price)

    def remove_date(self, index: int, day: int) -> OperationResult:
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)
        return prop.remove_date(day)

    def update_date(
        self,
        index: int,
        day: int,
        price: float | None = None,
        rate: float | None = None,
    ) -> OperationResult:
        """Edit the price and/or environmental rate of one available day.

        Both values are checked before either is applied.
        """
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)
        calendar_day = prop.date_by_day(day)
        if calendar_day is None:
            return OperationResult.failure(ErrorKind.NOT_FOUND, f"Day {day} is not listed.")
        if not calendar_day.is_available():
            return OperationResult.failure(ErrorKind.CONFLICT, f"Day {day} is reserved.")
        if price is not None and not is_valid_price(price):
            return OperationResult.failure(ErrorKind.VALIDATION, f"Price cannot be less than {settings.min_price}.")
        if rate is not None and not is_valid_environmental_rate(rate):
            return OperationResult.failure(
                ErrorKind.VALIDATION,
                f"Environmental rate must be between {settings.environmental_rate_min:.2f} "
                f"and {settings.environmental_rate_max:.2f}.",
            )

        if price is not None:
            calendar_day.set_price(price)
        if rate is not None:
            calendar_day.set_environmental_rate(rate)
        return OperationResult.success(calendar_day)

    def are_dates_available(self, index: int, check_in: int, check_out: int) -> bool:
        prop = self.get_property(index)
        return prop is not None and prop.is_range_available(check_in, check_out)

    # ------------------------------------------------------------------
    # Reservations
    # ------------------------------------------------------------------

    def get_reservations_for_property(self, index: int) -> list[Reservation]:
        """Return a copy of the property's reservations (empty for a bad index)."""
        prop = self.get_property(index)
        if prop is None:
            return []
        return list(prop.reservations)

    def add_reservation(self, index: int, guest: str, check_in: int, check_out: int) -> OperationResult:
        """Book ``[check_in, check_out)`` for ``guest``.

        On success the result value is the stored Reservation. On failure no
        day changes state.
        """
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)
        try:
            body = ReservationCreate(guest_name=guest, check_in=check_in, check_out=check_out)
        except ValidationError as exc:
            return _validation_failure(exc)

        reservation = Reservation(body.guest_name, body.check_in, body.check_out)
        result = prop.add_reservation(reservation)
        if result:
            logger.info(
                "Booked %r on %r for days %s-%s",
                reservation.guest_name,
                prop.name,
                reservation.check_in,
                reservation.check_out,
            )
        return result

    def remove_reservation(self, index: int, reservation_index: int) -> OperationResult:
        """Cancel the reservation at ``reservation_index`` and free its days."""
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)
        reservations = prop.reservations
        if not isinstance(reservation_index, int) or not 0 <= reservation_index < len(reservations):
            return OperationResult.failure(ErrorKind.NOT_FOUND, f"No reservation at index {reservation_index}.")

        result = prop.remove_reservation(reservations[reservation_index])
        if result:
            logger.info("Cancelled reservation of %r on %r", result.value.guest_name, prop.name)
        return result

    def quote_reservation(self, index: int, guest: str, check_in: int, check_out: int) -> OperationResult:
        """Price a prospective stay without booking anything."""
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)
        try:
            body = ReservationCreate(guest_name=guest, check_in=check_in, check_out=check_out)
        except ValidationError as exc:
            return _validation_failure(exc)
        if not prop.is_range_available(body.check_in, body.check_out):
            return OperationResult.failure(
                ErrorKind.CONFLICT,
                "Some of the requested days are not listed or already reserved.",
            )

        reservation = Reservation(body.guest_name, body.check_in, body.check_out)
        return OperationResult.success(_build_quote(prop, reservation))

    def describe_reservation(self, index: int, reservation_index: int) -> OperationResult:
        """Total and nightly prices of a stored reservation."""
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)
        reservations = prop.reservations
        if not isinstance(reservation_index, int) or not 0 <= reservation_index < len(reservations):
            return OperationResult.failure(ErrorKind.NOT_FOUND, f"No reservation at index {reservation_index}.")
        return OperationResult.success(_build_quote(prop, reservations[reservation_index]))

    # ------------------------------------------------------------------
    # Environmental rates
    # ------------------------------------------------------------------

    def set_environmental_rate_for_date(self, index: int, day: int, rate: float) -> OperationResult:
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)
        calendar_day = prop.date_by_day(day) if is_valid_day(day) else None
        if calendar_day is None:
            return OperationResult.failure(ErrorKind.NOT_FOUND, f"Day {day} is not listed.")
        return calendar_day.set_environmental_rate(rate)

    def set_environmental_rate_for_all_dates(self, index: int, rate: float) -> OperationResult:
        """Apply one rate to every listed day. Result value is the number of days updated."""
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)
        if not is_valid_environmental_rate(rate):
            return OperationResult.failure(ErrorKind.VALIDATION, f"Environmental rate {rate} is out of bounds.")

        dates = prop.dates()
        for calendar_day in dates:
            calendar_day.set_environmental_rate(rate)
        logger.info("Set environmental rate %s on all %s days of %r", rate, len(dates), prop.name)
        return OperationResult.success(len(dates))

    def set_environmental_rate_for_range(self, index: int, start: int, end: int, rate: float) -> OperationResult:
        """Apply one rate to the listed days in ``[start, end]`` (inclusive).

        Unlisted days inside the range are skipped. Result value is the number
        of days updated.
        """
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)
        try:
            body = RateRangeUpdate(start=start, end=end, rate=rate)
        except ValidationError as exc:
            return _validation_failure(exc)

        updated = 0
        for day in range(body.start, body.end + 1):
            calendar_day = prop.date_by_day(day)
            if calendar_day is not None:
                calendar_day.set_environmental_rate(body.rate)
                updated += 1
        logger.info(
            "Set environmental rate %s on days %s-%s of %r (%s listed)",
            body.rate,
            body.start,
            body.end,
            prop.name,
            updated,
        )
        return OperationResult.success(updated)

    def randomize_environmental_rates(self, index: int) -> OperationResult:
        """Draw a fresh rate for every listed day, rounded to 2 decimals.

        Result value maps each day number to its new rate.
        """
        prop = self.get_property(index)
        if prop is None:
            return _property_not_found(index)

        low, high = settings.environmental_rate_min, settings.environmental_rate_max
        rates: dict[int, float] = {}
        for calendar_day in prop.dates():
            rate = round(self._rng.uniform(low, high), 2)
            calendar_day.set_environmental_rate(rate)
            rates[calendar_day.day] = rate
            logger.debug("Day %s of %r -> rate %s", calendar_day.day, prop.name, rate)
        logger.info("Randomized environmental rates on %s days of %r", len(rates), prop.name)
        return OperationResult.success(rates)


def _build_quote(prop: Property, reservation: Reservation) -> PriceQuote:
    return PriceQuote(
        property_name=prop.name,
        guest_name=reservation.guest_name,
        check_in=reservation.check_in,
        check_out=reservation.check_out,
        nights=reservation.nights,
        nightly_prices=reservation.nightly_breakdown(prop),
        total_price=reservation.total_price(prop),
    )
