"""Tests for the PropertyRegistry facade — properties and reservations."""

import pytest

from ecostay.models.category import PropertyCategory
from ecostay.models.reservation import Reservation
from ecostay.results import ErrorKind
from ecostay.services.registry import PropertyRegistry


class TestCreateProperty:
    """Test property creation rules."""

    def test_returns_index(self, registry: PropertyRegistry):
        first = registry.create_property("A", PropertyCategory.ECO_APARTMENT, [1, 2])
        second = registry.create_property("B", PropertyCategory.GREEN_RESORT, [3])
        assert first.value == 0
        assert second.value == 1
        assert registry.property_count() == 2

    def test_skips_invalid_and_repeated_days(self, registry: PropertyRegistry):
        result = registry.create_property("A", PropertyCategory.ECO_APARTMENT, [0, 1, 1, 15, 31, 30])
        assert result.ok
        assert registry.get_property(result.value).listed_days() == [1, 15, 30]

    def test_duplicate_name_leaves_registry_unchanged(self, registry: PropertyRegistry):
        registry.create_property("A", PropertyCategory.ECO_APARTMENT, [1, 2])
        before = registry.list_properties()

        result = registry.create_property("A", PropertyCategory.ECO_GLAMPING, [5])
        assert not result
        assert result.kind == ErrorKind.VALIDATION
        assert registry.list_properties() == before
        assert registry.get_property(0).category is PropertyCategory.ECO_APARTMENT

    def test_empty_days_rejected(self, registry: PropertyRegistry):
        assert registry.create_property("A", PropertyCategory.ECO_APARTMENT, []).kind == ErrorKind.VALIDATION
        assert registry.property_count() == 0

    def test_missing_category_rejected(self, registry: PropertyRegistry):
        assert registry.create_property("A", None, [1]).kind == ErrorKind.VALIDATION
        assert registry.property_count() == 0

    def test_only_invalid_days_rejected(self, registry: PropertyRegistry):
        result = registry.create_property("A", PropertyCategory.ECO_APARTMENT, [0, 31, 45])
        assert result.kind == ErrorKind.VALIDATION
        assert registry.property_count() == 0

    def test_empty_name_rejected(self, registry: PropertyRegistry):
        assert not registry.create_property("", PropertyCategory.ECO_APARTMENT, [1])

    def test_category_by_value(self, registry: PropertyRegistry):
        result = registry.create_property("A", "eco_glamping", [1])
        assert registry.get_property(result.value).category is PropertyCategory.ECO_GLAMPING


class TestLookup:
    """Test index validation and name checks."""

    def test_invalid_indices_return_none(self, registry, full_property_index):
        assert registry.get_property(full_property_index) is not None
        assert registry.get_property(1) is None
        assert registry.get_property(-1) is None

    def test_property_name_exists_is_exact(self, registry, full_property_index):
        assert registry.property_name_exists("P") is True
        assert registry.property_name_exists("p") is False
        assert registry.property_name_exists("P ") is False

    def test_operations_on_bad_index_are_not_found(self, registry: PropertyRegistry):
        assert registry.add_reservation(0, "Alice", 1, 2).kind == ErrorKind.NOT_FOUND
        assert registry.remove_property(-1).kind == ErrorKind.NOT_FOUND
        assert registry.update_base_price(3, 2000.0).kind == ErrorKind.NOT_FOUND
        assert registry.get_reservations_for_property(0) == []
        assert registry.has_reservations(0) is False
        assert registry.are_dates_available(0, 1, 2) is False


class TestPropertyUpdates:
    """Test renaming, recategorising and price updates."""

    def test_rename(self, registry, full_property_index):
        assert registry.change_property_name(full_property_index, "Q").ok
        assert registry.get_property(full_property_index).name == "Q"

    def test_rename_to_existing_name_rejected(self, registry, full_property_index):
        registry.create_property("Other", PropertyCategory.ECO_APARTMENT, [1])
        result = registry.change_property_name(full_property_index, "Other")
        assert result.kind == ErrorKind.VALIDATION
        assert registry.get_property(full_property_index).name == "P"

    def test_change_type(self, registry, full_property_index):
        assert registry.change_property_type(full_property_index, PropertyCategory.GREEN_RESORT).ok
        assert registry.get_property(full_property_index).category_multiplier == 1.35

    def test_change_type_requires_category(self, registry, full_property_index):
        assert registry.change_property_type(full_property_index, None).kind == ErrorKind.VALIDATION
        assert registry.change_property_type(full_property_index, "castle").kind == ErrorKind.VALIDATION

    def test_update_base_price(self, registry, full_property_index, full_property):
        assert registry.update_base_price(full_property_index, 1800.0).ok
        assert {d.base_price for d in full_property.dates()} == {1800.0}

    def test_update_base_price_refused_with_reservations(self, registry, full_property_index, full_property):
        registry.add_reservation(full_property_index, "Alice", 3, 5)
        result = registry.update_base_price(full_property_index, 1800.0)
        assert result.kind == ErrorKind.CONFLICT
        assert {d.base_price for d in full_property.dates()} == {1500.0}

    def test_update_base_price_invalid(self, registry, full_property_index):
        assert registry.update_base_price(full_property_index, 20.0).kind == ErrorKind.VALIDATION


class TestReservations:
    """Test booking through the registry."""

    def test_scenario_a_booking_and_pricing(self, registry, full_property_index, full_property):
        result = registry.add_reservation(full_property_index, "Alice", 3, 5)
        assert result.ok
        reservation = result.value
        assert reservation == Reservation("Alice", 3, 5)
        assert reservation.total_price(full_property) == pytest.approx(3000.0)
        assert reservation.nightly_breakdown(full_property) == [1500.0, 1500.0]

    def test_scenario_b_overlap_rejected(self, registry, full_property_index, full_property):
        registry.add_reservation(full_property_index, "Alice", 3, 5)

        result = registry.add_reservation(full_property_index, "Bob", 4, 6)
        assert result.kind == ErrorKind.CONFLICT
        available = sorted(d.day for d in full_property.available_dates())
        assert available == [d for d in range(1, 31) if d not in (3, 4)]
        assert registry.get_reservations_for_property(full_property_index) == [Reservation("Alice", 3, 5)]

    def test_scenario_c_unlisted_days(self, registry: PropertyRegistry):
        index = registry.create_property("Partial", PropertyCategory.ECO_APARTMENT, list(range(5, 11))).value

        result = registry.add_reservation(index, "X", 3, 7)
        assert not result
        prop = registry.get_property(index)
        assert prop.date_by_day(5).is_available()
        assert prop.date_by_day(6).is_available()
        assert registry.has_reservations(index) is False

    def test_scenario_e_remove_property_with_reservation(self, registry, full_property_index):
        registry.add_reservation(full_property_index, "Alice", 3, 5)

        result = registry.remove_property(full_property_index)
        assert result.kind == ErrorKind.CONFLICT
        assert registry.property_count() == 1

        assert registry.remove_reservation(full_property_index, 0).ok
        assert registry.remove_property(full_property_index).ok
        assert registry.property_count() == 0

    def test_round_trip_restores_availability(self, registry, full_property_index, full_property):
        registry.add_reservation(full_property_index, "Alice", 10, 15)
        for day in range(10, 15):
            assert full_property.date_by_day(day).is_available() is False

        registry.remove_reservation(full_property_index, 0)
        for day in range(10, 15):
            assert full_property.date_by_day(day).is_available() is True

    @pytest.mark.parametrize(
        "guest, check_in, check_out",
        [
            ("", 3, 5),
            ("Alice", 5, 5),
            ("Alice", 6, 5),
            ("Alice", 0, 5),
            ("Alice", 29, 31),
            ("Alice", 30, 31),
        ],
    )
    def test_invalid_input_rejected(self, registry, full_property_index, full_property, guest, check_in, check_out):
        result = registry.add_reservation(full_property_index, guest, check_in, check_out)
        assert result.kind == ErrorKind.VALIDATION
        assert len(full_property.available_dates()) == 30

    def test_registry_view_matches_property(self, registry, full_property_index, full_property):
        registry.add_reservation(full_property_index, "Alice", 3, 5)
        registry.add_reservation(full_property_index, "Bob", 8, 9)
        registry.add_reservation(full_property_index, "Carol", 4, 6)  # rejected

        assert registry.get_reservations_for_property(full_property_index) == list(full_property.reservations)
        registry.remove_reservation(full_property_index, 0)
        assert registry.get_reservations_for_property(full_property_index) == [Reservation("Bob", 8, 9)]
        assert registry.get_reservations_for_property(full_property_index) == list(full_property.reservations)

    def test_reservation_list_is_a_copy(self, registry, full_property_index):
        registry.add_reservation(full_property_index, "Alice", 3, 5)
        registry.get_reservations_for_property(full_property_index).clear()
        assert registry.has_reservations(full_property_index) is True

    def test_remove_reservation_bad_index(self, registry, full_property_index):
        registry.add_reservation(full_property_index, "Alice", 3, 5)
        assert registry.remove_reservation(full_property_index, 1).kind == ErrorKind.NOT_FOUND
        assert registry.remove_reservation(full_property_index, -1).kind == ErrorKind.NOT_FOUND
        assert registry.has_reservations(full_property_index) is True

    def test_are_dates_available(self, registry, full_property_index):
        registry.add_reservation(full_property_index, "Alice", 3, 5)
        assert registry.are_dates_available(full_property_index, 1, 3) is True
        assert registry.are_dates_available(full_property_index, 4, 6) is False
        assert registry.are_dates_available(full_property_index, 6, 6) is False


class TestQuotes:
    """Test dry-run quotes and reservation descriptions."""

    def test_quote_books_nothing(self, registry, full_property_index, full_property):
        result = registry.quote_reservation(full_property_index, "Alice", 3, 5)
        assert result.ok
        assert result.value.total_price == pytest.approx(3000.0)
        assert result.value.nights == 2
        assert len(full_property.available_dates()) == 30
        assert registry.has_reservations(full_property_index) is False

    def test_quote_on_reserved_range_rejected(self, registry, full_property_index):
        registry.add_reservation(full_property_index, "Alice", 3, 5)
        assert registry.quote_reservation(full_property_index, "Bob", 4, 6).kind == ErrorKind.CONFLICT

    def test_describe_reservation(self, registry, full_property_index):
        registry.change_property_type(full_property_index, PropertyCategory.ECO_GLAMPING)
        registry.add_reservation(full_property_index, "Alice", 3, 5)

        quote = registry.describe_reservation(full_property_index, 0).value
        assert quote.property_name == "P"
        assert quote.guest_name == "Alice"
        assert quote.nightly_prices == pytest.approx([2250.0, 2250.0])
        assert quote.total_price == pytest.approx(4500.0)

    def test_describe_missing_reservation(self, registry, full_property_index):
        assert registry.describe_reservation(full_property_index, 0).kind == ErrorKind.NOT_FOUND
