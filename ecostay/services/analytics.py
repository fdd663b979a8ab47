"""Occupancy and earnings analytics over the registry."""

import logging

from ecostay.models.property import Property
from ecostay.schemas.analytics import OccupancyReport, OccupancySummary
from ecostay.services.registry import PropertyRegistry

logger = logging.getLogger(__name__)


def _occupancy_rate(booked_days: int, listed_days: int) -> float:
    """Booked share of listed days as a percentage with 2 decimals."""
    if listed_days <= 0:
        return 0.0
    return round(booked_days / listed_days * 100, 2)


def _build_report(prop: Property) -> OccupancyReport:
    listed = len(prop.listed_days())
    available = len(prop.available_dates())
    booked = listed - available
    return OccupancyReport(
        property_name=prop.name,
        category=prop.category_display_name,
        category_multiplier=prop.category_multiplier,
        listed_days=listed,
        booked_days=booked,
        available_days=available,
        occupancy_rate=_occupancy_rate(booked, listed),
        reservation_count=len(prop.reservations),
        estimated_earnings=prop.estimated_earnings(),
    )


def occupancy_report(registry: PropertyRegistry, index: int) -> OccupancyReport | None:
    """Occupancy statistics for one property, or None for an invalid index."""
    prop = registry.get_property(index)
    if prop is None:
        return None
    return _build_report(prop)


def occupancy_summary(registry: PropertyRegistry) -> OccupancySummary:
    """Per-property reports plus overall occupancy and earnings.

    The overall rate is weighted by listed days, so a 30-day property counts
    more than a 5-day one.
    """
    reports = [_build_report(prop) for prop in registry.list_properties()]
    total_listed = sum(report.listed_days for report in reports)
    total_booked = sum(report.booked_days for report in reports)
    summary = OccupancySummary(
        properties=reports,
        overall_occupancy_rate=_occupancy_rate(total_booked, total_listed),
        total_estimated_earnings=sum(report.estimated_earnings for report in reports),
    )
    logger.debug(
        "Occupancy summary: %s properties, %s/%s days booked",
        len(reports),
        total_booked,
        total_listed,
    )
    return summary
