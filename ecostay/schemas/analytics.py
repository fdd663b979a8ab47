"""Pydantic v2 schemas for occupancy and earnings reports."""

from pydantic import BaseModel


class OccupancyReport(BaseModel):
    """Occupancy statistics for a single property over its calendar."""

    property_name: str
    category: str
    category_multiplier: float
    listed_days: int
    booked_days: int
    available_days: int
    occupancy_rate: float  # percentage 0.00–100.00
    reservation_count: int
    estimated_earnings: float


class OccupancySummary(BaseModel):
    """Aggregated occupancy statistics across all properties."""

    properties: list[OccupancyReport]
    overall_occupancy_rate: float
    total_estimated_earnings: float
