"""Seed a registry with the sample eco-stay properties.

Everything goes through the registry's public operations, so the seeded state
obeys the same invariants as anything a user creates.

Run from the repository root:
    python -m scripts.seed_data
"""

import logging
import sys
from pathlib import Path

# Add repository root to path so imports work when run as a script
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from ecostay.config import settings
from ecostay.models.category import PropertyCategory
from ecostay.services.analytics import occupancy_summary
from ecostay.services.registry import PropertyRegistry

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Seed data definitions
# ---------------------------------------------------------------------------

PROPERTIES = [
    {
        "name": "Grand Residences",
        "category": PropertyCategory.ECO_APARTMENT,
        "days": list(range(1, 31)),
    },
    {
        "name": "Arasaka Tower",
        "category": PropertyCategory.SUSTAINABLE_HOUSE,
        "days": list(range(1, 16)) + list(range(21, 26)),
    },
    {
        "name": "Bolinao Reservations",
        "category": PropertyCategory.GREEN_RESORT,
        "days": list(range(10, 21)),
    },
    {
        "name": "Sunset Retreat",
        "category": PropertyCategory.ECO_GLAMPING,
        "days": list(range(5, 26)),
    },
    {
        "name": "Mountain Edge",
        "category": PropertyCategory.SUSTAINABLE_HOUSE,
        "days": list(range(1, 11)) + list(range(18, 29)),
    },
]

# (property name, guest, check-in, check-out)
RESERVATIONS = [
    ("Grand Residences", "Paolo", 2, 4),
    ("Grand Residences", "Ammiel", 5, 9),
    ("Arasaka Tower", "Johnny SilverHand", 11, 13),
    ("Bolinao Reservations", "Adam Smasher", 15, 20),
    ("Sunset Retreat", "Han Helldiver", 7, 14),
    ("Mountain Edge", "Master Chief", 1, 3),
    ("Mountain Edge", "Fireful FlyShine", 19, 24),
]

# (property name, first day, last day, rate); ranges are inclusive
ENVIRONMENTAL_RATES = [
    ("Grand Residences", 1, 10, 0.90),
    ("Grand Residences", 11, 20, 1.10),
    ("Arasaka Tower", 1, 15, 1.00),
    ("Arasaka Tower", 21, 25, 0.85),
    ("Bolinao Reservations", 10, 15, 1.20),
    ("Bolinao Reservations", 16, 20, 0.80),
    ("Sunset Retreat", 5, 15, 0.95),
    ("Sunset Retreat", 16, 25, 1.05),
    ("Mountain Edge", 1, 10, 0.88),
    ("Mountain Edge", 18, 28, 1.15),
]


def seed_registry(registry: PropertyRegistry | None = None) -> PropertyRegistry:
    """Populate ``registry`` (or a fresh one) with the sample data and return it."""
    if registry is None:
        registry = PropertyRegistry()

    indices: dict[str, int] = {}
    for sample in PROPERTIES:
        result = registry.create_property(sample["name"], sample["category"], sample["days"])
        if not result:
            logger.warning("Skipped sample property %r: %s", sample["name"], result.error)
            continue
        indices[sample["name"]] = result.value

    for name, guest, check_in, check_out in RESERVATIONS:
        if name not in indices:
            continue
        result = registry.add_reservation(indices[name], guest, check_in, check_out)
        if not result:
            logger.warning("Skipped sample reservation for %r on %r: %s", guest, name, result.error)

    for name, start, end, rate in ENVIRONMENTAL_RATES:
        if name in indices:
            registry.set_environmental_rate_for_range(indices[name], start, end, rate)

    return registry


def main() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    registry = seed_registry()
    summary = occupancy_summary(registry)

    print()
    print("=" * 60)
    print("📊 Seed Summary")
    print("=" * 60)
    for report in summary.properties:
        print(
            f"   🏠 {report.property_name} — {report.category} "
            f"({report.booked_days}/{report.listed_days} days booked, "
            f"earnings {report.estimated_earnings:.2f})"
        )
    print(f"   Properties:    {registry.property_count()}")
    print(f"   Reservations:  {sum(report.reservation_count for report in summary.properties)}")
    print(f"   Occupancy:     {summary.overall_occupancy_rate:.2f}%")
    print("=" * 60)


if __name__ == "__main__":
    main()
