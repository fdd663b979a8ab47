"""Shared test configuration and fixtures.

Every test gets a fresh in-memory registry, so there is nothing to roll back.
"""

import random

import pytest

from ecostay.models.category import PropertyCategory
from ecostay.models.property import Property
from ecostay.services.registry import PropertyRegistry

# ---------------------------------------------------------------------------
# Registry fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def registry() -> PropertyRegistry:
    """An empty registry with a deterministic random source."""
    return PropertyRegistry(rng=random.Random(1234))


@pytest.fixture
def full_property_index(registry: PropertyRegistry) -> int:
    """Property "P": days 1-30 at 1500, multiplier 1.0, every rate 1.0."""
    result = registry.create_property("P", PropertyCategory.ECO_APARTMENT, list(range(1, 31)))
    assert result.ok
    return result.value


@pytest.fixture
def full_property(registry: PropertyRegistry, full_property_index: int) -> Property:
    return registry.get_property(full_property_index)


# ---------------------------------------------------------------------------
# Standalone property fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def partial_property() -> Property:
    """A property listing only days 5-10."""
    prop = Property("Partial", PropertyCategory.ECO_APARTMENT)
    for day in range(5, 11):
        prop.add_date(day)
    return prop
