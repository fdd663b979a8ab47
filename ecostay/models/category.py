"""Property categories and their rate cards — fixed price multipliers."""

from dataclasses import dataclass
from enum import Enum


class PropertyCategory(str, Enum):
    """Closed set of property types a listing can belong to."""

    ECO_APARTMENT = "eco_apartment"
    SUSTAINABLE_HOUSE = "sustainable_house"
    GREEN_RESORT = "green_resort"
    ECO_GLAMPING = "eco_glamping"


@dataclass(frozen=True)
class RateCard:
    """Pricing data attached to a property category."""

    category: PropertyCategory
    display_name: str
    multiplier: float  # applied on top of every day's base price
    choice: int  # menu number used by the presentation layer


RATE_CARDS: dict[PropertyCategory, RateCard] = {
    PropertyCategory.ECO_APARTMENT: RateCard(
        category=PropertyCategory.ECO_APARTMENT,
        display_name="Eco-Apartment",
        multiplier=1.00,
        choice=1,
    ),
    PropertyCategory.SUSTAINABLE_HOUSE: RateCard(
        category=PropertyCategory.SUSTAINABLE_HOUSE,
        display_name="Sustainable House",
        multiplier=1.20,
        choice=2,
    ),
    PropertyCategory.GREEN_RESORT: RateCard(
        category=PropertyCategory.GREEN_RESORT,
        display_name="Green Resort",
        multiplier=1.35,
        choice=3,
    ),
    PropertyCategory.ECO_GLAMPING: RateCard(
        category=PropertyCategory.ECO_GLAMPING,
        display_name="Eco-Glamping",
        multiplier=1.50,
        choice=4,
    ),
}


def get_rate_card(category: PropertyCategory) -> RateCard:
    """Get the rate card for a category."""
    return RATE_CARDS[PropertyCategory(category)]


def category_from_choice(choice: int) -> PropertyCategory | None:
    """Reverse lookup: menu choice (1-4) -> category. Returns None if not found."""
    for card in RATE_CARDS.values():
        if card.choice == choice:
            return card.category
    return None
