"""Fixed dish catalog."""
from enum import Enum
from typing import Dict, Tuple


class Dish(str, Enum):
    """Dishes on the menu, in canonical order (chicken, tofu, rice)."""

    THAI_CHICKEN = "thai_chicken"
    TOFU = "tofu"
    FRIED_RICE = "fried_rice"

    def __str__(self) -> str:
        """Return the string value of the dish."""
        return self.value

    @property
    def price(self) -> int:
        """Unit price of the dish."""
        return DISH_PRICES[self]

    @property
    def label(self) -> str:
        """Short name used when rendering an order."""
        return DISH_LABELS[self]

    @property
    def position(self) -> int:
        """Position of the dish in the canonical order."""
        return DISHES.index(self)


DISHES: Tuple[Dish, ...] = tuple(Dish)

DISH_PRICES: Dict[Dish, int] = {
    Dish.THAI_CHICKEN: 20,
    Dish.TOFU: 15,
    Dish.FRIED_RICE: 12,
}

DISH_LABELS: Dict[Dish, str] = {
    Dish.THAI_CHICKEN: "chicken",
    Dish.TOFU: "tofu",
    Dish.FRIED_RICE: "rice",
}

# Checked in this order, first match wins
DISH_KEYWORDS: Tuple[Tuple[str, Dish], ...] = (
    ("chicken", Dish.THAI_CHICKEN),
    ("tofu", Dish.TOFU),
    ("rice", Dish.FRIED_RICE),
)

# Charged per item, not per order
TAKEAWAY_FEE = 1


def price(dish: Dish) -> int:
    """Look up the unit price of a dish."""
    return DISH_PRICES[dish]
