"""Order models."""
from typing import List

from pydantic import BaseModel, Field, field_validator

from kiosk.services.menu.catalog import DISHES, TAKEAWAY_FEE, Dish


def _empty_quantities() -> List[int]:
    return [0] * len(DISHES)


class Order(BaseModel):
    """A customer's order: one quantity per catalog dish plus a takeaway flag.

    Quantities are stored by the dish's position in the canonical catalog
    order, so every dish is always present.
    """

    quantities: List[int] = Field(default_factory=_empty_quantities)
    takeaway: bool = False

    @field_validator("quantities")
    @classmethod
    def validate_quantities(cls, v: List[int]) -> List[int]:
        """Require exactly one non-negative quantity per dish."""
        if len(v) != len(DISHES):
            raise ValueError(
                f"Expected {len(DISHES)} quantities, got {len(v)}"
            )
        if any(quantity < 0 for quantity in v):
            raise ValueError("Quantities must be non-negative")
        return v

    def add_dish(self, dish: Dish) -> None:
        """Add one portion of a dish."""
        self.quantities[dish.position] += 1

    def set_takeaway(self) -> None:
        """Mark the order as takeaway."""
        self.takeaway = True

    def dish_count(self, dish: Dish) -> int:
        """Get the ordered quantity of a dish."""
        return self.quantities[dish.position]

    def items_count(self) -> int:
        """Get the number of portions across all dishes."""
        return sum(self.quantities)

    def is_takeaway(self) -> bool:
        return self.takeaway

    def is_empty(self) -> bool:
        return self.items_count() == 0

    def subtotal(self) -> int:
        """Get the food total before any takeaway fee."""
        return sum(
            dish.price * quantity for dish, quantity in zip(DISHES, self.quantities)
        )

    def takeaway_fee(self) -> int:
        """Get the takeaway surcharge, charged per item."""
        if not self.takeaway:
            return 0
        return self.items_count() * TAKEAWAY_FEE

    def total(self) -> int:
        """Get the amount to pay."""
        return self.subtotal() + self.takeaway_fee()

    def snapshot(self) -> "Order":
        """Return an independent copy of this order."""
        return self.model_copy(deep=True)

    def render(self) -> str:
        """Get a one-line summary of the order."""
        counts = ", ".join(
            f"{dish.label}: {self.dish_count(dish)}" for dish in DISHES
        )
        return f"{counts}, takeaway: {str(self.takeaway).lower()}"

    def __str__(self) -> str:
        return self.render()


class Customer(BaseModel):
    """A named customer and the order they saved as their favorite."""

    name: str
    favorite_order: Order
