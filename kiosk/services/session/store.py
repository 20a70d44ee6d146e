"""In-memory session store for saved customers and served orders."""
import logging
from typing import List, Optional, Tuple

from kiosk.services.ordering.models import Customer, Order

logger = logging.getLogger(__name__)


class RestaurantState:
    """Saved customers and the running count of orders served.

    Customers are kept in insertion order and never deduplicated; lookups
    return the first exact name match. Nothing outlives the process.
    """

    def __init__(self):
        self._customers: List[Customer] = []
        self._orders_count = 0

    @property
    def customers(self) -> Tuple[Customer, ...]:
        return tuple(self._customers)

    @property
    def orders_count(self) -> int:
        return self._orders_count

    def add_customer(self, name: str, order: Order) -> Customer:
        """Save a customer with a snapshot of their order as the favorite."""
        customer = Customer(name=name, favorite_order=order.snapshot())
        self._customers.append(customer)
        logger.info(
            f"[SESSION STORE] Saved customer '{name}' - "
            f"{len(self._customers)} customers on file"
        )
        return customer

    def get_saved_customer(self, name: str) -> Optional[Customer]:
        """Get the first saved customer with exactly this name."""
        for customer in self._customers:
            if customer.name == name:
                return customer
        logger.debug(f"[SESSION STORE] No saved customer named '{name}'")
        return None

    def increase_orders_count(self) -> None:
        """Count one more served order."""
        self._orders_count += 1
        logger.info(f"[SESSION STORE] Orders served: {self._orders_count}")

    def get_orders_count(self) -> int:
        return self._orders_count
