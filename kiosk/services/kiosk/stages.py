"""Kiosk interaction stage enumeration."""
from enum import Enum


class KioskStage(str, Enum):
    """Stages of one customer interaction."""

    ASK_NAME = "ask_name"  # Waiting for a name, empty line leaves
    KNOWN_CUSTOMER = "known_customer"  # Name matched a saved customer
    NEW_CUSTOMER = "new_customer"  # Name not on file
    ORDER_ENTRY = "order_entry"  # Collecting dish names and takeaway choice
    CONFIRM = "confirm"  # Offering to save a new customer's order
    REPORT = "report"  # Printing the order number and total
    FAREWELL = "farewell"  # Program is about to exit

    def __str__(self) -> str:
        """Return the string value of the stage."""
        return self.value
