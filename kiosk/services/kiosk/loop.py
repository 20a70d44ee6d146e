"""Kiosk interaction loop."""
import logging
from typing import Optional

from kiosk.core.config import Settings, settings as default_settings
from kiosk.services.kiosk import constants
from kiosk.services.kiosk.console import Console
from kiosk.services.kiosk.stages import KioskStage
from kiosk.services.ordering.models import Order
from kiosk.services.ordering.parser import OrderParser
from kiosk.services.session.store import RestaurantState

logger = logging.getLogger(__name__)


class KioskLoop:
    """Drives customer interactions from name entry to the printed total."""

    def __init__(
        self,
        state: RestaurantState,
        console: Console,
        settings: Optional[Settings] = None,
    ):
        self.state = state
        self.console = console
        self.settings = settings or default_settings
        self.order_parser = OrderParser()
        self.stage = KioskStage.ASK_NAME

    def _transition(self, stage: KioskStage) -> None:
        old_stage = self.stage
        self.stage = stage
        if old_stage != stage:
            logger.debug(
                f"[KIOSK] Stage changed: {old_stage.value} -> {stage.value}"
            )

    def run(self) -> None:
        """Serve customers until someone enters an empty name."""
        logger.info(f"[KIOSK] Open for orders at {self.settings.restaurant_name}")
        while self.run_session():
            pass
        self.console.write(constants.FAREWELL)
        logger.info(
            f"[KIOSK] Closing - {self.state.get_orders_count()} orders served"
        )

    def run_session(self) -> bool:
        """
        Serve one customer.

        Returns:
            False if the customer entered an empty name, True otherwise
        """
        self._transition(KioskStage.ASK_NAME)
        self.console.write(
            constants.WELCOME_PROMPT.format(
                restaurant_name=self.settings.restaurant_name
            )
        )
        name = self.console.read_line()
        if not name:
            self._transition(KioskStage.FAREWELL)
            return False

        customer = self.state.get_saved_customer(name)
        if customer:
            self._transition(KioskStage.KNOWN_CUSTOMER)
            self.console.write(constants.WELCOME_BACK.format(name=customer.name))
            if self.console.yes_no(constants.SAME_AS_USUAL_QUESTION):
                order = customer.favorite_order.snapshot()
            else:
                # Returning customers are not offered to re-save
                order = self.take_order()
        else:
            self._transition(KioskStage.NEW_CUSTOMER)
            self.console.write(constants.WELCOME_NEW.format(name=name))
            order = self.take_order()
            self._transition(KioskStage.CONFIRM)
            if self.console.yes_no(constants.SAVE_ORDER_QUESTION):
                self.state.add_customer(name, order)

        self._transition(KioskStage.REPORT)
        self.report(order)
        return True

    def take_order(self) -> Order:
        """Collect dish names until an empty line, then ask about takeaway."""
        self._transition(KioskStage.ORDER_ENTRY)
        order = Order()
        while True:
            self.console.write(constants.DISH_PROMPT)
            line = self.console.read_line()
            if not line:
                break
            dish = self.order_parser.parse_dish(line)
            if dish is None:
                self.console.write(constants.UNKNOWN_DISH.format(line=line))
                continue
            order.add_dish(dish)

        if self.console.yes_no(constants.TAKEAWAY_QUESTION):
            order.set_takeaway()
        return order

    def report(self, order: Order) -> None:
        """Count and print a placed order, or say it is empty."""
        if order.is_empty():
            self.console.write(constants.EMPTY_ORDER)
            return

        self.state.increase_orders_count()
        self.console.write(
            constants.ORDER_NUMBER.format(number=self.state.get_orders_count())
        )
        self.console.write(
            constants.RECEIPT.format(order=order.render(), total=order.total())
        )
        logger.info(
            f"[KIOSK] Order no. {self.state.get_orders_count()} - "
            f"{order.items_count()} items, total {order.total()}"
        )
