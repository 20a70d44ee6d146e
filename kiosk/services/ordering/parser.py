"""Dish name parsing."""
import logging
from typing import Optional

from kiosk.services.menu.catalog import DISH_KEYWORDS, Dish

logger = logging.getLogger(__name__)


class OrderParser:
    """Resolves free-text dish names against the catalog keywords."""

    def __init__(self, keywords=DISH_KEYWORDS):
        self.keywords = keywords

    def parse_dish(self, text: str) -> Optional[Dish]:
        """
        Find the dish a line of text refers to.

        Matching is a case-sensitive substring check against each keyword
        in turn; the first keyword found wins.

        Returns:
            The matching Dish, or None if no keyword occurs in the text
        """
        for keyword, dish in self.keywords:
            if keyword in text:
                logger.debug(f"[PARSER] '{text}' matched '{keyword}' -> {dish}")
                return dish
        logger.debug(f"[PARSER] No dish keyword in '{text}'")
        return None
