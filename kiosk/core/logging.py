"""Logging configuration."""
import logging
import sys
from typing import Optional

from kiosk.core.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure application logging.

    Diagnostics go to stderr; stdout belongs to the customer conversation.
    """
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )
