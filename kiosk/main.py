"""Kiosk entry point."""
import logging
import sys

from kiosk.core.config import settings
from kiosk.core.logging import setup_logging
from kiosk.services.kiosk.console import Console, InputClosedError
from kiosk.services.kiosk.loop import KioskLoop
from kiosk.services.session.store import RestaurantState

logger = logging.getLogger(__name__)


def main() -> int:
    """Run the ordering kiosk on the terminal."""
    setup_logging()
    kiosk = KioskLoop(RestaurantState(), Console(), settings)
    try:
        kiosk.run()
    except InputClosedError as e:
        logger.error(f"[KIOSK] Aborting - {e}")
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
