"""Shared test fixtures and configuration."""
import io
from typing import List

import pytest

from kiosk.core.config import Settings
from kiosk.services.kiosk.console import Console
from kiosk.services.kiosk.loop import KioskLoop
from kiosk.services.session.store import RestaurantState


@pytest.fixture
def test_settings():
    """Settings independent of the surrounding environment."""
    return Settings(restaurant_name="Van Binh", log_level="WARNING")


@pytest.fixture
def restaurant_state():
    """Fresh, empty session store."""
    return RestaurantState()


class KioskRun:
    """Captured result of feeding scripted input to the kiosk."""

    def __init__(self, output: str, state: RestaurantState):
        self.output = output
        self.state = state

    @property
    def lines(self) -> List[str]:
        return self.output.splitlines()


@pytest.fixture
def run_kiosk(restaurant_state, test_settings):
    """Run the kiosk loop over the given input lines and capture its output."""
    def _run(*lines: str) -> KioskRun:
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        kiosk = KioskLoop(restaurant_state, Console(stdin, stdout), test_settings)
        kiosk.run()
        return KioskRun(stdout.getvalue(), restaurant_state)
    return _run
