"""Shared fixtures: an in-memory controller that records every call."""

from __future__ import annotations

import pytest

from ugreen_leds.const import LedType, OpMode
from ugreen_leds.controller.base import LedController, LedStatus

READ_CALLS = {"start", "get_status"}


class FakeController(LedController):
    """Controller double recording calls and returning scripted results."""

    transport_name = "fake"

    def __init__(
        self,
        statuses: dict[LedType, LedStatus] | None = None,
        failures: dict[tuple[str, LedType], int] | None = None,
        start_result: int = 0,
    ) -> None:
        super().__init__()
        self.statuses = statuses or {}
        self.failures = failures or {}
        self.start_result = start_result
        self.calls: list[tuple] = []

    def _record(self, method: str, led: LedType, *args) -> int:
        self.calls.append((method, led, *args))
        return self.failures.get((method, led), 0)

    @property
    def write_calls(self) -> list[tuple]:
        """Calls other than start() and get_status()."""
        return [call for call in self.calls if call[0] not in READ_CALLS]

    def start(self) -> int:
        self.calls.append(("start",))
        return self.start_result

    def get_status(self, led: LedType) -> LedStatus:
        self.calls.append(("get_status", led))
        return self.statuses.get(
            led, LedStatus(is_available=True, op_mode=OpMode.OFF)
        )

    def set_onoff(self, led: LedType, on: bool) -> int:
        return self._record("set_onoff", led, on)

    def set_blink(self, led: LedType, t_on: int, t_off: int) -> int:
        return self._record("set_blink", led, t_on, t_off)

    def set_breath(self, led: LedType, t_on: int, t_off: int) -> int:
        return self._record("set_breath", led, t_on, t_off)

    def set_oneshot(self, led: LedType, t_on: int, t_off: int) -> int:
        return self._record("set_oneshot", led, t_on, t_off)

    def set_rgb(self, led: LedType, r: int, g: int, b: int) -> int:
        return self._record("set_rgb", led, r, g, b)

    def set_brightness(self, led: LedType, brightness: int) -> int:
        return self._record("set_brightness", led, brightness)

    def shot(self, led: LedType) -> None:
        self._record("shot", led)


@pytest.fixture
def controller() -> FakeController:
    """Return a started controller where every LED is available."""
    return FakeController()


@pytest.fixture
def make_controller():
    """Return the FakeController class for tests needing custom behaviour."""
    return FakeController
