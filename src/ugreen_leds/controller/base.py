"""Module defining the LED controller interface.

Transports (local socket daemon, direct I2C, kernel module) live in separate
packages and subclass :class:`LedController`. Every call is blocking and
returns an integer result code where 0 means success.
"""

import abc
from abc import ABC
from dataclasses import dataclass
from typing import Callable, ClassVar

from ..const import LedType, OpMode


@dataclass(frozen=True, slots=True)
class LedStatus:
    """Snapshot of one LED as reported by the controller."""

    is_available: bool
    op_mode: OpMode = OpMode.UNKNOWN
    brightness: int = 0
    color_r: int = 0
    color_g: int = 0
    color_b: int = 0
    # Only meaningful in blink and breath modes.
    t_on: int = 0
    t_off: int = 0

    @property
    def color(self) -> tuple[int, int, int]:
        """Return the colour as an (r, g, b) tuple."""
        return (self.color_r, self.color_g, self.color_b)

    @property
    def has_timing(self) -> bool:
        """Return True when the on/off timing applies to the current mode."""
        return self.op_mode in (OpMode.BLINK, OpMode.BREATH)


class LedController(ABC):
    """Base class for LED controller transports."""

    transport_name: ClassVar[str] = "generic"

    def get_name(self) -> str:
        """Return the display name of the transport."""
        return self.transport_name

    @abc.abstractmethod
    def start(self) -> int:
        """Open the transport; return 0 when the controller is usable."""

    @abc.abstractmethod
    def get_status(self, led: LedType) -> LedStatus:
        """Read the current state of ``led``."""

    @abc.abstractmethod
    def set_onoff(self, led: LedType, on: bool) -> int:
        """Switch ``led`` on or off."""

    @abc.abstractmethod
    def set_blink(self, led: LedType, t_on: int, t_off: int) -> int:
        """Blink ``led`` with the given on/off durations in milliseconds."""

    @abc.abstractmethod
    def set_breath(self, led: LedType, t_on: int, t_off: int) -> int:
        """Breathe ``led`` with the given on/off durations in milliseconds."""

    @abc.abstractmethod
    def set_oneshot(self, led: LedType, t_on: int, t_off: int) -> int:
        """Arm a single on/off pulse on ``led``."""

    @abc.abstractmethod
    def set_rgb(self, led: LedType, r: int, g: int, b: int) -> int:
        """Set the colour of ``led``."""

    @abc.abstractmethod
    def set_brightness(self, led: LedType, brightness: int) -> int:
        """Set the brightness of ``led``."""

    @abc.abstractmethod
    def shot(self, led: LedType) -> None:
        """Fire a previously armed pulse on ``led``."""


ControllerFactory = Callable[[], LedController]
