"""Identifiers, bounds and exit codes shared across the package."""

from enum import Enum

CONTROLLER_ENTRY_POINT_GROUP = "ugreen_leds.controllers"

# Transports tried first, most specific first; others follow alphabetically.
TRANSPORT_PRIORITY = ("socket", "i2c", "kmod")

ALL_LEDS = "all"
FLAG_PREFIX = "-"

MAX_TIME_MS = 0xFFFF
MAX_CHANNEL = 0xFF

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class LedType(Enum):
    """Indicator LEDs addressable on the appliance front panel."""

    POWER = 0
    NETDEV = 1
    DISK1 = 2
    DISK2 = 3
    DISK3 = 4
    DISK4 = 5
    DISK5 = 6
    DISK6 = 7
    DISK7 = 8
    DISK8 = 9


class OpMode(Enum):
    """Operating mode reported by the controller for one LED."""

    OFF = "off"
    ON = "on"
    BLINK = "blink"
    BREATH = "breath"
    UNKNOWN = "unknown"
