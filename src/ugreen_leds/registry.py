"""Fixed catalogue of LED names understood on the command line."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping

from .const import LedType

# Kept in lexicographic order; ``all`` expands in this order.
LED_NAME_MAP: Mapping[str, LedType] = MappingProxyType(
    dict(
        sorted(
            {
                "power": LedType.POWER,
                "netdev": LedType.NETDEV,
                "disk1": LedType.DISK1,
                "disk2": LedType.DISK2,
                "disk3": LedType.DISK3,
                "disk4": LedType.DISK4,
                "disk5": LedType.DISK5,
                "disk6": LedType.DISK6,
                "disk7": LedType.DISK7,
                "disk8": LedType.DISK8,
            }.items()
        )
    )
)


def lookup(name: str) -> LedType | None:
    """Return the LED registered under ``name``, or None."""
    return LED_NAME_MAP.get(name)


def iter_leds() -> Iterator[tuple[str, LedType]]:
    """Yield every (name, LED) pair in catalogue order."""
    yield from LED_NAME_MAP.items()


def led_names() -> list[str]:
    """Return the catalogue names in order."""
    return list(LED_NAME_MAP)
