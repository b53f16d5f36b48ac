"""Resolve leading LED names into the list of targets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .const import ALL_LEDS, FLAG_PREFIX, LedType
from .controller.base import LedController
from .exception import UnknownLedError
from .registry import iter_leds, lookup

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LedTarget:
    """An LED selected on the command line."""

    name: str
    led: LedType


def split_selection(tokens: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split leading LED names from the flags that follow them.

    Names are consumed until the first token starting with ``-``. Each one
    must be ``all`` or a catalogue name.

    Returns:
        The validated names in command-line order and the remaining tokens

    Raises:
        UnknownLedError: for the first name not in the catalogue
    """
    names: list[str] = []
    index = 0
    while index < len(tokens) and not tokens[index].startswith(FLAG_PREFIX):
        name = tokens[index]
        if name != ALL_LEDS and lookup(name) is None:
            raise UnknownLedError(name)
        names.append(name)
        index += 1
    return names, list(tokens[index:])


def resolve_targets(
    names: Sequence[str], controller: LedController
) -> list[LedTarget]:
    """Turn validated names into targets, expanding ``all``.

    ``all`` queries the controller and adds every available LED in
    catalogue order. Repeated names produce repeated targets.
    """
    targets: list[LedTarget] = []
    for name in names:
        if name == ALL_LEDS:
            for led_name, led in iter_leds():
                if controller.get_status(led).is_available:
                    targets.append(LedTarget(led_name, led))
                else:
                    logger.debug("Skipping unavailable LED %s", led_name)
            continue

        led = lookup(name)
        if led is None:
            raise UnknownLedError(name)
        targets.append(LedTarget(name, led))
    return targets
