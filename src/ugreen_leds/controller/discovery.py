"""Locate and start an LED controller.

Transport packages register a zero-argument constructor under the
``ugreen_leds.controllers`` entry-point group, for example::

    [project.entry-points."ugreen_leds.controllers"]
    i2c = "ugreen_leds_i2c:I2CController"

Constructors are tried in priority order and the first controller whose
``start()`` returns 0 is used for the rest of the run.
"""

from __future__ import annotations

import logging
from importlib import metadata
from typing import Iterable

from ..config import get_preferred_controller
from ..const import CONTROLLER_ENTRY_POINT_GROUP, TRANSPORT_PRIORITY
from ..exception import ControllerUnavailableError
from .base import ControllerFactory, LedController

logger = logging.getLogger(__name__)


def _priority_key(name: str) -> tuple[int, str]:
    try:
        return (TRANSPORT_PRIORITY.index(name), name)
    except ValueError:
        return (len(TRANSPORT_PRIORITY), name)


def iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=CONTROLLER_ENTRY_POINT_GROUP)


def load_controller_factories(
    preferred: str | None = None,
) -> list[ControllerFactory]:
    """Load registered controller constructors in priority order.

    Args:
        preferred: Only load the transport with this entry-point name.
            Defaults to ``UGREEN_LEDS_CONTROLLER`` when unset.

    Returns:
        Constructors, most specific transport first
    """
    if preferred is None:
        preferred = get_preferred_controller()

    entry_points = sorted(
        iter_entry_points(), key=lambda ep: _priority_key(ep.name)
    )
    if preferred is not None:
        entry_points = [ep for ep in entry_points if ep.name == preferred]
        if not entry_points:
            logger.warning(
                "No controller transport named '%s' is installed", preferred
            )

    factories: list[ControllerFactory] = []
    for entry_point in entry_points:
        logger.debug(
            "Loading controller transport %s (%s)",
            entry_point.name,
            entry_point.value,
        )
        try:
            factories.append(entry_point.load())
        except (ImportError, AttributeError):
            logger.debug(
                "Controller transport %s failed to load",
                entry_point.name,
                exc_info=True,
            )
    return factories


def open_controller(
    factories: Iterable[ControllerFactory],
) -> LedController:
    """Return the first controller that starts successfully.

    Raises:
        ControllerUnavailableError: if no constructor yields a started
            controller
    """
    attempted = 0
    for factory in factories:
        attempted += 1
        try:
            controller = factory()
            result = controller.start()
        except OSError:
            logger.debug(
                "Controller %r failed to start", factory, exc_info=True
            )
            continue
        if result == 0:
            logger.debug("Using controller %s", controller.get_name())
            return controller
        logger.debug(
            "Controller %s failed to start (result %s)",
            controller.get_name(),
            result,
        )

    raise ControllerUnavailableError(
        f"no LED controller could be started ({attempted} transport(s) tried)"
    )
