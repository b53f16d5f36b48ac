"""Apply parsed operations to selected LEDs.

Operations run target by target, and within a target in command-line
order. The first failed change stops everything; earlier changes are not
undone.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .controller.base import LedController
from .exception import DeviceOperationError
from .operations import (
    FirePulse,
    Operation,
    ReportStatus,
    SetBlink,
    SetBreath,
    SetBrightness,
    SetColor,
    SetOneshotPulse,
    SetPower,
)
from .selection import LedTarget
from .status import show_leds_info

logger = logging.getLogger(__name__)


def apply_operation(
    controller: LedController, target: LedTarget, operation: Operation
) -> int:
    """Issue the controller call(s) for one operation on one LED.

    Returns:
        The controller result code; 0 means success
    """
    led = target.led
    logger.debug(
        "%s: applying %r (mutating=%s)",
        target.name,
        operation,
        operation.mutating,
    )

    if isinstance(operation, SetPower):
        return controller.set_onoff(led, operation.on)
    if isinstance(operation, SetBlink):
        return controller.set_blink(led, operation.on_ms, operation.off_ms)
    if isinstance(operation, SetBreath):
        return controller.set_breath(led, operation.on_ms, operation.off_ms)
    if isinstance(operation, SetOneshotPulse):
        # Best effort: the power-on result is ignored, only the pulse counts.
        controller.set_onoff(led, True)
        return controller.set_oneshot(led, operation.on_ms, operation.off_ms)
    if isinstance(operation, SetColor):
        return controller.set_rgb(led, operation.r, operation.g, operation.b)
    if isinstance(operation, SetBrightness):
        return controller.set_brightness(led, operation.value)
    if isinstance(operation, ReportStatus):
        show_leds_info(controller, [target])
        return 0
    if isinstance(operation, FirePulse):
        controller.shot(led)
        return 0

    raise TypeError(f"Unsupported operation: {operation!r}")


def dispatch(
    controller: LedController,
    targets: Sequence[LedTarget],
    operations: Sequence[Operation],
) -> None:
    """Run every operation against every target, stopping on failure.

    Raises:
        DeviceOperationError: on the first non-zero controller result
    """
    for target in targets:
        for operation in operations:
            result = apply_operation(controller, target, operation)
            if result != 0:
                logger.debug(
                    "%s: %s returned %s; stopping",
                    target.name,
                    type(operation).__name__,
                    result,
                )
                raise DeviceOperationError(target, operation, result)
