"""Human-readable status lines."""

from __future__ import annotations

from typing import Iterable

import typer

from .controller.base import LedController, LedStatus
from .selection import LedTarget


def format_status(name: str, status: LedStatus) -> str:
    """Render one status line for ``name``."""
    if not status.is_available:
        return f"{name}: unavailable or non-existent"

    r, g, b = status.color
    line = (
        f"{name}: status = {status.op_mode.value}, "
        f"brightness = {status.brightness}, "
        f"color = RGB({r}, {g}, {b})"
    )
    if status.has_timing:
        line += f", blink_on = {status.t_on} ms, blink_off = {status.t_off} ms"
    return line


def show_leds_info(
    controller: LedController, targets: Iterable[LedTarget]
) -> None:
    """Query each target and print its status line to stdout."""
    for target in targets:
        status = controller.get_status(target.led)
        typer.echo(format_status(target.name, status))
