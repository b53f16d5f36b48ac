"""UGREEN LED control CLI entrypoint."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import typer
from rich.console import Console
from typing_extensions import Annotated

from .config import configure_logging
from .const import ALL_LEDS, EXIT_FAILURE, EXIT_OK, EXIT_USAGE
from .controller import (
    ControllerFactory,
    load_controller_factories,
    open_controller,
)
from .dispatcher import dispatch
from .exception import (
    CommandValidationError,
    ControllerUnavailableError,
    DeviceOperationError,
)
from .parser import parse_operations
from .registry import led_names
from .selection import resolve_targets, split_selection
from .status import show_leds_info

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)

_LED_CHOICES = ", ".join([*led_names(), ALL_LEDS])

USAGE = f"""\
Usage: ugreen_leds_cli  [LED-NAME...] [-on] [-off] [-(blink|breath|oneshot) T_ON T_OFF]
                    [-color R G B] [-brightness BRIGHTNESS] [-status] [-shot]

       LED_NAME:    separated by white space, possible values are
                    {{ {_LED_CHOICES} }}.
       -on / -off:  turn on / off corresponding LEDs.
       -blink / -breath:  set LED to the blink / breath mode. This
                    mode keeps the LED on for T_ON millseconds and then
                    keeps it off for T_OFF millseconds.
                    T_ON and T_OFF should belong to [0, 65535].
       -oneshot:    turn the LED on and arm a single pulse of T_ON / T_OFF
                    milliseconds, fired by -shot.
       -color:      set the color of corresponding LEDs.
                    R, G and B should belong to [0, 255].
       -brightness: set the brightness of corresponding LEDs.
                    BRIGHTNESS should belong to [0, 255].
       -status:     display the status of corresponding LEDs.
       -shot:       fire the pulse armed by -oneshot.

       A lone "--" is consumed before parsing and has no effect.
"""

CONTROLLER_HINT = """\
Please check that (1) you have the root permission;
              and (2) the i2c-dev module (or the LED kernel module) is loaded."""

app = typer.Typer(add_completion=False)


def show_usage() -> None:
    """Print the usage text to stderr."""
    err_console.print(USAGE, markup=False, highlight=False, soft_wrap=True)


def _error(message: str) -> None:
    err_console.print(
        f"Err: {message}",
        style="red",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def run(
    tokens: Sequence[str],
    factories: Iterable[ControllerFactory] | None = None,
) -> int:
    """Execute one command line and return the process exit code.

    Names and flags are fully validated before any controller is opened.

    Args:
        tokens: Arguments after the program name
        factories: Controller constructors to try; defaults to the
            installed transports

    Returns:
        0 on success, 1 on controller failure, 2 on invalid arguments
    """
    if not tokens:
        show_usage()
        return EXIT_OK

    try:
        names, rest = split_selection(tokens)
        operations = parse_operations(rest)
    except CommandValidationError as exc:
        _error(str(exc))
        show_usage()
        return EXIT_USAGE

    if factories is None:
        factories = load_controller_factories()

    try:
        controller = open_controller(factories)
    except ControllerUnavailableError as exc:
        logger.debug("%s", exc)
        _error("fail to open the LED controller.")
        err_console.print(
            CONTROLLER_HINT, markup=False, highlight=False, soft_wrap=True
        )
        return EXIT_FAILURE

    err_console.print(
        f"Using {controller.get_name()} controller.",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )

    try:
        targets = resolve_targets(names, controller)
        if not operations:
            show_leds_info(controller, targets)
            return EXIT_OK
    except OSError:
        logger.debug("Controller raised while reading status", exc_info=True)
        _error("failed to read LED status!")
        return EXIT_FAILURE

    try:
        dispatch(controller, targets, operations)
    except DeviceOperationError as exc:
        logger.debug("%s", exc)
        _error("failed to change status!")
        return EXIT_FAILURE
    except OSError:
        logger.debug("Controller raised during dispatch", exc_info=True)
        _error("failed to change status!")
        return EXIT_FAILURE

    return EXIT_OK


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
    }
)
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Enable debug logging.")
    ] = False,
) -> None:
    """Control the front-panel LEDs.

    Run without arguments to see the LED names and single-dash flags.
    """
    configure_logging(verbose)
    code = run(list(ctx.args))
    if code != EXIT_OK:
        raise typer.Exit(code)


if __name__ == "__main__":
    app()
