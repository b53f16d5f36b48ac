"""Typed, validated operations applied to selected LEDs."""

from __future__ import annotations

from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field

from .const import MAX_CHANNEL, MAX_TIME_MS


class _Operation(BaseModel):
    """Base for all operations; instances are immutable."""

    model_config = ConfigDict(frozen=True, strict=True)

    # Informational only: the dispatcher logs it but never branches on it.
    mutating: ClassVar[bool] = True


class _TimedOperation(_Operation):
    """Operation carrying an on/off duration pair in milliseconds."""

    on_ms: int = Field(..., ge=0, le=MAX_TIME_MS)
    off_ms: int = Field(..., ge=0, le=MAX_TIME_MS)


class SetPower(_Operation):
    """Switch the LED on or off."""

    on: bool


class SetBlink(_TimedOperation):
    """Blink continuously."""


class SetBreath(_TimedOperation):
    """Breathe (fade in and out) continuously."""


class SetOneshotPulse(_TimedOperation):
    """Arm a single timed pulse; the LED is switched on first."""


class SetColor(_Operation):
    """Set the RGB colour."""

    r: int = Field(..., ge=0, le=MAX_CHANNEL)
    g: int = Field(..., ge=0, le=MAX_CHANNEL)
    b: int = Field(..., ge=0, le=MAX_CHANNEL)


class SetBrightness(_Operation):
    """Set the brightness."""

    value: int = Field(..., ge=0, le=MAX_CHANNEL)


class ReportStatus(_Operation):
    """Print the current status line."""

    mutating: ClassVar[bool] = False


class FirePulse(_Operation):
    """Fire the armed oneshot pulse."""

    mutating: ClassVar[bool] = False


Operation = Union[
    SetPower,
    SetBlink,
    SetBreath,
    SetOneshotPulse,
    SetColor,
    SetBrightness,
    ReportStatus,
    FirePulse,
]
