"""Turn flag tokens into an ordered list of operations.

Each flag produces exactly one operation; repeated flags are kept in the
order given. All operands are checked here, so nothing reaching the
dispatcher can be out of range.
"""

from __future__ import annotations

import logging
import re
from collections import deque
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from .const import MAX_CHANNEL, MAX_TIME_MS
from .exception import (
    InvalidOperandError,
    MissingOperandError,
    UnknownParameterError,
)
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

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class FlagRule:
    """How many integer operands a flag takes and what it builds."""

    arity: int
    high: int
    build: Callable[..., Operation]


FLAG_RULES: Mapping[str, FlagRule] = MappingProxyType(
    {
        "-on": FlagRule(0, 0, lambda: SetPower(on=True)),
        "-off": FlagRule(0, 0, lambda: SetPower(on=False)),
        "-blink": FlagRule(
            2,
            MAX_TIME_MS,
            lambda t_on, t_off: SetBlink(on_ms=t_on, off_ms=t_off),
        ),
        "-breath": FlagRule(
            2,
            MAX_TIME_MS,
            lambda t_on, t_off: SetBreath(on_ms=t_on, off_ms=t_off),
        ),
        "-oneshot": FlagRule(
            2,
            MAX_TIME_MS,
            lambda t_on, t_off: SetOneshotPulse(on_ms=t_on, off_ms=t_off),
        ),
        "-color": FlagRule(
            3, MAX_CHANNEL, lambda r, g, b: SetColor(r=r, g=g, b=b)
        ),
        "-brightness": FlagRule(
            1, MAX_CHANNEL, lambda value: SetBrightness(value=value)
        ),
        "-status": FlagRule(0, 0, ReportStatus),
        "-shot": FlagRule(0, 0, FirePulse),
    }
)


def parse_integer(token: str, low: int = 0, high: int = MAX_TIME_MS) -> int:
    """Parse a whole-token decimal integer within ``[low, high]``.

    Raises:
        InvalidOperandError: if the token has anything besides an optional
            sign and digits, or the value is out of range
    """
    if not _INTEGER_RE.fullmatch(token):
        raise InvalidOperandError(token, f"{token} is not an integer.")

    out_of_range = InvalidOperandError(
        token, f"{token} is not in [{low}, {high}]"
    )
    try:
        value = int(token)
    except ValueError as exc:
        # Digit runs past the interpreter's int conversion limit.
        raise out_of_range from exc
    if value < low or value > high:
        raise out_of_range
    return value


def parse_operations(tokens: Iterable[str]) -> list[Operation]:
    """Parse flag tokens left to right into operations.

    Raises:
        UnknownParameterError: for a token that is not a known flag
        MissingOperandError: when a flag has too few operands left
        InvalidOperandError: for a malformed or out-of-range operand
    """
    args = deque(tokens)
    operations: list[Operation] = []

    while args:
        flag = args.popleft()
        rule = FLAG_RULES.get(flag)
        if rule is None:
            raise UnknownParameterError(flag)

        if len(args) < rule.arity:
            raise MissingOperandError(flag, rule.arity)

        values = [
            parse_integer(args.popleft(), 0, rule.high)
            for _ in range(rule.arity)
        ]
        operation = rule.build(*values)
        logger.debug("Parsed %s -> %r", flag, operation)
        operations.append(operation)

    return operations
