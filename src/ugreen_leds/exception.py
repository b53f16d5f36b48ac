"""Exceptions module."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .operations import Operation
    from .selection import LedTarget


class CommandValidationError(Exception):
    """Raised when command-line tokens do not form a valid command."""


class UnknownLedError(CommandValidationError):
    """Raised when a leading token is not a known LED name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown LED name {name}")
        self.name = name


class UnknownParameterError(CommandValidationError):
    """Raised when a flag is not recognised."""

    def __init__(self, token: str) -> None:
        super().__init__(f"unknown parameter {token}")
        self.token = token


class MissingOperandError(CommandValidationError):
    """Raised when a flag is not followed by enough operands."""

    def __init__(self, flag: str, arity: int) -> None:
        noun = "parameter" if arity == 1 else "parameters"
        super().__init__(f"{flag} requires {arity} {noun}")
        self.flag = flag
        self.arity = arity


class InvalidOperandError(CommandValidationError):
    """Raised when an operand is not an integer or is out of range."""

    def __init__(self, token: str, message: str) -> None:
        super().__init__(message)
        self.token = token


class ControllerUnavailableError(Exception):
    """Raised when no LED controller transport could be started."""


class DeviceOperationError(Exception):
    """Raised when the controller reports a failed change."""

    def __init__(
        self, target: LedTarget, operation: Operation, result: int
    ) -> None:
        super().__init__(
            f"{type(operation).__name__} failed on {target.name} "
            f"(result {result})"
        )
        self.target = target
        self.operation = operation
        self.result = result
