"""Error types raised by the rolling-body engine."""
from __future__ import annotations

from typing import Any


class RollingSimError(Exception):
    """Base class for recoverable engine errors."""


class InvalidParameterError(RollingSimError, ValueError):
    """A numeric input is outside its allowed domain."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}={value!r}: {reason}")


class NonPositiveAccelerationError(RollingSimError, ArithmeticError):
    """The incline produces no downhill acceleration, so travel time is undefined."""

    def __init__(self, acceleration: float) -> None:
        self.acceleration = acceleration
        super().__init__(f"acceleration must be positive, got {acceleration!r}")
