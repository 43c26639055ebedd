"""Exception types for the rescale kernel and the timebase helpers."""

from __future__ import annotations


class RescaleError(Exception):
    """Base class for errors raised by `mediaclock`."""


class DivisionByZeroError(RescaleError, ZeroDivisionError):
    """Raised when a rescale is requested with a zero divisor."""

    def __init__(self, num: int, mul: int) -> None:
        self.num = num
        self.mul = mul
        super().__init__(f"rescale divisor must be non-zero (num={num}, mul={mul})")


class TimebaseError(RescaleError, ValueError):
    """Raised for an invalid timebase or a conversion that leaves the u64 domain."""
