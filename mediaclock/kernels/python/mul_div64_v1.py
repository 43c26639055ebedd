"""
Unsigned 64-bit mul-div kernel (v1 semantics).

Computes `floor(num * mul / div)` for u64 operands as if the product were
evaluated in unbounded precision, then reduces the quotient modulo 2**64.
This is the primitive used to move timestamps and durations between clock
bases (audio frames, video frames, nanoseconds).

Strategies (observably identical):
- `decompose`: split `num` against `div` first,
  `(num // div) * mul + ((num % div) * mul) // div`.
  The second term is evaluated with a 128-bit intermediate.
- `wide128`: full 128-bit product, then one 128-by-64 division.

`mul_div64_native_u64` keeps the unwidened formula in which `rem * mul` is
itself reduced modulo 2**64, as fixed-width hardware evaluates it. It is not a
strategy: for operands with `rem * mul >= 2**64` it returns a wrapped value.

Results that do not fit in 64 bits wrap modulo 2**64 (same convention as
native unsigned arithmetic). Extreme scale factors can therefore wrap a
timestamp; `rescale_div_mod_detailed` reports it via `wrapped`.

Semantics are described in `mediaclock/kernels/spec/mul_div64_v1.yaml`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, unique

from ...core.errors import DivisionByZeroError

logger = logging.getLogger(__name__)

U64_BITS = 64
U64_MAX = (1 << U64_BITS) - 1
U128_MAX = (1 << (2 * U64_BITS)) - 1


@unique
class RescaleStrategy(Enum):
    DECOMPOSE = "decompose"
    WIDE128 = "wide128"


@dataclass(frozen=True)
class MulDivResult:
    quotient: int
    remainder: int
    wrapped: bool
    strategy: RescaleStrategy


def _require_u64(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if value < 0 or value > U64_MAX:
        raise ValueError(f"{name} must be in [0, 2**64 - 1]: {value}")


def _require_operands(num: int, mul: int, div: int) -> None:
    _require_u64("num", num)
    _require_u64("mul", mul)
    _require_u64("div", div)
    if div == 0:
        raise DivisionByZeroError(num, mul)


def _decompose(num: int, mul: int, div: int) -> tuple[int, int, bool]:
    q, rem = divmod(num, div)
    wide = rem * mul
    if wide > U128_MAX:
        raise AssertionError("internal error: rem*mul exceeds 128 bits")
    tail, remainder = divmod(wide, div)
    head = q * mul
    return (head + tail) & U64_MAX, remainder, head + tail > U64_MAX


def _wide128(num: int, mul: int, div: int) -> tuple[int, int, bool]:
    product = num * mul
    if product > U128_MAX:
        raise AssertionError("internal error: num*mul exceeds 128 bits")
    full, remainder = divmod(product, div)
    return full & U64_MAX, remainder, full > U64_MAX


def mul_div64_decompose(num: int, mul: int, div: int) -> int:
    """
    Reference strategy: decompose `num` against `div` before multiplying.

    `num = q*div + rem`, so `num*mul/div = q*mul + rem*mul/div` and only the
    second term needs a product wider than 64 bits (`rem*mul < div*mul < 2**128`).
    """
    _require_operands(num, mul, div)
    return _decompose(num, mul, div)[0]


def mul_div64_wide128(num: int, mul: int, div: int) -> int:
    """Fast strategy: one 128-bit product divided by a 64-bit divisor."""
    _require_operands(num, mul, div)
    return _wide128(num, mul, div)[0]


def mul_div64_native_u64(num: int, mul: int, div: int) -> int:
    """
    Decomposition with every intermediate reduced modulo 2**64.

    Matches a plain u64 implementation bit for bit, including its residual
    wrap of `rem * mul` when both factors are large.
    """
    _require_operands(num, mul, div)

    rem = num % div
    head = ((num // div) * mul) & U64_MAX
    tail = ((rem * mul) & U64_MAX) // div
    return (head + tail) & U64_MAX


def native_u64_is_exact(num: int, mul: int, div: int) -> bool:
    """True when the unwidened u64 formula yields the exact (wrapped) quotient."""
    _require_operands(num, mul, div)
    return (num % div) * mul <= U64_MAX


_KERNELS = {
    RescaleStrategy.DECOMPOSE: _decompose,
    RescaleStrategy.WIDE128: _wide128,
}


def _resolve_strategy(strategy: RescaleStrategy | str | None) -> RescaleStrategy:
    if strategy is None:
        from ...config import default_config

        return default_config().strategy
    if isinstance(strategy, RescaleStrategy):
        return strategy
    if isinstance(strategy, str):
        return RescaleStrategy(strategy.strip().lower())
    raise TypeError("strategy must be a RescaleStrategy, a strategy name, or None")


def rescale_div_mod(num: int, mul: int, div: int, *, strategy: RescaleStrategy | str | None = None) -> int:
    """
    Return `floor(num * mul / div)` modulo 2**64 for u64 operands.

    Raises `DivisionByZeroError` when `div == 0`.
    """
    kernel = _KERNELS[_resolve_strategy(strategy)]
    _require_operands(num, mul, div)
    return kernel(num, mul, div)[0]


def rescale_div_mod_detailed(
    num: int,
    mul: int,
    div: int,
    *,
    strategy: RescaleStrategy | str | None = None,
) -> MulDivResult:
    """
    Like `rescale_div_mod`, also returning the exact remainder and a wrap flag.

    `remainder` is `(num * mul) mod div`; callers carrying it between steps can
    rescale a running total without accumulating rounding error. All three
    fields come out of the selected strategy's single division.
    """
    resolved = _resolve_strategy(strategy)
    _require_operands(num, mul, div)
    quotient, remainder, wrapped = _KERNELS[resolved](num, mul, div)
    if wrapped:
        logger.debug("rescale result wrapped modulo 2**64 (num=%d, mul=%d, div=%d)", num, mul, div)
    return MulDivResult(quotient=quotient, remainder=remainder, wrapped=wrapped, strategy=resolved)
