"""
Timebase conversions for media timestamps.

A timebase is a tick rate of `num / den` ticks per second: `48000/1` for
48 kHz audio frames, `30000/1001` for NTSC video frames, `1000000000/1` for
nanoseconds. Every conversion is a single u64 mul-div, so results are exact
floors and never lose precision to an intermediate overflow.

The functional core is pure; a pipeline that converts a stream of chunk
lengths keeps an `AccumulatorState` and calls `advance`, which rescales the
running total instead of each chunk so rounding never drifts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from ..kernels.python.mul_div64_v1 import (
    U64_MAX,
    RescaleStrategy,
    rescale_div_mod,
    rescale_div_mod_detailed,
)
from .errors import TimebaseError

NSEC_PER_SEC = 1_000_000_000


def _require_positive_u64(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if value <= 0 or value > U64_MAX:
        raise TimebaseError(f"{name} must be in [1, 2**64 - 1]: {value}")


@dataclass(frozen=True)
class Timebase:
    """Tick rate of `num / den` ticks per second."""

    num: int
    den: int = 1

    def __post_init__(self) -> None:
        _require_positive_u64("num", self.num)
        _require_positive_u64("den", self.den)

    @classmethod
    def from_rate(cls, rate: int) -> "Timebase":
        return cls(num=rate, den=1)

    @classmethod
    def parse(cls, text: str) -> "Timebase":
        """Parse `"N"` or `"N/D"`."""
        raw = (text or "").strip()
        num_s, sep, den_s = raw.partition("/")
        try:
            num = int(num_s.strip())
            den = int(den_s.strip()) if sep else 1
        except ValueError:
            raise TimebaseError(f"invalid timebase {text!r}: expected N or N/D") from None
        return cls(num=num, den=den)

    def __str__(self) -> str:
        return str(self.num) if self.den == 1 else f"{self.num}/{self.den}"


NANOSECONDS = Timebase(NSEC_PER_SEC)


def scale_factor(src: Timebase, dst: Timebase) -> tuple[int, int]:
    """Reduced `(mul, div)` converting `src` ticks into `dst` ticks."""
    mul = dst.num * src.den
    div = dst.den * src.num
    g = math.gcd(mul, div)
    mul //= g
    div //= g
    if mul > U64_MAX or div > U64_MAX:
        raise TimebaseError(f"scale factor {src} -> {dst} does not fit in u64 ({mul}/{div})")
    return mul, div


def rescale_ticks(value: int, src: Timebase, dst: Timebase, *, strategy: RescaleStrategy | str | None = None) -> int:
    """Convert `value` ticks of `src` into whole ticks of `dst` (floor)."""
    mul, div = scale_factor(src, dst)
    return rescale_div_mod(value, mul, div, strategy=strategy)


def audio_frames_to_ns(sample_rate: int, frames: int) -> int:
    return rescale_ticks(frames, Timebase(sample_rate), NANOSECONDS)


def ns_to_audio_frames(sample_rate: int, ns: int) -> int:
    return rescale_ticks(ns, NANOSECONDS, Timebase(sample_rate))


def video_frame_interval_ns(fps_num: int, fps_den: int) -> int:
    """Duration of one frame at `fps_num / fps_den` frames per second, in ns."""
    return rescale_ticks(1, Timebase(fps_num, fps_den), NANOSECONDS)


def video_frame_to_ns(frame: int, fps_num: int, fps_den: int) -> int:
    """Presentation time of frame index `frame`, in ns."""
    return rescale_ticks(frame, Timebase(fps_num, fps_den), NANOSECONDS)


def ns_to_video_frame(ns: int, fps_num: int, fps_den: int) -> int:
    """Index of the frame being presented at time `ns`."""
    return rescale_ticks(ns, NANOSECONDS, Timebase(fps_num, fps_den))


@dataclass(frozen=True)
class AccumulatorState:
    src: Timebase
    dst: Timebase
    src_ticks: int = 0
    dst_ticks: int = 0


def init_accumulator(src: Timebase, dst: Timebase) -> AccumulatorState:
    scale_factor(src, dst)
    return AccumulatorState(src=src, dst=dst)


def advance(
    state: AccumulatorState,
    ticks: int,
    *,
    strategy: RescaleStrategy | str | None = None,
) -> tuple[AccumulatorState, int]:
    """
    Add `ticks` source ticks; return the new state and the destination ticks emitted.

    The sum of everything emitted always equals `rescale_ticks(total, src, dst)`.
    """
    if not isinstance(ticks, int) or isinstance(ticks, bool):
        raise TypeError("ticks must be an int")
    if ticks < 0:
        raise TimebaseError(f"ticks must be non-negative: {ticks}")

    total = state.src_ticks + ticks
    if total > U64_MAX:
        raise TimebaseError("accumulated source ticks exceed 2**64 - 1")

    mul, div = scale_factor(state.src, state.dst)
    res = rescale_div_mod_detailed(total, mul, div, strategy=strategy)
    if res.wrapped:
        raise TimebaseError("accumulated destination ticks exceed 2**64 - 1")

    emitted = res.quotient - state.dst_ticks
    if emitted < 0:
        raise AssertionError("internal error: accumulator moved backwards")
    return replace(state, src_ticks=total, dst_ticks=res.quotient), emitted
