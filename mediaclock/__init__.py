"""
mediaclock: exact u64 rescaling for media timestamps.

Public API:
- `rescale_div_mod(num, mul, div) -> int`
- `rescale_div_mod_detailed(num, mul, div) -> MulDivResult`
- timebase helpers (`Timebase`, `rescale_ticks`, audio/video conversions)
"""

from .core import (
    NSEC_PER_SEC,
    AccumulatorState,
    DivisionByZeroError,
    RescaleError,
    Timebase,
    TimebaseError,
    advance,
    audio_frames_to_ns,
    init_accumulator,
    ns_to_audio_frames,
    ns_to_video_frame,
    rescale_ticks,
    scale_factor,
    video_frame_interval_ns,
    video_frame_to_ns,
)
from .kernels.python.mul_div64_v1 import (
    U64_MAX,
    MulDivResult,
    RescaleStrategy,
    mul_div64_native_u64,
    native_u64_is_exact,
    rescale_div_mod,
    rescale_div_mod_detailed,
)

__all__ = [
    "U64_MAX",
    "MulDivResult",
    "RescaleStrategy",
    "mul_div64_native_u64",
    "native_u64_is_exact",
    "rescale_div_mod",
    "rescale_div_mod_detailed",
    "NSEC_PER_SEC",
    "AccumulatorState",
    "DivisionByZeroError",
    "RescaleError",
    "Timebase",
    "TimebaseError",
    "advance",
    "audio_frames_to_ns",
    "init_accumulator",
    "ns_to_audio_frames",
    "ns_to_video_frame",
    "rescale_ticks",
    "scale_factor",
    "video_frame_interval_ns",
    "video_frame_to_ns",
]
