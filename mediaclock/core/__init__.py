"""
Timebase conversions built on the u64 mul-div kernel.
"""

from .errors import DivisionByZeroError, RescaleError, TimebaseError
from .timebase import (
    NSEC_PER_SEC,
    AccumulatorState,
    Timebase,
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

__all__ = [
    "DivisionByZeroError",
    "RescaleError",
    "TimebaseError",
    "NSEC_PER_SEC",
    "AccumulatorState",
    "Timebase",
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
