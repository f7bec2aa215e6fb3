# =============================================================================
# reducer.py — Channel Reducer
# =============================================================================
#
# Reduces one block of PCM frames to one scalar per channel, then (via
# average()) to one scalar for the whole block.  Used by the sampler for
# every block it reads and by the spacer when it re-averages a bar.
#
# Block shapes accepted:
#   (frames, channels) array or list of frames — normal multi-channel block
#   flat sequence of floats                    — treated as mono
#
# No clamping happens here.  A source that exceeds full scale yields values
# above 1.0 and the renderer draws them as-is.
# =============================================================================

from __future__ import annotations
from typing import Sequence

import numpy as np


def as_block(block) -> np.ndarray:
    """Return `block` as a 2-D float64 array of shape (frames, channels)."""
    frames = np.asarray(block, dtype=np.float64)
    if frames.ndim == 1:
        frames = frames.reshape(-1, 1)
    return frames


def peak(block, channels: int = 1) -> list[float]:
    """
    Peak amplitude of each channel.

    The peaks are individual to each channel and are not necessarily taken
    from the same frame.  An empty block gives 0.0 for every channel.
    """
    frames = as_block(block)
    if frames.shape[0] == 0:
        return [0.0] * channels
    return [float(v) for v in np.max(np.abs(frames[:, :channels]), axis=0)]


def rms(block, channels: int = 1) -> list[float]:
    """
    Root-mean-square amplitude of each channel.

    Raises:
        ValueError: the block holds no frames.
    """
    frames = as_block(block)
    if frames.shape[0] == 0:
        raise ValueError("rms() needs at least one frame")
    return [float(v) for v in np.sqrt(np.mean(np.square(frames[:, :channels]), axis=0))]


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of the per-channel values."""
    if len(values) == 0:
        raise ValueError("average() needs at least one value")
    return float(sum(values) / len(values))


REDUCERS = {
    "peak": peak,
    "rms":  rms,
}
