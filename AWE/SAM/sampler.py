# =============================================================================
# sampler.py — block-wise downsampling of a PCM stream
# =============================================================================
#
# Turns a stream of F frames into roughly R raw amplitude samples:
#
#   frames_per_block = F // R          (1 if that is 0)
#   one block read   → reducer.peak|rms per channel → reducer.average
#
# Reading continues until the source is exhausted, so a short final block
# still yields a sample.  The output length is therefore ceil(F / block),
# which is within about ±10% of R for realistic inputs.  This integer
# block sizing is deliberate; the exact count is never forced.
#
# The "visual" amplitude of a block is the average across channels.  With the
# peak method and very wide blocks (tiny output widths) the waveform gets
# peakier than what is actually heard.
# =============================================================================

from __future__ import annotations
from typing import Protocol

import numpy as np

from AWE.errors import EmptySource, InvalidArgument
from AWE.OPT.constants import METHODS
from AWE.SAM import reducer
from AWE.progress import ProgressLog


class BlockSource(Protocol):
    """What sample() needs from a PCM reader (see pcm_source.PcmSource)."""

    @property
    def total_frames(self) -> int: ...

    @property
    def channel_count(self) -> int: ...

    def read_block(self, max_frames: int) -> np.ndarray: ...


def frames_per_block(total_frames: int, resolution: int) -> int:
    """Block size for `resolution` output samples, never below 1 frame."""
    return max(1, total_frames // resolution)


def sample(
    source: BlockSource,
    resolution: int,
    method: str = "peak",
    log: ProgressLog | None = None,
) -> list[float]:
    """
    Downsample `source` to about `resolution` raw amplitude values.

    Parameters
    ----------
    source     : open BlockSource, read from its current position to the end
    resolution : wanted sample count or pixel width (same thing here)
    method     : "peak" or "rms"
    log        : optional progress log; one "." is printed per block

    Returns
    -------
    list[float]: one channel-averaged value per block, in read order

    Raises
    ------
    InvalidArgument : unknown method or resolution < 1
    EmptySource     : the source has no frames
    """
    if method not in METHODS:
        raise InvalidArgument(f"Unknown sampling method {method!r}")
    if resolution < 1:
        raise InvalidArgument(f"resolution must be >= 1, got {resolution!r}")

    total    = source.total_frames
    channels = source.channel_count
    if total <= 0:
        raise EmptySource("Source audio contains no frames")

    block_size = frames_per_block(total, resolution)
    reduce     = reducer.REDUCERS[method]
    log        = log or ProgressLog()

    samples: list[float] = []
    with log.timed(f"Sampling {block_size} frames per sample: "):
        while True:
            block = source.read_block(block_size)
            if len(block) == 0:
                break
            samples.append(reducer.average(reduce(block, channels)))
            log.out(".")

    return samples
