# =============================================================================
# pcm_source.py — soundfile-backed PCM reader
# =============================================================================
#
# Wraps soundfile.SoundFile behind the small capability the sampler needs:
#
#   total_frames   : int    — frames in the whole stream
#   channel_count  : int
#   sample_rate    : int
#   read_block(n)  : (<=n, channel_count) float64 array, empty at end of stream
#
# Frames are always read as float64 in [-1.0, 1.0] full scale, whatever the
# on-disk sample format.  Only one block is ever held in memory.
# =============================================================================

from __future__ import annotations

import numpy as np
import soundfile as sf

from AWE.errors import DecodeFailure


class PcmSource:
    """
    Sequential block reader over one audio file.

    Usage:
        with PcmSource.open("clip.wav") as pcm:
            block = pcm.read_block(1024)
    """

    def __init__(self, sound_file: sf.SoundFile, path: str) -> None:
        self._file = sound_file
        self.path  = path

    @classmethod
    def open(cls, path: str) -> "PcmSource":
        try:
            sound_file = sf.SoundFile(path, mode="r")
        except sf.LibsndfileError as exc:
            raise DecodeFailure(
                f"Source audio file {path} could not be read by libsndfile -- "
                f"Hint: convert it to WAV first using something like ffmpeg "
                f"(libsndfile: {exc})"
            ) from exc
        return cls(sound_file, path)

    # ── Stream info ─────────────────────────────────────────────────────────

    @property
    def total_frames(self) -> int:
        return self._file.frames

    @property
    def channel_count(self) -> int:
        return self._file.channels

    @property
    def sample_rate(self) -> int:
        return self._file.samplerate

    @property
    def duration(self) -> float:
        """Stream length in seconds."""
        return self.total_frames / self.sample_rate

    # ── Reading ─────────────────────────────────────────────────────────────

    def read_block(self, max_frames: int) -> np.ndarray:
        try:
            return self._file.read(max_frames, dtype="float64", always_2d=True)
        except sf.LibsndfileError as exc:
            raise DecodeFailure(f"Failed reading {self.path}: {exc}") from exc

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "PcmSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
