# =============================================================================
# transcode.py — convert non-WAV sources to WAV with ffmpeg
# =============================================================================
#
# ensure_pcm(path)  -> path of a WAV file.  A ".wav" source is returned
#                      unchanged; anything else is converted next to the
#                      source as tmp_<stem>_<random>.wav.
#
# pcm_path(path)    -> context manager around ensure_pcm() that deletes the
#                      temporary WAV on exit, on both success and failure.
#
# The ffmpeg binary is looked up on PATH (shutil.which) unless an explicit
# binary is given.
# =============================================================================

from __future__ import annotations

import os
import shutil
import subprocess
import tempfile
from contextlib import contextmanager
from typing import Iterator

from AWE.errors import ConversionFailure
from AWE.OPT.constants import PCM_EXTENSION


def find_ffmpeg() -> str | None:
    return shutil.which("ffmpeg")


def ensure_pcm(source: str, ffmpeg: str | None = None) -> str:
    """
    Return a path soundfile can read for `source`.

    Args:
        source: Any audio path.
        ffmpeg: ffmpeg binary to use; defaults to the one on PATH.

    Returns:
        `source` itself for WAV input, otherwise the path of a new temporary
        WAV file the caller owns.

    Raises:
        ConversionFailure: ffmpeg is missing or rejected the file.
    """
    base, ext = os.path.splitext(source)
    if ext.lower() == PCM_EXTENSION:
        return source

    ffmpeg = ffmpeg or find_ffmpeg()
    if not ffmpeg:
        raise ConversionFailure(
            f"Source file {source} is not WAV and no ffmpeg binary was found to convert it"
        )

    fd, output_path = tempfile.mkstemp(
        prefix=f"tmp_{os.path.basename(base)}_",
        suffix=PCM_EXTENSION,
        dir=os.path.dirname(os.path.abspath(source)),
    )
    os.close(fd)

    cmd = [ffmpeg, "-y", "-v", "error", "-i", source, "-f", "wav", output_path]
    try:
        subprocess.run(cmd, check=True, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
    except (subprocess.CalledProcessError, OSError) as exc:
        _remove_quietly(output_path)
        detail = getattr(exc, "stderr", None) or str(exc)
        raise ConversionFailure(
            f"Source file {source} could not be converted to .wav by ffmpeg "
            f"(ffmpeg: {detail.strip()})"
        ) from exc

    return output_path


@contextmanager
def pcm_path(source: str, ffmpeg: str | None = None, log=None) -> Iterator[str]:
    """Yield a WAV path for `source`; remove it afterwards if it was temporary."""
    path = ensure_pcm(source, ffmpeg)
    try:
        yield path
    finally:
        if path != source:
            if log is not None:
                log.out(f"Removing temporary file at {path}\n")
            _remove_quietly(path)


def _remove_quietly(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
