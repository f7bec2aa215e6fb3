# =============================================================================
# pipeline.py — shared plumbing for the generate() entry points
# =============================================================================
#
# Responsibilities the sampler and renderers do not own:
#   - argument / source-path checks, in a fixed order
#   - output filename derivation (same dir, same stem, new extension)
#   - the temporary WAV lifetime (transcode.pcm_path)
#   - auto_width resolution once the stream duration is known
#   - the output write: existing file removed only after sampling succeeded,
#     new content written to a sibling temp file and moved into place, so a
#     failed write never leaves a truncated image behind
# =============================================================================

from __future__ import annotations
import math
import os
import tempfile
from typing import Callable

from AWE.errors import InvalidArgument, SourceNotFound
from AWE.OPT.options import RenderOptions
from AWE.progress import ProgressLog
from AWE.SAM.normalizer import normalize
from AWE.SAM.pcm_source import PcmSource
from AWE.SAM.sampler import sample
from AWE.SAM.transcode import pcm_path


def image_filename(source: str, image_type: str) -> str:
    """'dir/clip.mp3' → 'dir/clip.<image_type>'."""
    base, _ = os.path.splitext(source)
    return f"{base}.{image_type}"


def check_paths(source: str | None, filename: str | None) -> None:
    if not source:
        raise InvalidArgument("No source audio filename given, must be an existing sound file.")
    if not filename:
        raise InvalidArgument("No destination filename given for waveform")
    if not os.path.exists(source):
        raise SourceNotFound(f"Source audio file '{source}' not found.")


def auto_width(duration_seconds: float, msec_per_pixel: float) -> int:
    """Image width giving one pixel per `msec_per_pixel` of audio (at least 1)."""
    return max(1, math.ceil(duration_seconds * 1000 / msec_per_pixel))


def acquire_samples(
    source: str,
    options: RenderOptions,
    log: ProgressLog,
) -> tuple[list, RenderOptions]:
    """
    Transcode (if needed), sample and normalise `source`.

    The resolution is options.samples when set, else options.width.  With
    auto_width the width is derived from the stream duration first and the
    returned options carry it.

    Returns:
        (normalised samples, options actually used)
    """
    with pcm_path(source, log=log) as wav_path:
        with PcmSource.open(wav_path) as pcm:
            if options.auto_width:
                options = options._replace(width=auto_width(pcm.duration, options.auto_width))
            resolution = options.samples or options.width
            if not resolution:
                raise InvalidArgument("Either samples or width must be given")
            raw = sample(pcm, resolution, options.method, log)

    return normalize(raw, options.amplitude), options


def write_output(filename: str, write: Callable[[str], None], log: ProgressLog) -> None:
    """
    Replace `filename` with whatever `write(path)` produces.

    `write` receives a temporary path in the destination directory.
    """
    if os.path.exists(filename):
        log.out(f"Output file {filename} encountered. Removing.\n")
        os.unlink(filename)

    directory = os.path.dirname(os.path.abspath(filename))
    _, ext = os.path.splitext(filename)
    fd, tmp_path = tempfile.mkstemp(prefix=".awe_", suffix=ext, dir=directory)
    os.close(fd)
    try:
        write(tmp_path)
        os.replace(tmp_path, filename)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def write_text(text: str) -> Callable[[str], None]:
    """Writer for write_output() that stores `text` followed by a newline."""
    def _write(path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
            f.write("\n")
    return _write
