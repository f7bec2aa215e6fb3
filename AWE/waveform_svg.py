# =============================================================================
# waveform_svg.py — SVG bar waveform generator
# =============================================================================
#
# Samples the audio down to a fixed number of values and draws each one as a
# centred <rect> in a logical viewBox, len(samples) * gap_width wide and
# `height` tall.  The SVG scales to its container (preserveAspectRatio=none).
#
# Usage:
#   from AWE.waveform_svg import generate
#   generate("Kickstart My Heart.wav")
#   generate("Kickstart My Heart.wav", samples=50, gradient=[("#f00", "#00f")])
#
# Options (all optional, defaults in AWE.OPT.constants.WAVEFORM_SVG_DEFAULTS):
#   method      "peak" (default) or "rms"
#   samples     wanted sample count; the result may be ±10% off (100)
#   amplitude   scale factor applied to every sample (1)
#   gap_width   horizontal step between bars, viewBox units (3)
#   bar_width   bar width, viewBox units (1)
#   height      viewBox height (100)
#   gradient    list of (start, end) colour pairs → <linearGradient id="linearN">
#   hide_style  omit the embedded <style> block
#   filename    output path; default is the source path with .svg
#   logger      text stream for progress output
# =============================================================================

from __future__ import annotations

from AWE.errors import InvalidArgument
from AWE.OPT.constants import WAVEFORM_SVG_DEFAULTS, TYPE_SVG
from AWE.OPT.options import resolve_options
from AWE.pipeline import acquire_samples, check_paths, image_filename, write_output, write_text
from AWE.progress import ProgressLog
from AWE.SRM.vector import draw_svg_bars


def generate_svg_filename(source: str) -> str:
    return image_filename(source, TYPE_SVG)


def generate(source: str, **options) -> str:
    """
    Write an SVG bar waveform for `source` and return its path.

    Raises:
        InvalidArgument, SourceNotFound, ConversionFailure, DecodeFailure,
        EmptySource (see AWE.errors)
    """
    opts = resolve_options(WAVEFORM_SVG_DEFAULTS, options)
    if opts.type != TYPE_SVG:
        raise InvalidArgument(f"Bar waveforms are SVG only, got type {opts.type!r}")
    filename = opts.filename or (generate_svg_filename(source) if source else None)
    check_paths(source, filename)

    log = ProgressLog(opts.logger)
    started = log.start()

    samples, opts = acquire_samples(source, opts, log)
    svg = draw_svg_bars(samples, opts)
    write_output(filename, write_text(svg), log)

    log.done(started, f"\nGenerated waveform '{filename}'")
    return filename
