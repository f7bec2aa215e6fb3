#!/usr/bin/env python3
# =============================================================================
# waveformer.py — PNG / SVG line-plot waveform generator
# =============================================================================
#
# One sample per horizontal pixel: the requested width is the sampling
# resolution.
#
# Usage (library):
#   from AWE.waveformer import generate
#   generate("Kickstart My Heart.wav")
#   generate("Kickstart My Heart.wav", method="rms")
#   generate("Kickstart My Heart.wav", color="#ff00ff", logger=sys.stdout)
#
# Usage (CLI):
#   python -m AWE.waveformer clip.wav
#   python -m AWE.waveformer clip.mp3 --width 600 --height 80 --method rms
#   python -m AWE.waveformer clip.wav --color transparent --background-color "#000000"
#   python -m AWE.waveformer clip.wav --type svg --sample-width 3 --gap-width 1
#   python -m AWE.waveformer clip.wav --bars --samples 50
#
# Options (all optional, defaults in AWE.OPT.constants.WAVEFORMER_DEFAULTS):
#   method            "peak" (default, more dynamic) or "rms" (smoother, closer
#                     to perceived loudness)
#   width / height    image size in pixels (1800 x 280)
#   auto_width        msec per pixel; overrides width from the audio length,
#                     e.g. 100 → a one minute file is 600 px wide
#   background_color  hex colour or "transparent" (#666666)
#   color             hex colour or "transparent" for a cut-out (#00ccff)
#   sample_width      draw bars this many px wide separated by gaps
#   gap_width         gap size in px when sample_width is set (min 1)
#   amplitude         scale factor applied to every sample (1)
#   type              "png" (default) or "svg"
#   filename          output path; default is the source path with .png/.svg
#   logger            text stream for progress output
# =============================================================================

from __future__ import annotations
import argparse
import sys

from AWE import waveform_svg
from AWE.errors import WaveformError
from AWE.OPT.constants import WAVEFORMER_DEFAULTS, TYPE_SVG
from AWE.OPT.options import RenderOptions, resolve_options
from AWE.pipeline import acquire_samples, check_paths, image_filename, write_output, write_text
from AWE.progress import ProgressLog
from AWE.SRM.raster import draw_png
from AWE.SRM.vector import draw_svg_path


def generate(source: str, **options) -> str:
    """
    Generate a waveform image for `source`.

    Returns:
        The path of the written image.

    Raises:
        InvalidArgument, SourceNotFound, ConversionFailure, DecodeFailure,
        EmptySource (see AWE.errors)
    """
    opts = resolve_options(WAVEFORMER_DEFAULTS, options)
    filename = opts.filename or (image_filename(source, opts.type) if source else None)
    check_paths(source, filename)

    log = ProgressLog(opts.logger)
    started = log.start()

    samples, opts = acquire_samples(source, opts, log)

    with log.timed("\nDrawing..."):
        write_output(filename, _writer(samples, opts), log)

    log.done(started, f"Generated waveform '{filename}'")
    return filename


def draw(samples, options: RenderOptions):
    """SVG text for type "svg", otherwise a RasterSurface."""
    if options.type == TYPE_SVG:
        return draw_svg_path(samples, options)
    return draw_png(samples, options)


def _writer(samples, options: RenderOptions):
    image = draw(samples, options)
    if isinstance(image, str):
        return write_text(image)
    return image.save


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a waveform image (PNG or SVG) from an audio file",
    )
    parser.add_argument("source", help="Path to the audio file (WAV, or anything ffmpeg reads)")
    parser.add_argument("-o", "--output", dest="filename", help="Output path")
    parser.add_argument("--method", choices=["peak", "rms"], help="Sampling method, default peak")
    parser.add_argument("--type", choices=["png", "svg"], help="Output type, default png")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--height", type=int, help="Image height in pixels")
    parser.add_argument("--auto-width", type=float, help="Milliseconds of audio per pixel")
    parser.add_argument("--color", help='Waveform colour, or "transparent"')
    parser.add_argument("--background-color", help='Background colour, or "transparent"')
    parser.add_argument("--sample-width", type=int, help="Bar width in px (enables gaps)")
    parser.add_argument("--gap-width", type=int, help="Gap width in px")
    parser.add_argument("--amplitude", type=float, help="Amplitude factor, default 1")
    parser.add_argument(
        "--bars", action="store_true",
        help="Write an SVG bar chart (see --samples / --bar-width) instead",
    )
    parser.add_argument("--samples", type=int, help="Bar count for --bars, default 100")
    parser.add_argument("--bar-width", type=int, help="Bar width for --bars, default 1")
    parser.add_argument("--hide-style", action="store_true", help="Omit the SVG <style> block")
    parser.add_argument("-q", "--quiet", action="store_true", help="No progress output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    common = {
        "method":     args.method,
        "height":     args.height,
        "amplitude":  args.amplitude,
        "filename":   args.filename,
        "hide_style": args.hide_style or None,
        "logger":     None if args.quiet else sys.stdout,
    }

    try:
        if args.bars:
            waveform_svg.generate(
                args.source,
                samples=args.samples,
                bar_width=args.bar_width,
                gap_width=args.gap_width,
                **common,
            )
        else:
            generate(
                args.source,
                type=args.type,
                width=args.width,
                auto_width=args.auto_width,
                color=args.color,
                background_color=args.background_color,
                sample_width=args.sample_width,
                gap_width=args.gap_width,
                **common,
            )
    except WaveformError as exc:
        print(f"[!!] {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
