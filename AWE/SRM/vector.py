# =============================================================================
# vector.py — SVG waveform documents
# =============================================================================
#
# Two drawing styles, one document layout:
#
#   <svg viewBox="0 0 W H" ...>
#     <style>...</style>                       (omitted with hide_style)
#     <defs>
#       <linearGradient id="linear0">...       (one per gradient pair)
#       <g id="waveform-<uuid4>"> shapes </g>  (the waveform, defined once)
#     </defs>
#     <use class="waveform-base"     href="#waveform-<uuid4>" />
#     <use class="waveform-progress" href="#waveform-<uuid4>" />
#   </svg>
#
# The waveform is referenced twice so a consumer can clip/recolour the
# progress layer with CSS.  Apart from the group id the output is fully
# determined by the samples and options.
#
#   draw_svg_bars(samples, options)  — one <rect> per sample, fixed viewBox
#                                      width = len(samples) * gap_width
#   draw_svg_path(samples, options)  — one vertical stroke per sample in a
#                                      single <path>, scaled to the loudest
#                                      sample; spaced when sample_width is set
# =============================================================================

from __future__ import annotations
import uuid
from typing import Sequence

from AWE.OPT.constants import SVG_BASE_COLOR, SVG_PROGRESS_COLOR
from AWE.OPT.options import RenderOptions
from AWE.SAM.spacer import is_gap, space
from AWE.SRM.geometry import bar_rect, line_height_factor, path_extent

SVG_NS   = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

_BAR_STYLE = (
    "<style>"
    "svg {"
    f"color: {SVG_BASE_COLOR};"
    "}"
    "use.waveform-base {"
    f"color: {SVG_BASE_COLOR};"
    "}"
    "use.waveform-progress {"
    f"color: {SVG_PROGRESS_COLOR};"
    "}"
    "</style>"
)

_PATH_STYLE = (
    "<style>"
    "svg {"
    "stroke: #000;"
    "stroke-width: 1;"
    "}"
    "use.waveform-progress {"
    "stroke-width: 2;"
    "clip-path: polygon(0% 0%, 0% 0%, 0% 100%, 0% 100%);"
    "}"
    "svg path {"
    "stroke: inherit;"
    "stroke-width: inherit;"
    "}"
    "</style>"
)


def waveform_id() -> str:
    return f"waveform-{uuid.uuid4()}"


# ── Document pieces ─────────────────────────────────────────────────────────

def _open_svg(width, height, extra: str = "") -> str:
    return (
        f'<svg xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}" '
        f'viewBox="0 0 {width} {height}" preserveAspectRatio="none" '
        f'width="100%" height="100%"{extra}>'
    )


def _gradients(gradient) -> str:
    if not gradient:
        return ""
    parts = []
    for index, (start, end) in enumerate(gradient):
        parts.append(
            f'<linearGradient id="linear{index}" x1="0%" y1="0%" x2="100%" y2="0%">'
            f'<stop offset="0%" stop-color="{start}"/>'
            f'<stop offset="100%" stop-color="{end}"/>'
            "</linearGradient>"
        )
    return "".join(parts)


def _uses(group_id: str) -> str:
    return (
        f'<use class="waveform-base" href="#{group_id}" />'
        f'<use class="waveform-progress" href="#{group_id}" />'
    )


# ── Bar chart ───────────────────────────────────────────────────────────────

def draw_svg_bars(
    samples: Sequence,
    options: RenderOptions,
    group_id: str | None = None,
) -> str:
    """
    Render `samples` as centred bars.

    Args:
        samples:  Normalised samples (GAP positions are skipped).
        options:  Uses height, bar_width, gap_width (horizontal step),
                  gradient, hide_style.
        group_id: Id of the shared <g>; a fresh uuid4-based id by default.

    Returns:
        The SVG document as a single line of text.
    """
    step     = options.gap_width or 1
    height   = options.height
    group_id = group_id or waveform_id()

    parts = [_open_svg(len(samples) * step, height, ' fill="currentColor"')]
    if not options.hide_style:
        parts.append(_BAR_STYLE)
    parts.append("<defs>")
    parts.append(_gradients(options.gradient))
    parts.append(f'<g id="{group_id}">')

    for index, sample in enumerate(samples):
        if is_gap(sample):
            continue
        x, y, width, bar_height = bar_rect(sample, index, height, options.bar_width or 1, step)
        parts.append(
            f'<rect x="{x}" y="{y}" width="{width}" height="{bar_height}" fill="currentColor"/>'
        )

    parts.append("</g>")
    parts.append("</defs>")
    parts.append(_uses(group_id))
    parts.append("</svg>")
    return "".join(parts)


# ── Line plot ───────────────────────────────────────────────────────────────

def draw_svg_path(
    samples: Sequence,
    options: RenderOptions,
    group_id: str | None = None,
) -> str:
    """
    Render `samples` as vertical strokes of one <path> around a centre line.
    The viewBox is options.width x options.height.
    """
    height   = options.height
    group_id = group_id or waveform_id()

    if options.sample_width:
        samples = space(samples, options.sample_width, options.gap_width)
    height_factor = line_height_factor(samples, height)

    parts = [_open_svg(options.width, height)]
    if not options.hide_style:
        parts.append(_PATH_STYLE)
    parts.append("<defs>")
    parts.append(_gradients(options.gradient))
    parts.append(f'<g id="{group_id}">')
    parts.append(f'<g transform="translate(0, {height / 2.0})">')
    parts.append('<path stroke="currentColor" d="')

    for pos, sample in enumerate(samples):
        if is_gap(sample):
            continue
        top, bottom = path_extent(sample, height_factor)
        parts.append(f" M{pos},{top} V{bottom}")

    parts.append('"/>')
    parts.append("</g>")
    parts.append("</g>")
    parts.append("</defs>")
    parts.append(_uses(group_id))
    parts.append("</svg>")
    return "".join(parts)
