# =============================================================================
# geometry.py — shared sample-to-geometry mapping
# =============================================================================
#
# Coordinates follow the image convention: y grows downwards, the waveform's
# zero axis sits at height / 2.  Pixel positions handed to Pillow are always
# ints; the SVG writer gets the same numbers.
# =============================================================================

from __future__ import annotations
import math
from typing import Sequence

from PIL import ImageColor

from AWE.errors import InvalidArgument
from AWE.OPT.constants import TRANSPARENT
from AWE.SAM.spacer import is_gap

RGBA = tuple[int, int, int, int]

CLEAR: RGBA = (0, 0, 0, 0)


def round_half_up(value: float) -> int:
    """Round to the nearest int, halves away from zero (2.5 → 3, -2.5 → -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def bar_rect(sample: float, index: int, height: int, bar_width: int, step: int):
    """
    Centred bar for SVG bar mode.

    Returns (x, y, width, bar_height). x, width and bar_height are ints; y is a
    float because the bar is centred on height / 2.
    """
    bar_height = round_half_up(sample * height)
    x = index * step
    y = (height - bar_height) / 2.0
    return x, y, bar_width, bar_height


def vertical_extent(sample: float, height: int) -> tuple[int, int]:
    """Top and bottom pixel rows of a raster column centred on height / 2."""
    zero      = height / 2.0
    amplitude = sample * height / 2.0
    return round_half_up(zero - amplitude), round_half_up(zero + amplitude)


def path_extent(sample: float, height_factor: float) -> tuple[int, int]:
    """Symmetric excursion around a zero axis at y = 0 (SVG line plot)."""
    amplitude = sample * height_factor
    return round_half_up(0 - amplitude), round_half_up(0 + amplitude)


def line_height_factor(samples: Sequence, height: int) -> float:
    """
    Scale that makes the loudest non-gap sample reach the top edge.
    A silent (all-zero or all-gap) sequence gets 0, i.e. a flat line.
    """
    values = [s for s in samples if not is_gap(s)]
    peak = max(values) if values else 0
    if peak <= 0:
        return 0.0
    return (height / 2.0) / peak


def parse_color(color: str) -> RGBA:
    """'#rrggbb', '#rgb', a CSS colour name, or 'transparent' → RGBA tuple."""
    if isinstance(color, str) and color.lower() == TRANSPARENT:
        return CLEAR
    try:
        return ImageColor.getcolor(color, "RGBA")
    except (ValueError, AttributeError):
        raise InvalidArgument(f"Unrecognised colour {color!r}") from None
