# =============================================================================
# raster.py — PNG waveform rendering (Pillow)
# =============================================================================
#
# RasterSurface is the pixel canvas: an RGBA Pillow image with a background
# fill, vertical-segment drawing, a colour-to-clear masking pass, and save().
#
# TRANSPARENT FOREGROUND:
#   Pillow's ImageDraw paints RGBA values as-is, so a (0,0,0,0) stroke over an
#   opaque background is the only way to "cut out" the waveform.  To keep the
#   drawing code colour-agnostic the waveform is drawn in a reserved mask
#   colour and a final pass clears every pixel of exactly that colour:
#
#     color == "transparent"  →  draw in TRANSPARENCY_MASK (#00ff00)
#                                (#ffff00 if the background *is* #00ff00 in any spelling,
#                                 otherwise the whole image would be wiped)
#                             →  mask_to_transparent(mask)
#
# One column per sample: x = sample index (after spacing), rows from
# round(h/2 - a) to round(h/2 + a) inclusive, a = sample * h / 2.
# =============================================================================

from __future__ import annotations
from typing import Sequence

import numpy as np
from PIL import Image, ImageDraw

from AWE.OPT.constants import TRANSPARENT, TRANSPARENCY_MASK, TRANSPARENCY_ALTERNATE
from AWE.OPT.options import RenderOptions
from AWE.SAM.spacer import is_gap, space
from AWE.SRM.geometry import RGBA, CLEAR, parse_color, vertical_extent


class RasterSurface:
    """
    Fixed-size RGBA pixel surface.

    Usage:
        surface = RasterSurface(200, 80, "#666666")
        surface.draw_vertical(10, 20, 60, (0, 204, 255, 255))
        surface.save("out.png")
    """

    def __init__(self, width: int, height: int, background: str | RGBA = TRANSPARENT) -> None:
        if isinstance(background, str):
            background = parse_color(background)
        self.image = Image.new("RGBA", (width, height), background)
        self._draw = ImageDraw.Draw(self.image)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    # ── Drawing ─────────────────────────────────────────────────────────────

    def set_pixel(self, x: int, y: int, color: RGBA) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.image.putpixel((x, y), color)

    def get_pixel(self, x: int, y: int) -> RGBA:
        return self.image.getpixel((x, y))

    def draw_vertical(self, x: int, y0: int, y1: int, color: RGBA) -> None:
        """Draw column `x` from row y0 to row y1 inclusive.  Off-canvas parts are dropped."""
        self._draw.line([(x, y0), (x, y1)], fill=color, width=1)

    def mask_to_transparent(self, mask: RGBA) -> int:
        """
        Clear every pixel whose RGBA equals `mask`.

        Returns:
            Number of pixels cleared.
        """
        pixels  = np.array(self.image)
        matches = np.all(pixels == np.array(mask, dtype=np.uint8), axis=-1)
        pixels[matches] = CLEAR
        self.image = Image.fromarray(pixels)
        self._draw = ImageDraw.Draw(self.image)
        return int(matches.sum())

    # ── Output ──────────────────────────────────────────────────────────────

    def save(self, path: str) -> None:
        self.image.save(path, "PNG")


def mask_color(background: str) -> str:
    """Mask colour to use for a transparent foreground over `background`."""
    if parse_color(background) == parse_color(TRANSPARENCY_MASK):
        return TRANSPARENCY_ALTERNATE
    return TRANSPARENCY_MASK


def draw_png(samples: Sequence, options: RenderOptions) -> RasterSurface:
    """
    Draw `samples` onto a new options.width x options.height surface.

    Spacing (sample_width / gap_width) is applied here when requested, so
    GAP columns show the background.
    """
    transparent = None
    if str(options.color).lower() == TRANSPARENT:
        color = transparent = parse_color(mask_color(options.background_color))
    else:
        color = parse_color(options.color)

    surface = RasterSurface(options.width, options.height, options.background_color)

    if options.sample_width:
        samples = space(samples, options.sample_width, options.gap_width)

    for x, sample in enumerate(samples):
        if is_gap(sample):
            continue
        top, bottom = vertical_extent(sample, options.height)
        surface.draw_vertical(x, top, bottom, color)

    if transparent is not None:
        surface.mask_to_transparent(transparent)

    return surface
