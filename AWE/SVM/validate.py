#!/usr/bin/env python3
# =============================================================================
# validate.py — AWE Self-Validation Suite
# =============================================================================
#
# Run directly:  python -m AWE.SVM.validate
#
# Tests (hand-computed fixtures, no audio files needed):
#   1. Defaults integrity   — tables resolve, mask colours distinct
#   2. Channel reducer      — peak / rms / average on known blocks
#   3. Sampler + normalizer — block sizing, rounding to 0 / 1 ints
#   4. Spacer               — bar/gap pattern, no leading gap, same length
#   5. Renderers            — SVG layout, raster masking
# =============================================================================

from __future__ import annotations
import sys

import numpy as np

from AWE.OPT.constants import (
    WAVEFORMER_DEFAULTS, WAVEFORM_SVG_DEFAULTS,
    TRANSPARENCY_MASK, TRANSPARENCY_ALTERNATE,
)
from AWE.OPT.options import resolve_options
from AWE.SAM import reducer
from AWE.SAM.normalizer import normalize
from AWE.SAM.sampler import sample
from AWE.SAM.spacer import GAP, is_gap, space
from AWE.SRM.geometry import parse_color
from AWE.SRM.raster import draw_png
from AWE.SRM.vector import draw_svg_bars

PASS = "[PASS]"
FAIL = "[FAIL]"

DIVIDER = "=" * 60


class ArraySource:
    """In-memory BlockSource over a (frames, channels) array."""

    def __init__(self, frames) -> None:
        self._frames = reducer.as_block(frames)
        self._pos = 0

    @property
    def total_frames(self) -> int:
        return self._frames.shape[0]

    @property
    def channel_count(self) -> int:
        return self._frames.shape[1]

    def read_block(self, max_frames: int) -> np.ndarray:
        block = self._frames[self._pos:self._pos + max_frames]
        self._pos += len(block)
        return block


class Checker:

    def __init__(self, out=sys.stdout) -> None:
        self.out = out
        self.failures = 0

    def section(self, title: str) -> None:
        print(f"\n{DIVIDER}\n{title}\n{DIVIDER}", file=self.out)

    def check(self, label: str, condition: bool, detail: str = "") -> bool:
        if condition:
            print(f"  {PASS} {label}", file=self.out)
        else:
            print(f"  {FAIL} {label}{(' -- ' + detail) if detail else ''}", file=self.out)
            self.failures += 1
        return condition


# =============================================================================
# TEST 1 — Defaults Integrity
# =============================================================================
def check_defaults(c: Checker) -> None:
    c.section("TEST 1 — Defaults Integrity")

    png = resolve_options(WAVEFORMER_DEFAULTS)
    svg = resolve_options(WAVEFORM_SVG_DEFAULTS)
    c.check("Waveformer defaults: 1800 x 280 png", (png.width, png.height, png.type) == (1800, 280, "png"))
    c.check("SVG defaults: 100 samples, step 3, bar 1",
            (svg.samples, svg.gap_width, svg.bar_width) == (100, 3, 1))
    c.check("Mask colours differ",
            parse_color(TRANSPARENCY_MASK) != parse_color(TRANSPARENCY_ALTERNATE))


# =============================================================================
# TEST 2 — Channel Reducer
# =============================================================================
def check_reducer(c: Checker) -> None:
    c.section("TEST 2 — Channel Reducer")

    block = [1.0, -1.0, 1.0, -1.0]
    c.check("rms([1,-1,1,-1]) = 1.0", reducer.rms(block) == [1.0], f"got {reducer.rms(block)}")
    c.check("peak([1,-1,1,-1]) = 1.0", reducer.peak(block) == [1.0], f"got {reducer.peak(block)}")

    stereo = [[0.5, -0.25], [-0.75, 0.1]]
    c.check("peak is per channel", reducer.peak(stereo, 2) == [0.75, 0.25])
    c.check("average of [0.75, 0.25] = 0.5", reducer.average([0.75, 0.25]) == 0.5)
    c.check("peak > 1.0 is not clamped", reducer.peak([1.5, -2.0]) == [2.0])


# =============================================================================
# TEST 3 — Sampler + Normalizer
# =============================================================================
def check_sampler(c: Checker) -> None:
    c.section("TEST 3 — Sampler + Normalizer")

    raw = sample(ArraySource(np.ones((1000, 2)) * 0.5), 100, "peak")
    c.check("1000 frames @ 100 → 100 samples", len(raw) == 100, f"got {len(raw)}")
    c.check("constant 0.5 input → 0.5 peaks", all(v == 0.5 for v in raw))

    short = sample(ArraySource(np.ones(5)), 50, "rms")
    c.check("5 frames @ 50 → 5 one-frame samples", len(short) == 5, f"got {len(short)}")

    values = normalize([0.3333, 0.004, 0.999], 1)
    c.check("0.3333 → 0.33", values[0] == 0.33)
    c.check("0.004 → int 0", values[1] == 0 and isinstance(values[1], int))
    scaled = normalize([0.999], 1.001)[0]
    c.check("0.999 x 1.001 → int 1", scaled == 1 and isinstance(scaled, int), f"got {scaled!r}")


# =============================================================================
# TEST 4 — Spacer
# =============================================================================
def check_spacer(c: Checker) -> None:
    c.section("TEST 4 — Spacer")

    spaced = space([0.1, 0.2, 0.3, 0.4, 0.5, 0.6], 2, 1)
    pattern = ["gap" if is_gap(v) else "bar" for v in spaced]
    c.check("bar=2 gap=1 → bar bar gap bar bar gap",
            pattern == ["bar", "bar", "gap", "bar", "bar", "gap"], f"got {pattern}")
    c.check("output length == input length", len(spaced) == 6)
    c.check("first position is never a gap", not is_gap(spaced[0]))
    c.check("bar_width 1 keeps sample values", space([0.4, 0.2], 1, 1) == [0.4, GAP])


# =============================================================================
# TEST 5 — Renderers
# =============================================================================
def check_renderers(c: Checker) -> None:
    c.section("TEST 5 — Renderers")

    opts = resolve_options(WAVEFORM_SVG_DEFAULTS)
    svg = draw_svg_bars([0.5, 1, 0], opts, group_id="waveform-test")
    c.check("viewBox = 3 samples x step 3", 'viewBox="0 0 9 100"' in svg)
    c.check("half-height bar centred",
            '<rect x="0" y="25.0" width="1" height="50" fill="currentColor"/>' in svg)
    c.check("base and progress layers reference one group",
            svg.count('href="#waveform-test"') == 2)

    opts = resolve_options(WAVEFORMER_DEFAULTS, {
        "width": 4, "height": 10, "color": "transparent",
        "background_color": TRANSPARENCY_MASK,
    })
    surface = draw_png([1, 1, 1, 1], opts)
    alternate = parse_color(TRANSPARENCY_ALTERNATE)
    pixels = [surface.get_pixel(x, y) for x in range(4) for y in range(10)]
    c.check("alternate mask used and fully cleared", alternate not in pixels)
    c.check("waveform cut out to transparent", surface.get_pixel(0, 5) == (0, 0, 0, 0))


def run_all(out=sys.stdout) -> int:
    """Run every check; return the number of failures."""
    c = Checker(out)
    check_defaults(c)
    check_reducer(c)
    check_sampler(c)
    check_spacer(c)
    check_renderers(c)

    print(f"\n{DIVIDER}", file=out)
    if c.failures:
        print(f"  {c.failures} check(s) FAILED", file=out)
    else:
        print("  All checks passed", file=out)
    print(DIVIDER, file=out)
    return c.failures


if __name__ == "__main__":
    sys.exit(1 if run_all() else 0)
