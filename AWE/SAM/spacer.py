# =============================================================================
# spacer.py — bar/gap regrouping
# =============================================================================
#
# Regroups a dense sample sequence into discrete bars separated by blank gaps:
#
#   bar_width=2, gap_width=1, six inputs:   [bar, bar, GAP, bar, bar, GAP]
#
# Rules:
#   - bar_width / gap_width below 1 (or None) count as 1
#   - the sequence never starts with a gap
#   - every output position consumes exactly one input sample, gaps included,
#     so len(output) == len(input)
#   - a bar's value is the RMS of its bar_width input samples starting at the
#     bar's first position (reducer.rms), computed once per bar; with
#     bar_width == 1 it is just that sample
#
# GAP is the only "no value" marker the renderers understand.  It is a
# dedicated type rather than None so geometry code has to skip it explicitly.
# =============================================================================

from __future__ import annotations
from typing import Sequence, Union

from AWE.SAM import reducer


class Gap:
    """Marker for a spaced-sequence position that draws nothing."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "GAP"

    def __bool__(self) -> bool:
        return False


GAP = Gap()

Sample = Union[int, float]
SpacedSample = Union[int, float, Gap]


def is_gap(value) -> bool:
    return isinstance(value, Gap)


def _width(value) -> int:
    try:
        return max(1, int(value))
    except (TypeError, ValueError):
        return 1


def bar_value(samples: Sequence[Sample], start: int, bar_width: int) -> Sample:
    """Value of the bar whose first input sample is `samples[start]`."""
    if bar_width > 1:
        return reducer.rms(samples[start:start + bar_width])[0]
    return samples[start]


def space(samples: Sequence[Sample], bar_width=1, gap_width=1) -> list[SpacedSample]:
    """
    Lay `samples` out as bars of `bar_width` positions separated by gaps of
    `gap_width` positions.
    """
    bar_width = _width(bar_width)
    gap_width = _width(gap_width)

    spaced: list[SpacedSample] = []
    countdown = bar_width      # positions left in the current bar + gap cycle
    current   = None           # value of the bar being emitted

    for index in range(len(samples)):
        at_front = index < bar_width

        if countdown > bar_width and not at_front:
            spaced.append(GAP)
            countdown -= 1
            continue

        if current is None:
            current = bar_value(samples, index, bar_width)
        spaced.append(current)

        if countdown < 2:
            # last bar position: next comes a full gap run, then a new bar
            countdown = bar_width + gap_width
            current   = None
        else:
            countdown -= 1

    return spaced
