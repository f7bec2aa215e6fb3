# =============================================================================
# normalizer.py — amplitude scaling and rounding
# =============================================================================
#
# value = round_half_up(raw * amplitude, 2)
#
# A result of exactly 0 or 1 is returned as an int so that geometry built from
# it (zero-height bar, full-height bar) is exact.  Values above 1 pass through
# untouched; the renderer does not clip them either.
#
# Rounding is half-away-from-zero on the decimal representation of the
# product (0.125 → 0.13), not Python's round-half-even.
# =============================================================================

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from AWE.OPT.constants import SAMPLE_PRECISION

_QUANTUM = Decimal(1).scaleb(-SAMPLE_PRECISION)   # Decimal("0.01")


def normalize_value(raw: float, amplitude: float = 1) -> int | float:
    scaled  = Decimal(repr(float(raw) * float(amplitude)))
    rounded = scaled.quantize(_QUANTUM, rounding=ROUND_HALF_UP)
    if rounded == 0 or rounded == 1:
        return int(rounded)
    return float(rounded)


def normalize(raw_samples: Iterable[float], amplitude: float = 1) -> list[int | float]:
    """Scale and round every raw sample (see module header)."""
    return [normalize_value(raw, amplitude) for raw in raw_samples]
