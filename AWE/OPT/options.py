# =============================================================================
# options.py — RenderOptions resolution
# =============================================================================
#
# RenderOptions is resolved once per generate() call from a defaults table
# (see constants.py) plus caller overrides, and is never mutated afterwards.
# Every downstream stage reads it read-only.
#
# Overrides that are None fall back to the table value, so a CLI or HTTP
# front end can pass its unset fields straight through.
# =============================================================================

from __future__ import annotations
from typing import NamedTuple, TextIO

from AWE.errors import InvalidArgument
from AWE.OPT.constants import METHODS, TYPES, TYPE_PNG, METHOD_PEAK


class RenderOptions(NamedTuple):
    method:           str = METHOD_PEAK
    samples:          int | None = None    # SVG bars: requested sample count
    width:            int | None = None    # pixel width / viewBox width
    height:           int = 100
    auto_width:       float | None = None  # msec per pixel; overrides width
    amplitude:        float = 1
    bar_width:        int | None = None    # SVG bars: rect width
    gap_width:        int | None = None    # SVG bars: step; spacer: gap run
    sample_width:     int | None = None    # spacer: bar run (enables spacing)
    color:            str = "#00ccff"
    background_color: str = "#666666"
    gradient:         tuple[tuple[str, str], ...] | None = None
    hide_style:       bool = False
    type:             str = TYPE_PNG
    filename:         str | None = None
    logger:           TextIO | None = None


_FIELDS = set(RenderOptions._fields)

_POSITIVE_INTS = ("samples", "width", "height")


def resolve_options(defaults: dict, overrides: dict | None = None) -> RenderOptions:
    """
    Merge `overrides` over `defaults` and validate the result.

    Args:
        defaults:  One of the tables in AWE.OPT.constants.
        overrides: Caller options; None values are ignored.

    Returns:
        A frozen RenderOptions.

    Raises:
        InvalidArgument: unknown key, unsupported method or type, or a
                         non-positive dimension.
    """
    overrides = overrides or {}
    unknown = set(overrides) - _FIELDS
    if unknown:
        raise InvalidArgument(
            f"Unknown option(s): {', '.join(sorted(unknown))}\n"
            f"Valid options: {sorted(_FIELDS)}"
        )

    merged = dict(defaults)
    merged.update({k: v for k, v in overrides.items() if v is not None})

    method = str(merged.get("method", METHOD_PEAK)).lower()
    if method not in METHODS:
        raise InvalidArgument(f"Unknown sampling method {merged['method']!r}")
    merged["method"] = method

    out_type = str(merged.get("type", TYPE_PNG)).lower()
    if out_type not in TYPES:
        raise InvalidArgument(f"Unknown output type {merged['type']!r}")
    merged["type"] = out_type

    for key in _POSITIVE_INTS:
        if key in merged:
            merged[key] = _positive_int(key, merged[key])

    if "amplitude" in merged:
        merged["amplitude"] = _number("amplitude", merged["amplitude"])

    if "auto_width" in merged:
        merged["auto_width"] = _number("auto_width", merged["auto_width"])
        if merged["auto_width"] <= 0:
            raise InvalidArgument(f"auto_width must be > 0, got {merged['auto_width']!r}")

    if "gradient" in merged:
        merged["gradient"] = _gradient_pairs(merged["gradient"])

    return RenderOptions(**merged)


def _positive_int(key: str, value) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{key} must be an integer, got {value!r}") from None
    if number < 1:
        raise InvalidArgument(f"{key} must be >= 1, got {value!r}")
    return number


def _gradient_pairs(gradient) -> tuple[tuple[str, str], ...]:
    pairs = []
    for pair in gradient:
        if len(pair) != 2:
            raise InvalidArgument(f"gradient entries must be (start, end) pairs, got {pair!r}")
        pairs.append((str(pair[0]), str(pair[1])))
    return tuple(pairs)


def _number(key: str, value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{key} must be a number, got {value!r}") from None
