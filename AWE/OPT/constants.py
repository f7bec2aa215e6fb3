# =============================================================================
# constants.py — OPT defaults and fixed values
# =============================================================================
#
# Two generators share one RenderOptions shape but start from different
# defaults:
#   WAVEFORMER_DEFAULTS    — PNG / SVG line plot, one sample per pixel column
#   WAVEFORM_SVG_DEFAULTS  — SVG bars, a fixed sample count in a logical viewBox
# =============================================================================

# -----------------------------------------------------------------------------
# SAMPLING
# -----------------------------------------------------------------------------

METHOD_PEAK = "peak"
METHOD_RMS  = "rms"
METHODS     = (METHOD_PEAK, METHOD_RMS)

# Files with this extension are read directly; everything else goes through
# ffmpeg first.
PCM_EXTENSION = ".wav"

# Normalised sample precision (decimal places)
SAMPLE_PRECISION = 2


# -----------------------------------------------------------------------------
# OUTPUT
# -----------------------------------------------------------------------------

TYPE_PNG = "png"
TYPE_SVG = "svg"
TYPES    = (TYPE_PNG, TYPE_SVG)

# Sentinel accepted for both `color` and `background_color`
TRANSPARENT = "transparent"

# Raster transparency masking.  The waveform is drawn in TRANSPARENCY_MASK and
# every pixel of that colour is cleared afterwards.  If the background already
# is the mask colour, TRANSPARENCY_ALTERNATE is used instead.
TRANSPARENCY_MASK      = "#00ff00"
TRANSPARENCY_ALTERNATE = "#ffff00"

# SVG colours used by the embedded <style> block
SVG_BASE_COLOR     = "#c4c8ce"
SVG_PROGRESS_COLOR = "#9d34a5"


# -----------------------------------------------------------------------------
# DEFAULTS TABLES
# -----------------------------------------------------------------------------

WAVEFORMER_DEFAULTS = {
    "method":           METHOD_PEAK,
    "width":            1800,
    "height":           280,
    "amplitude":        1,
    "background_color": "#666666",
    "color":            "#00ccff",
    "type":             TYPE_PNG,
}

WAVEFORM_SVG_DEFAULTS = {
    "method":     METHOD_PEAK,
    "samples":    100,
    "amplitude":  1,
    "gap_width":  3,
    "bar_width":  1,
    "height":     100,
    "type":       TYPE_SVG,
}
