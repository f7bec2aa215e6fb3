# =============================================================================
# AWE/SRM/__init__.py — Surface Rendering Module
# =============================================================================
#
# Maps normalised samples to geometry and emits the final image.  All output
# modes share one sample-to-geometry mapping (geometry.py); GAP positions are
# skipped everywhere.
#
# Sub-modules:
#   geometry.py  — rounding, bar / segment / path geometry, colour parsing
#   vector.py    — SVG documents: bar chart and line plot, base/progress <use>
#   raster.py    — RasterSurface (Pillow RGBA) and the PNG drawing pass,
#                  including transparency masking
#
# Amplitudes above 1.0 are drawn as-is and may run off the canvas.  Nothing
# here clips.
# =============================================================================
