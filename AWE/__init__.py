# =============================================================================
# AWE — Audio Waveform Engine
# =============================================================================
#
# Turns a decoded audio signal into a compact waveform thumbnail: a fixed
# number of amplitude samples drawn as SVG bars, an SVG line plot, or a PNG.
#
# ── DATA FLOW ─────────────────────────────────────────────────────────────────
#   source file → (ffmpeg, if not WAV) → PcmSource → Sampler → Normalizer
#               → (Spacer) → Renderer → .svg / .png on disk
#
# The sampler never holds more than one block of PCM frames in memory.
#
# ── Module layout ─────────────────────────────────────────────────────────────
#   OPT/             — defaults tables, RenderOptions resolution
#   SAM/             — Sample Acquisition: PCM source, transcoding, reducer,
#                      sampler, normalizer, spacer
#   SRM/             — Surface Rendering: geometry, SVG writer, PNG surface
#   SVM/             — self-validation suite (python -m AWE.SVM.validate)
#   errors.py        — exception hierarchy
#   progress.py      — progress/benchmark log
#   pipeline.py      — shared generate() plumbing (paths, temp files, writes)
#   waveformer.py    — PNG / SVG line-plot generator + CLI
#   waveform_svg.py  — SVG bar generator
# =============================================================================
