# =============================================================================
# AWE/SAM/__init__.py — Sample Acquisition Module
# =============================================================================
#
# Everything between "a path on disk" and "a list of normalised amplitude
# values ready to draw".
#
# Pipeline
# --------
#   1. transcode.pcm_path()   — hand back a WAV path (ffmpeg if needed),
#                               delete the temporary file afterwards
#   2. pcm_source.PcmSource   — soundfile reader, one block at a time
#   3. sampler.sample()       — block size from the requested resolution,
#                               reducer.peak / reducer.rms per block,
#                               reducer.average across channels
#   4. normalizer.normalize() — amplitude factor, 2-decimal rounding
#   5. spacer.space()         — optional bar/gap regrouping (GAP markers)
#
# Sub-modules:
#   reducer.py     — peak / rms / average (shared numeric core)
#   pcm_source.py  — soundfile-backed PCM reader
#   transcode.py   — ffmpeg conversion to WAV
#   sampler.py     — block-wise downsampling
#   normalizer.py  — amplitude scaling and rounding
#   spacer.py      — bar/gap regrouping, Gap marker type
# =============================================================================
