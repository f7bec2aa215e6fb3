# =============================================================================
# AWE/OPT/__init__.py — Options Module
# =============================================================================
#
# The OPT module is the single source of truth for every default the engine
# uses: output sizes, colours, sampling method, transparency mask colours.
#
# All other AWE sub-modules read defaults exclusively from here.
#
# Sub-modules:
#   constants.py  — defaults tables and fixed colour/method constants
#   options.py    — RenderOptions (immutable) and resolve_options()
# =============================================================================
