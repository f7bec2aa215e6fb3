# =============================================================================
# AWE/SVM/__init__.py — Self-Validation Module
# =============================================================================
#
# Quick confidence checks for an installed AWE: hand-computed fixtures run
# through every stage without touching the filesystem.
#
# Sub-modules:
#   validate.py  — check suite, python -m AWE.SVM.validate
# =============================================================================
