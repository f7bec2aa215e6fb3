# =============================================================================
# errors.py — AWE exception hierarchy
# =============================================================================
#
# Every failure the engine raises derives from WaveformError so callers can
# catch the whole family in one place.  Each kind also inherits the builtin it
# most resembles, so plain `except ValueError` style handlers keep working.
#
# Nothing here retries: generation is a one-shot batch job.
# =============================================================================


class WaveformError(Exception):
    """Base class for all AWE errors."""


class InvalidArgument(WaveformError, ValueError):
    """Missing source/destination path, unknown option, unsupported method."""


class SourceNotFound(WaveformError, FileNotFoundError):
    """The source audio path does not exist."""


class DecodeFailure(WaveformError, RuntimeError):
    """The PCM reader could not interpret the source stream."""


class ConversionFailure(WaveformError, RuntimeError):
    """The transcoder could not turn the source into WAV."""


class EmptySource(WaveformError, ValueError):
    """The source decodes to zero frames."""
