# =============================================================================
# progress.py — progress output and benchmarking for long batch runs
# =============================================================================
#
# A ProgressLog prints to any text stream (sys.stdout, a file, io.StringIO).
# With io=None every call is a no-op, which is the default for library use.
#
# Timing scopes are explicit: each timed() block measures itself, and there is
# no shared clock stack between log instances.
#
# Example output:
#   Sampling 490 frames per sample: ..........(0.04s)
#   Drawing...(0.01s)
#   Generated waveform 'clip.png' (0.06s)
# =============================================================================

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator, TextIO


class ProgressLog:

    def __init__(self, io: TextIO | None = None) -> None:
        self.io = io

    def out(self, msg: str) -> None:
        """Print `msg` as-is (no newline added)."""
        if self.io is not None:
            self.io.write(msg)
            self.io.flush()

    def start(self) -> float:
        """Return a clock reading to pass to done()."""
        return time.perf_counter()

    def done(self, started: float, msg: str = "") -> float:
        """Print `msg` followed by the seconds elapsed since `started`."""
        elapsed = time.perf_counter() - started
        self.out(f"{msg} ({elapsed:.2f}s)\n")
        return elapsed

    @contextmanager
    def timed(self, message: str | None = None) -> Iterator["ProgressLog"]:
        """Benchmark the enclosed block, printing `message` first."""
        started = self.start()
        if message:
            self.out(message)
        yield self
        self.done(started)
