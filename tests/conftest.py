import os
import stat
import sys

import numpy as np
import pytest
import soundfile as sf

# tools/ is a plain script directory, not a package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "tools"))


@pytest.fixture
def make_wav(tmp_path):
    """Write `frames` to tmp_path/<name> as a float WAV and return the path."""
    def _make(frames, name="clip.wav", samplerate=8000):
        path = tmp_path / name
        sf.write(str(path), np.asarray(frames, dtype=np.float32), samplerate, subtype="FLOAT")
        return str(path)
    return _make


@pytest.fixture
def stereo_wav(make_wav):
    # 1000 frames: left channel a 0..1 ramp, right channel silent
    left = np.linspace(0.0, 1.0, 1000)
    right = np.zeros(1000)
    return make_wav(np.column_stack([left, right]))


@pytest.fixture
def fake_ffmpeg(tmp_path):
    """Shell script standing in for ffmpeg: copies a fixture WAV to its last argument."""
    def _make(wav_path):
        script = tmp_path / "ffmpeg"
        script.write_text(f'#!/bin/sh\nfor last; do :; done\ncp "{wav_path}" "$last"\n')
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        return str(script)
    return _make
