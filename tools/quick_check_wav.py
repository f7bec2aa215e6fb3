"""
Quick numeric checker for an audio file before generating its waveform.
Usage: python tools/quick_check_wav.py path/to/file.wav [width]

Prints stream info, per-channel peak/RMS over the whole file (read block by
block through the same reducer the sampler uses), and how many samples a
waveform of the given width (default 1800) would actually get.
"""
import sys

from AWE.errors import WaveformError
from AWE.SAM import reducer
from AWE.SAM.pcm_source import PcmSource
from AWE.SAM.sampler import frames_per_block

BLOCK_FRAMES = 65536


def check(path, width=1800):
    with PcmSource.open(path) as pcm:
        channels = pcm.channel_count
        total = pcm.total_frames

        print("=" * 60)
        print(f"File        : {path}")
        print(f"Sample rate : {pcm.sample_rate} Hz")
        print(f"Channels    : {channels}")
        print(f"Frames      : {total}")
        print(f"Duration    : {pcm.duration:.2f} s")
        print("=" * 60)

        if total == 0:
            print("  (empty, no waveform can be generated)")
            return

        peaks = [0.0] * channels
        sums = [0.0] * channels
        while True:
            block = pcm.read_block(BLOCK_FRAMES)
            if len(block) == 0:
                break
            peaks = [max(a, b) for a, b in zip(peaks, reducer.peak(block, channels))]
            block_rms = reducer.rms(block, channels)
            sums = [s + (r ** 2) * len(block) for s, r in zip(sums, block_rms)]

    for ch in range(channels):
        rms = (sums[ch] / total) ** 0.5
        flag = "  <-- clips" if peaks[ch] > 1.0 else ""
        print(f"  Ch{ch}: peak={peaks[ch]:.3f}  rms={rms:.3f}{flag}")

    block = frames_per_block(total, width)
    count = -(-total // block)
    print()
    print(f"Width {width}: {block} frames per sample -> {count} samples "
          f"({100.0 * (count - width) / width:+.1f}%)")
    print("=" * 60)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python tools/quick_check_wav.py file.wav [width]")
        raise SystemExit(1)
    try:
        check(sys.argv[1], int(sys.argv[2]) if len(sys.argv) > 2 else 1800)
    except WaveformError as e:
        print(f"[!!] {e}")
        raise SystemExit(1)
