import io
import os
import re
import sys

import numpy as np
import pytest
from PIL import Image

from AWE import waveform_svg, waveformer
from AWE.errors import DecodeFailure, EmptySource, InvalidArgument, SourceNotFound
from AWE.SAM import transcode

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _strip_ids(svg):
    return re.sub(r"waveform-[0-9a-f-]+", "waveform-X", svg)


# ── PNG / line SVG ──────────────────────────────────────────────────────────

def test_png_next_to_source(stereo_wav):
    out = waveformer.generate(stereo_wav, width=100, height=20)
    assert out == os.path.splitext(stereo_wav)[0] + ".png"
    with Image.open(out) as image:
        assert image.size == (100, 20)
        assert image.mode == "RGBA"
        assert image.getpixel((0, 0)) == (102, 102, 102, 255)
        # left channel ramps to full scale, right is silent: 0.5 at the end
        assert image.getpixel((99, 6)) == (0, 204, 255, 255)
        assert image.getpixel((0, 6)) == (102, 102, 102, 255)


def test_explicit_filename(stereo_wav, tmp_path):
    target = str(tmp_path / "output.png")
    assert waveformer.generate(stereo_wav, width=10, filename=target) == target
    assert os.path.exists(target)


def test_line_svg(stereo_wav):
    out = waveformer.generate(stereo_wav, type="svg", width=50)
    assert out.endswith(".svg")
    with open(out, encoding="utf-8") as f:
        svg = f.read()
    assert 'viewBox="0 0 50 280"' in svg
    assert svg.endswith("</svg>\n")


def test_auto_width(stereo_wav):
    # 1000 frames at 8 kHz = 125 ms
    out = waveformer.generate(stereo_wav, auto_width=25, height=10)
    with Image.open(out) as image:
        assert image.size == (5, 10)


def test_png_is_reproducible(stereo_wav, tmp_path):
    a = waveformer.generate(stereo_wav, width=40, height=20, filename=str(tmp_path / "a.png"))
    b = waveformer.generate(stereo_wav, width=40, height=20, filename=str(tmp_path / "b.png"))
    with open(a, "rb") as fa, open(b, "rb") as fb:
        assert fa.read() == fb.read()


def test_existing_output_is_replaced(stereo_wav):
    target = os.path.splitext(stereo_wav)[0] + ".png"
    with open(target, "wb") as f:
        f.write(b"old")
    log = io.StringIO()
    waveformer.generate(stereo_wav, width=10, logger=log)
    with open(target, "rb") as f:
        assert f.read(8) == PNG_SIGNATURE
    text = log.getvalue()
    assert "encountered. Removing." in text
    assert f"Generated waveform '{target}'" in text


def test_no_temporary_files_left(stereo_wav, tmp_path):
    waveformer.generate(stereo_wav, width=10)
    waveform_svg.generate(stereo_wav, samples=10)
    assert sorted(os.listdir(tmp_path)) == ["clip.png", "clip.svg", "clip.wav"]


# ── SVG bars ────────────────────────────────────────────────────────────────

def test_svg_bars(stereo_wav):
    out = waveform_svg.generate(stereo_wav, samples=10)
    assert out == os.path.splitext(stereo_wav)[0] + ".svg"
    with open(out, encoding="utf-8") as f:
        svg = f.read()
    assert svg.count("<rect ") == 10
    assert 'viewBox="0 0 30 100"' in svg


def test_svg_bars_reproducible_apart_from_ids(stereo_wav, tmp_path):
    outs = [
        waveform_svg.generate(stereo_wav, samples=20, filename=str(tmp_path / f"{n}.svg"))
        for n in ("a", "b")
    ]
    texts = []
    for out in outs:
        with open(out, encoding="utf-8") as f:
            texts.append(f.read())
    assert texts[0] != texts[1]
    assert _strip_ids(texts[0]) == _strip_ids(texts[1])


def test_rms_is_quieter_than_peak(make_wav, tmp_path):
    path = make_wav(np.tile([0.8, 0.0, 0.0, 0.0], 250))
    peak = waveform_svg.generate(path, samples=5, filename=str(tmp_path / "p.svg"))
    rms = waveform_svg.generate(path, samples=5, method="rms", filename=str(tmp_path / "r.svg"))
    with open(peak, encoding="utf-8") as f:
        assert 'height="80"' in f.read()
    with open(rms, encoding="utf-8") as f:
        assert 'height="40"' in f.read()


# ── Failures ────────────────────────────────────────────────────────────────

def test_missing_source(tmp_path):
    with pytest.raises(SourceNotFound):
        waveformer.generate(str(tmp_path / "nope.wav"))


def test_missing_source_name():
    with pytest.raises(InvalidArgument):
        waveformer.generate(None)
    with pytest.raises(InvalidArgument):
        waveform_svg.generate("")


def test_unknown_method(stereo_wav):
    with pytest.raises(InvalidArgument):
        waveformer.generate(stereo_wav, method="fft")
    assert not os.path.exists(os.path.splitext(stereo_wav)[0] + ".png")


def test_empty_source(make_wav):
    path = make_wav(np.zeros(0), name="empty.wav")
    with pytest.raises(EmptySource):
        waveformer.generate(path)
    assert not os.path.exists(os.path.splitext(path)[0] + ".png")


def test_decode_failure_keeps_existing_output(tmp_path):
    source = tmp_path / "bad.wav"
    source.write_bytes(b"garbage")
    target = tmp_path / "bad.png"
    target.write_bytes(b"old")
    with pytest.raises(DecodeFailure):
        waveformer.generate(str(source))
    assert target.read_bytes() == b"old"


@pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX shell")
def test_converted_source(tmp_path, make_wav, fake_ffmpeg, monkeypatch):
    wav = make_wav([0.5] * 400, name="fixture.wav")
    source = tmp_path / "clip.ogg"
    source.write_bytes(b"OggS")
    ffmpeg = fake_ffmpeg(wav)
    monkeypatch.setattr(transcode, "find_ffmpeg", lambda: ffmpeg)

    out = waveform_svg.generate(str(source), samples=4)
    assert out == str(tmp_path / "clip.svg")
    assert not [name for name in os.listdir(tmp_path) if name.startswith("tmp_clip_")]


# ── CLI ─────────────────────────────────────────────────────────────────────

def test_cli_png(stereo_wav, capsys):
    assert waveformer.main([stereo_wav, "--width", "10", "--height", "8"]) == 0
    assert "Generated waveform" in capsys.readouterr().out
    with Image.open(os.path.splitext(stereo_wav)[0] + ".png") as image:
        assert image.size == (10, 8)


def test_cli_bars(stereo_wav, tmp_path, capsys):
    target = str(tmp_path / "bars.svg")
    argv = [stereo_wav, "--bars", "--samples", "10", "-o", target, "-q"]
    assert waveformer.main(argv) == 0
    assert capsys.readouterr().out == ""
    with open(target, encoding="utf-8") as f:
        assert f.read().count("<rect ") == 10


def test_cli_error_exit_code(tmp_path, capsys):
    assert waveformer.main([str(tmp_path / "nope.wav"), "-q"]) == 1
    assert "[!!]" in capsys.readouterr().err


def test_cli_rejects_unknown_method(stereo_wav):
    with pytest.raises(SystemExit):
        waveformer.main([stereo_wav, "--method", "fft"])


def test_bad_amplitude_rejected_before_reading(stereo_wav, monkeypatch):
    def _no_sampling(*args, **kwargs):
        raise AssertionError("source was sampled")

    monkeypatch.setattr("AWE.pipeline.sample", _no_sampling)
    with pytest.raises(InvalidArgument):
        waveformer.generate(stereo_wav, width=10, amplitude="loud")
    with pytest.raises(InvalidArgument):
        waveform_svg.generate(stereo_wav, amplitude="loud")


def test_svg_bars_reject_other_types(stereo_wav):
    with pytest.raises(InvalidArgument):
        waveform_svg.generate(stereo_wav, type="png")
    assert not os.path.exists(os.path.splitext(stereo_wav)[0] + ".svg")
    assert not os.path.exists(os.path.splitext(stereo_wav)[0] + ".png")
