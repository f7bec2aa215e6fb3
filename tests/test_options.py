import pytest

from AWE.errors import InvalidArgument
from AWE.OPT.constants import WAVEFORMER_DEFAULTS, WAVEFORM_SVG_DEFAULTS
from AWE.OPT.options import resolve_options


def test_waveformer_defaults():
    opts = resolve_options(WAVEFORMER_DEFAULTS)
    assert opts.method == "peak"
    assert (opts.width, opts.height) == (1800, 280)
    assert opts.background_color == "#666666"
    assert opts.color == "#00ccff"
    assert opts.type == "png"


def test_svg_defaults():
    opts = resolve_options(WAVEFORM_SVG_DEFAULTS)
    assert (opts.samples, opts.gap_width, opts.bar_width, opts.height) == (100, 3, 1, 100)
    assert opts.type == "svg"


def test_overrides_and_none_values():
    opts = resolve_options(WAVEFORMER_DEFAULTS, {"width": 600, "height": None, "method": "RMS"})
    assert opts.width == 600
    assert opts.height == 280
    assert opts.method == "rms"


def test_unknown_option():
    with pytest.raises(InvalidArgument, match="colour"):
        resolve_options(WAVEFORMER_DEFAULTS, {"colour": "#fff"})


def test_unknown_method():
    with pytest.raises(InvalidArgument):
        resolve_options(WAVEFORMER_DEFAULTS, {"method": "fft"})


def test_unknown_type():
    with pytest.raises(InvalidArgument):
        resolve_options(WAVEFORMER_DEFAULTS, {"type": "gif"})


@pytest.mark.parametrize("key, value", [("width", 0), ("height", -1), ("samples", "many")])
def test_bad_dimensions(key, value):
    with pytest.raises(InvalidArgument):
        resolve_options(WAVEFORM_SVG_DEFAULTS, {key: value})


def test_bad_auto_width():
    with pytest.raises(InvalidArgument):
        resolve_options(WAVEFORMER_DEFAULTS, {"auto_width": 0})


def test_gradient_pairs():
    opts = resolve_options(WAVEFORM_SVG_DEFAULTS, {"gradient": [["#f00", "#00f"]]})
    assert opts.gradient == (("#f00", "#00f"),)
    with pytest.raises(InvalidArgument):
        resolve_options(WAVEFORM_SVG_DEFAULTS, {"gradient": [("#f00",)]})


def test_options_are_frozen():
    opts = resolve_options(WAVEFORMER_DEFAULTS)
    with pytest.raises(AttributeError):
        opts.width = 10


@pytest.mark.parametrize("key, value", [("amplitude", "loud"), ("amplitude", []), ("auto_width", "x")])
def test_non_numeric_scales(key, value):
    with pytest.raises(InvalidArgument):
        resolve_options(WAVEFORMER_DEFAULTS, {key: value})


def test_numeric_strings_are_accepted():
    opts = resolve_options(WAVEFORMER_DEFAULTS, {"amplitude": "1.5", "auto_width": "100"})
    assert opts.amplitude == 1.5
    assert opts.auto_width == 100.0
