import pytest

from AWE.SAM.spacer import GAP, Gap, is_gap, space


def _pattern(spaced):
    return ["gap" if is_gap(v) else "bar" for v in spaced]


def test_bar_two_gap_one():
    spaced = space([0.1, 0.2, 0.3, 0.4, 0.5, 0.6], 2, 1)
    assert _pattern(spaced) == ["bar", "bar", "gap", "bar", "bar", "gap"]


def test_bar_one_gap_two():
    spaced = space([0.1] * 6, 1, 2)
    assert _pattern(spaced) == ["bar", "gap", "gap", "bar", "gap", "gap"]


def test_length_is_preserved():
    for bar, gap in [(1, 1), (2, 1), (3, 2), (5, 4)]:
        assert len(space([0.5] * 17, bar, gap)) == 17


def test_never_starts_with_gap():
    for bar, gap in [(1, 1), (2, 3), (4, 1)]:
        assert not is_gap(space([0.5] * 10, bar, gap)[0])


def test_bar_value_is_rms_of_its_samples():
    spaced = space([0.3, 0.4, 0.9, 0.6, 0.8], 2, 1)
    expected = ((0.3 ** 2 + 0.4 ** 2) / 2) ** 0.5
    assert spaced[0] == pytest.approx(expected)
    assert spaced[1] == spaced[0]
    assert spaced[2] is GAP
    assert spaced[3] == pytest.approx(((0.6 ** 2 + 0.8 ** 2) / 2) ** 0.5)


def test_truncated_final_bar_uses_remaining_samples():
    spaced = space([0.5, 0.5, 0.5, 0.1, 0.7], 3, 1)
    assert _pattern(spaced) == ["bar", "bar", "bar", "gap", "bar"]
    assert spaced[4] == pytest.approx(0.7)


def test_bar_width_one_keeps_values():
    assert space([0.4, 0.2, 0.8], 1, 1) == [0.4, GAP, 0.8]


def test_widths_below_one_count_as_one():
    samples = [0.4, 0.2, 0.8]
    expected = space(samples, 1, 1)
    assert space(samples, 0, 0) == expected
    assert space(samples, None, -3) == expected


def test_gap_marker():
    assert Gap() is GAP
    assert not GAP
    assert repr(GAP) == "GAP"
    assert not is_gap(0)
