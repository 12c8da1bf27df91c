import pytest

from pidigits.formatting import format_elapsed, ordinal, ordinal_suffix, progress_fraction


def test_ordinal_suffix():
    assert ordinal_suffix(0) == "th"
    assert ordinal_suffix(1) == "st"
    assert ordinal_suffix(2) == "nd"
    assert ordinal_suffix(3) == "rd"
    assert ordinal_suffix(4) == "th"
    assert ordinal_suffix(21) == "st"
    assert ordinal_suffix(102) == "nd"
    assert ordinal_suffix(1003) == "rd"


def test_ordinal_teens():
    for n in (11, 12, 13, 111, 212, 1013):
        assert ordinal_suffix(n) == "th"


def test_ordinal():
    assert ordinal(1) == "1st"
    assert ordinal(22) == "22nd"
    assert ordinal(113) == "113th"
    assert ordinal(1000) == "1000th"


def test_format_elapsed():
    assert format_elapsed(0) == "0:00.000"
    assert format_elapsed(1.2344) == "0:01.234"
    assert format_elapsed(1.2346) == "0:01.235"
    assert format_elapsed(61.5) == "1:01.500"
    assert format_elapsed(59.9996) == "1:00.000"
    assert format_elapsed(3725.25) == "62:05.250"
    with pytest.raises(ValueError):
        format_elapsed(-1)


def test_progress_fraction():
    assert progress_fraction(0, 100) == 0.0
    assert progress_fraction(50, 100) == 0.5
    assert progress_fraction(150, 100) == 1.0
    with pytest.raises(ValueError):
        progress_fraction(1, 0)
