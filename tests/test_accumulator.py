from fractions import Fraction

import pytest
from mpmath import mp

from pidigits.accumulator import FractionalAccumulator


PARTS = [(1, 3), (2, 7), (5, 11), (80, 81), (12345, 2**20)]


def test_exact_mode_is_fractional_part():
    acc = FractionalAccumulator("exact")
    for s, av in PARTS:
        acc.add(s, av)
    expected = sum(Fraction(s, av) for s, av in PARTS) % 1
    assert acc.value() == expected
    assert acc.count == len(PARTS)
    assert 0 <= acc.value() < 1


def test_exact_mode_does_not_depend_on_order():
    a = FractionalAccumulator("exact")
    b = FractionalAccumulator("exact")
    for s, av in PARTS:
        a.add(s, av)
    for s, av in reversed(PARTS):
        b.add(s, av)
    assert a.value() == b.value()


def test_modes_agree_on_digits():
    expected = sum(Fraction(s, av) for s, av in PARTS) % 1
    digits = int(expected * 10**10)
    for mode in ("float", "mpf", "exact"):
        acc = FractionalAccumulator(mode)
        for s, av in PARTS:
            acc.add(s, av)
        assert acc.digits(10) == digits


def test_mpf_mode_leaves_global_precision_alone():
    before = mp.prec
    acc = FractionalAccumulator("mpf", prec=256)
    acc.add(1, 3)
    acc.digits(12)
    assert mp.prec == before


def test_rejects_bad_arguments():
    with pytest.raises(ValueError):
        FractionalAccumulator("decimal")
    with pytest.raises(ValueError):
        FractionalAccumulator("mpf", prec=16)
    with pytest.raises(ValueError):
        FractionalAccumulator("exact").digits(0)
