import pytest

from pidigits.factors import FACTOR_PHASES, divn, strip_prime


def _brute(t, a):
    count = 0
    while t % a == 0:
        t //= a
        count += 1
    return t, count


def test_strip_prime_matches_brute_force():
    for a in (2, 3, 5, 7, 11):
        for t in range(1, 3000):
            rest, count = strip_prime(t, a)
            assert rest % a != 0
            assert rest * a**count == t
            assert (rest, count) == _brute(t, a)


def test_strip_prime_rejects_bad_input():
    with pytest.raises(ValueError):
        strip_prime(0, 3)
    with pytest.raises(ValueError):
        strip_prime(9, 1)


def test_divn_follows_each_series_factor():
    factors = [
        lambda k: 2 * k,
        lambda k: 2 * k - 1,
        lambda k: 3 * (3 * k - 1),
        lambda k: 3 * k - 2,
    ]
    for a in (2, 3, 5, 7, 13, 31):
        for (kq, kqinc, vinc), factor in zip(FACTOR_PHASES, factors):
            for k in range(1, 400):
                t = factor(k)
                rest, kq, dv = divn(t, a, kq, kqinc, vinc)
                expected, count = _brute(t, a)
                assert rest == expected
                assert rest % a != 0
                assert dv == vinc * count
                assert 0 <= kq < a
                assert kq == t % a


def test_divn_without_wrap_leaves_term_alone():
    t, kq, dv = divn(4, 7, 0, 4, -1)
    assert (t, kq, dv) == (4, 4, 0)


def test_divn_strips_repeated_factors():
    t, kq, dv = divn(54, 3, 0, 54, 1)
    assert (t, kq, dv) == (2, 0, 3)
    t, kq, dv = divn(16, 2, 14, 2, -1)
    assert (t, kq, dv) == (1, 0, -4)
