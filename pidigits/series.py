from typing import Tuple

from .errors import NumericOverflowError
from .factors import FACTOR_PHASES, divn
from .modular import inv_mod, inv_mod2, max_operand, mul_mod, pow_mod


def prime_power(a: int, vmax: int, word_bits: int = 32) -> int:
    limit = max_operand(word_bits)
    av = 1
    for _ in range(int(vmax)):
        av *= a
        if av > limit:
            raise NumericOverflowError(f"modulus {a}^{vmax} exceeds the {word_bits}-bit limit {limit}")
    return av


def prime_contribution(a: int, vmax: int, terms: int, exponent: int, word_bits: int = 32) -> Tuple[int, int]:
    """Partial sum of the series for one prime, reduced modulo a**vmax.

    The term for k is (25k-3) * 2**exponent * (2k)! k! / ((3k)! 2**k). Every
    factor of a is stripped from the running numerator and denominator and
    counted in v, so num and den stay invertible modulo av. Only terms with
    v > 0 leave a fractional remainder at this prime.

    Returns (s, av); s / av is this prime's share of frac(pi * 10**(exponent-1)).
    """
    if exponent < 1:
        raise ValueError("exponent must be >= 1")
    if vmax < 1:
        raise ValueError("vmax must be >= 1")
    av = prime_power(a, vmax, word_bits)
    (kq1, inc1, vinc1), (kq2, inc2, vinc2), (kq3, inc3, vinc3), (kq4, inc4, vinc4) = FACTOR_PHASES
    s = 0
    den = 1
    if a == 2:
        num = 1
        v = -exponent
        inverse = inv_mod
    else:
        num = pow_mod(2, exponent, av)
        v = 0
        inverse = inv_mod2
    for k in range(1, terms + 1):
        t, kq1, dv = divn(2 * k, a, kq1, inc1, vinc1)
        v += dv
        num = mul_mod(num, t, av)

        t, kq2, dv = divn(2 * k - 1, a, kq2, inc2, vinc2)
        v += dv
        num = mul_mod(num, t, av)

        t, kq3, dv = divn(3 * (3 * k - 1), a, kq3, inc3, vinc3)
        v += dv
        den = mul_mod(den, t, av)

        t, kq4, dv = divn(3 * k - 2, a, kq4, inc4, vinc4)
        v += dv
        if a != 2:
            t *= 2
        else:
            v += 1
        den = mul_mod(den, t, av)

        if v > 0:
            t = mul_mod(inverse(den, av), num, av)
            for _ in range(v, vmax):
                t = mul_mod(t, a, av)
            t = mul_mod(t, 25 * k - 3, av)
            s += t
            if s >= av:
                s -= av
    s = mul_mod(s, pow_mod(5, exponent - 1, av), av)
    return s, av
