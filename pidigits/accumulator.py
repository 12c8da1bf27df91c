import math
from fractions import Fraction

from mpmath import mp


MODES = ("float", "mpf", "exact")


class FractionalAccumulator:
    """Running fractional part of the sum of s / av over all primes.

    "float" reproduces the double precision fold of the reference program,
    "mpf" keeps 128 bits in mpmath without touching the global context, and
    "exact" keeps a Fraction so the result does not depend on fold order.
    """

    def __init__(self, mode: str = "mpf", prec: int = 128):
        self.mode = (mode or "mpf").lower().strip()
        if self.mode not in MODES:
            raise ValueError("unsupported accumulator mode")
        self.prec = int(prec)
        if self.prec < 64:
            raise ValueError("prec must be >= 64")
        if self.mode == "float":
            self.total = 0.0
        elif self.mode == "mpf":
            with mp.workprec(self.prec):
                self.total = mp.mpf(0)
        else:
            self.total = Fraction(0)
        self.count = 0

    def add(self, s: int, av: int):
        if self.mode == "float":
            self.total = math.fmod(self.total + s / av, 1.0)
        elif self.mode == "mpf":
            with mp.workprec(self.prec):
                x = self.total + mp.mpf(s) / av
                self.total = x - mp.floor(x)
        else:
            self.total = (self.total + Fraction(s, av)) % 1
        self.count += 1

    def value(self):
        return self.total

    def digits(self, count: int = 10) -> int:
        count = int(count)
        if count < 1:
            raise ValueError("count must be >= 1")
        if self.mode == "float":
            return int(self.total * 10.0**count)
        if self.mode == "mpf":
            with mp.workprec(self.prec):
                return int(mp.floor(self.total * 10**count))
        return math.floor(self.total * 10**count)
