from typing import Tuple


# (initial kq, kq increment, exponent increment) for 2k, 2k-1, 3(3k-1) and 3k-2
FACTOR_PHASES = (
    (0, 2, -1),
    (-1, 2, -1),
    (-3, 9, 1),
    (-2, 3, 1),
)


def divn(t: int, a: int, kq: int, kqinc: int, vinc: int) -> Tuple[int, int, int]:
    """Advance the residue counter kq and strip every factor a from t when it hits zero.

    kq follows t modulo a without dividing: it only wraps once it reaches a,
    and t is divisible by a exactly when the wrapped value is 0.

    Returns (t, kq, dv) where dv is vinc times the number of factors removed.
    """
    kq += kqinc
    dv = 0
    if kq >= a:
        kq %= a
        if kq == 0:
            while True:
                t //= a
                dv += vinc
                if t % a:
                    break
    return t, kq, dv


def strip_prime(t: int, a: int) -> Tuple[int, int]:
    if a < 2:
        raise ValueError("a must be >= 2")
    if t == 0:
        raise ValueError("t must be non-zero")
    count = 0
    while t % a == 0:
        t //= a
        count += 1
    return t, count
