import math
from typing import Iterator


def is_prime(m: int) -> bool:
    if m < 2:
        return False
    if m % 2 == 0:
        return m == 2
    r = math.isqrt(m)
    for i in range(3, r + 1, 2):
        if m % i == 0:
            return False
    return True


def next_prime(m: int) -> int:
    if m < 2:
        return 2
    m += 1
    while not is_prime(m):
        m += 1
    return m


def iter_primes(limit: int) -> Iterator[int]:
    a = 2
    while a <= limit:
        yield a
        a = next_prime(a)
