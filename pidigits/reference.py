from mpmath import mp


def pi_digits_spigot():
    q, r, t, k, n, l = 1, 0, 1, 1, 3, 3
    while True:
        if 4 * q + r - t < n * t:
            yield n
            q, r, t, k, n, l = (
                10 * q,
                10 * (r - n * t),
                t,
                k,
                ((10 * (3 * q + r)) // t) - 10 * n,
                l,
            )
        else:
            q, r, t, k, n, l = (
                q * k,
                (2 * q + r) * l,
                t * l,
                k + 1,
                (q * (7 * k + 2) + r * l) // (t * l),
                l + 2,
            )


def spigot_window(n: int, count: int) -> str:
    n = int(n)
    count = int(count)
    if n < 0:
        raise ValueError("n must be >= 0")
    if count < 0:
        raise ValueError("count must be >= 0")
    g = pi_digits_spigot()
    next(g)
    for _ in range(n):
        next(g)
    return "".join(str(next(g)) for _ in range(count))


def mp_window(n: int, count: int) -> str:
    n = int(n)
    count = int(count)
    if n < 0:
        raise ValueError("n must be >= 0")
    if count < 0:
        raise ValueError("count must be >= 0")
    with mp.workdps(n + count + 30):
        x = mp.pi * mp.power(10, n)
        f = x - mp.floor(x)
        d = int(mp.floor(f * mp.power(10, count)))
    return str(d).zfill(count) if count else ""
