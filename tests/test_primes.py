import sympy

from pidigits.primes import is_prime, iter_primes, next_prime


def test_is_prime_matches_sympy():
    for m in range(-5, 10001):
        assert is_prime(m) == bool(sympy.isprime(m)), m


def test_next_prime_is_smallest_larger_prime():
    for m in range(-3, 2000):
        p = next_prime(m)
        assert p > m
        assert sympy.isprime(p)
        assert p == (sympy.nextprime(m) if m >= 2 else 2)


def test_iter_primes():
    assert list(iter_primes(30)) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    assert list(iter_primes(2)) == [2]
    assert list(iter_primes(1)) == []
    assert list(iter_primes(7919)) == list(sympy.primerange(2, 7920))
