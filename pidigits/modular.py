from .errors import NonInvertibleError, NumericOverflowError


def max_operand(word_bits: int) -> int:
    word_bits = int(word_bits)
    if word_bits < 8:
        raise ValueError("word_bits must be >= 8")
    return 2 ** (word_bits - 1) - 1


def check_operand(value: int, word_bits: int, what: str = "operand") -> int:
    limit = max_operand(word_bits)
    if value > limit:
        raise NumericOverflowError(f"{what} {value} exceeds the {word_bits}-bit limit {limit}")
    return value


def mul_mod(a: int, b: int, m: int) -> int:
    return (a * b) % m


def pow_mod(base: int, exponent: int, modulus: int) -> int:
    if modulus < 1:
        raise ValueError("modulus must be >= 1")
    if exponent < 0:
        raise ValueError("exponent must be >= 0")
    r = 1 % modulus
    aa = base % modulus
    while exponent:
        if exponent & 1:
            r = mul_mod(r, aa, modulus)
        exponent >>= 1
        if exponent:
            aa = mul_mod(aa, aa, modulus)
    return r


def inv_mod(x: int, y: int) -> int:
    """Inverse of x modulo y by the extended Euclidean algorithm."""
    if y < 1:
        raise ValueError("modulus must be >= 1")
    if y == 1:
        return 0
    u = x % y
    if u == 0:
        raise NonInvertibleError(f"{x} has no inverse modulo {y}")
    v = y
    c, a = 1, 0
    while u:
        q = v // u
        c, a = a - q * c, c
        u, v = v - q * u, u
    if v != 1:
        raise NonInvertibleError(f"{x} has no inverse modulo {y}")
    return a % y


def inv_mod2(u: int, v: int) -> int:
    """Inverse of u modulo an odd v, using only shifts and subtractions."""
    if v < 1 or not v & 1:
        raise ValueError("modulus must be odd and >= 1")
    if v == 1:
        return 0
    u %= v
    if u == 0:
        raise NonInvertibleError(f"0 has no inverse modulo {v}")
    u1, u3 = 1, u
    v1, v3 = v, v
    if u & 1:
        t1, t3 = 0, -v
    else:
        t1, t3 = 1, u
    while True:
        while not t3 & 1:
            if t1 & 1:
                t1 = (t1 + v) >> 1
            else:
                t1 >>= 1
            t3 >>= 1
        if t3 >= 0:
            u1, u3 = t1, t3
        else:
            v1, v3 = v - t1, -t3
        t1 = u1 - v1
        t3 = u3 - v3
        if t1 < 0:
            t1 += v
        if t3 == 0:
            break
    if u3 != 1:
        raise NonInvertibleError(f"{u} has no inverse modulo {v}")
    return u1 % v
