import logging
import math
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from .accumulator import MODES, FractionalAccumulator
from .errors import ComputationCancelled, InvalidPositionError
from .modular import check_operand
from .primes import iter_primes
from .series import prime_contribution


logger = logging.getLogger(__name__)

_LOG_13_5 = math.log(13.5)
_GUARD_DIGITS = 20
MAX_COUNT = 12
FLOAT_MAX_COUNT = 10

ProgressCallback = Callable[[int, int], None]
CancelCheck = Callable[[], bool]


@dataclass(frozen=True)
class DigitWindow:
    position: int
    count: int
    digits: int
    largest_prime: int
    terms: int
    primes: int
    mode: str
    word_bits: int

    @property
    def text(self) -> str:
        return str(self.digits).zfill(self.count)


def _check_position(n) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidPositionError(f"position must be an integer, got {n!r}")
    if n < 0:
        raise InvalidPositionError("position must be >= 0")
    return n


def series_exponent(n: int) -> int:
    return _check_position(n) + 1


def series_terms(n: int) -> int:
    e = series_exponent(n)
    return int(math.ceil((e + _GUARD_DIGITS) * math.log(10) / _LOG_13_5))


def exponent_bound(a: int, terms: int, exponent: int) -> int:
    limit = 3 * terms
    vmax = 0
    p = a
    while p <= limit:
        vmax += 1
        p *= a
    if a == 2:
        vmax += terms - exponent
    return vmax


def _plan(terms: int, exponent: int) -> Iterator[Tuple[int, int]]:
    for a in iter_primes(3 * terms):
        vmax = exponent_bound(a, terms, exponent)
        if vmax <= 0:
            continue
        yield a, vmax


def _prime_task(task: Tuple[int, int, int, int, int]) -> Tuple[int, int, int]:
    a, vmax, terms, exponent, word_bits = task
    s, av = prime_contribution(a, vmax, terms, exponent, word_bits)
    return a, s, av


def _sequential(tasks: List[Tuple[int, int, int, int, int]]) -> Iterator[Tuple[int, int, int]]:
    for task in tasks:
        yield _prime_task(task)


def _parallel(tasks: List[Tuple[int, int, int, int, int]], workers: int) -> Iterator[Tuple[int, int, int]]:
    ex = ProcessPoolExecutor(max_workers=workers)
    try:
        futures = [ex.submit(_prime_task, task) for task in tasks]
        for fut in futures:
            yield fut.result()
    finally:
        ex.shutdown(wait=True, cancel_futures=True)


def extract_window(
    n: int,
    count: int = 10,
    *,
    word_bits: int = 32,
    mode: str = "mpf",
    workers: int = 1,
    progress: Optional[ProgressCallback] = None,
    cancel: Optional[CancelCheck] = None,
) -> DigitWindow:
    """Digits [n, n+count) after the decimal point of pi.

    Sums the series prime by prime up to 3N; each prime's share is computed
    with moduli below 2**(word_bits-1) and folded into the fractional
    accumulator in increasing prime order.
    """
    n = _check_position(n)
    count = int(count)
    mode = (mode or "mpf").lower().strip()
    if mode not in MODES:
        raise ValueError("unsupported accumulator mode")
    limit = FLOAT_MAX_COUNT if mode == "float" else MAX_COUNT
    if count < 1 or count > limit:
        raise ValueError(f"count must be between 1 and {limit} for mode {mode}")
    workers = int(workers)
    if workers < 1:
        raise ValueError("workers must be >= 1")

    exponent = series_exponent(n)
    terms = series_terms(n)
    check_operand(25 * terms - 3, word_bits, "series coefficient")
    sweep_limit = 3 * terms
    logger.debug("position=%d terms=%d sweep_limit=%d mode=%s workers=%d", n, terms, sweep_limit, mode, workers)

    tasks = [(a, vmax, terms, exponent, word_bits) for a, vmax in _plan(terms, exponent)]
    acc = FractionalAccumulator(mode)
    largest = 0
    results = _sequential(tasks) if workers == 1 or len(tasks) < 2 else _parallel(tasks, workers)
    try:
        for a, s, av in results:
            acc.add(s, av)
            largest = a
            if progress is not None:
                progress(a, sweep_limit)
            if cancel is not None and cancel():
                logger.debug("cancelled after prime %d", a)
                raise ComputationCancelled(f"cancelled after prime {a}")
    finally:
        results.close()

    window = DigitWindow(
        position=n,
        count=count,
        digits=acc.digits(count),
        largest_prime=largest,
        terms=terms,
        primes=acc.count,
        mode=mode,
        word_bits=int(word_bits),
    )
    logger.debug("position=%d digits=%s primes=%d largest_prime=%d", n, window.text, window.primes, largest)
    return window


def compute_pi_digits(n: int) -> Tuple[int, int]:
    window = extract_window(n)
    return window.digits, window.largest_prime
