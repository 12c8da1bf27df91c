__all__ = [
    "compute_pi_digits",
    "extract_window",
    "DigitWindow",
    "FractionalAccumulator",
    "prime_contribution",
    "divn",
    "is_prime",
    "next_prime",
    "inv_mod",
    "inv_mod2",
    "pow_mod",
    "verify_window",
    "PiDigitsError",
    "InvalidPositionError",
    "NumericOverflowError",
    "NonInvertibleError",
    "ComputationCancelled",
]

from .accumulator import FractionalAccumulator
from .errors import ComputationCancelled, InvalidPositionError, NonInvertibleError, NumericOverflowError, PiDigitsError
from .extractor import DigitWindow, compute_pi_digits, extract_window
from .factors import divn
from .modular import inv_mod, inv_mod2, pow_mod
from .primes import is_prime, next_prime
from .series import prime_contribution
from .verify import verify_window
