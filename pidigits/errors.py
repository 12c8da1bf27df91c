class PiDigitsError(Exception):
    pass


class InvalidPositionError(PiDigitsError, ValueError):
    pass


class NumericOverflowError(PiDigitsError, OverflowError):
    pass


class NonInvertibleError(PiDigitsError, ArithmeticError):
    pass


class ComputationCancelled(PiDigitsError):
    pass
