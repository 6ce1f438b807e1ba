"""Entropy estimation.

Rough upper bound on guess space assuming each character is drawn
independently and uniformly from the pool of classes it uses.
"""

import math

from core.patterns import character_classes


# class sizes added to the pool when the class is present
LOWER_POOL = 26
UPPER_POOL = 26
DIGIT_POOL = 10
SYMBOL_POOL = 32  # approximation of printable symbols


def pool_size(password: str) -> int:
    """Sum the sizes of the character classes present in password."""
    lower, upper, digits, symbols = character_classes(password)
    size = 0
    if lower:
        size += LOWER_POOL
    if upper:
        size += UPPER_POOL
    if digits:
        size += DIGIT_POOL
    if symbols:
        size += SYMBOL_POOL
    return size


def entropy_bits(password: str) -> float:
    """Estimate entropy in bits as length * log2(pool size)."""
    pool = pool_size(password)
    if pool == 0:
        return 0.0
    return len(password) * math.log2(pool)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to the given number of decimals, halves rounding up.

    Scores must not use banker's rounding (round(2.5) == 2).
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
