"""Integer helpers used by the puzzle solutions."""

import math


def difference(a: int, b: int) -> int:
    """Return the absolute difference between two integers."""
    return abs(a - b)


def count_digits(num: int, base: int = 10) -> int:
    """Return the number of digits of ``num`` written in ``base``."""
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if num == 0:
        return 1
    num = abs(num)
    digits = 0
    while num:
        num //= base
        digits += 1
    return digits


def int_pow(a: int, b: int) -> int:
    """Raise ``a`` to ``b`` in floating point and truncate to an integer."""
    return int(math.pow(a, b))


def log10(num: int) -> int:
    """Return the truncated base-10 logarithm of a positive integer."""
    if num <= 0:
        raise ValueError(f"logarithm is undefined for {num}")
    return int(math.log10(num))


def sign(value: int) -> int:
    """Return -1, 0 or 1 according to the sign of ``value``."""
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


def to_base(number: int, base: int) -> list[int]:
    """Return the digits of ``number`` in ``base``, least significant first.

    Negative numbers yield an empty list.
    """
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if number == 0:
        return [0]
    digits = []
    while number > 0:
        number, remainder = divmod(number, base)
        digits.append(remainder)
    return digits