"""
Reference (pure-Python) decimal digit helpers.

A non-negative integer n with L digits is a palindrome when

    digit_at(n, p) == digit_at(n, L - 1 - p)   for all p < L / 2

where digit_at(n, p) = (n // 10**p) % 10 is the digit at decimal place p
(p = 0 is the ones digit). Negative numbers are never palindromes: the
minus sign breaks the symmetry.

These functions are the reference the JIT kernels in kernels.py are
tested against, and the per-element path used when Numba is disabled.
"""
from .constants import RADIX, MAX_DIGITS, DIGIT_THRESHOLDS
from .exceptions import InvariantViolationError


def digit_count(number):
    """Number of decimal digits of |number|.

    Returns 1 for 0-9, 2 for 10-99, ... and 10 for magnitudes of
    1,000,000,000 and above, which covers the whole 32-bit range.
    """
    number = abs(int(number))
    for i, threshold in enumerate(DIGIT_THRESHOLDS):
        if number >= threshold:
            return MAX_DIGITS - i
    return 1


def digit_at(number, decimal_place):
    """Digit of a non-negative number at the given decimal place.

    Args:
        number: non-negative integer
        decimal_place: 0 for the ones digit, 1 for tens, ...

    Raises:
        InvariantViolationError if decimal_place is outside [0, digit_count(number))
    """
    number = int(number)
    if decimal_place < 0 or decimal_place >= digit_count(number):
        raise InvariantViolationError(
            f"decimal place {decimal_place} outside number {number} "
            f"with {digit_count(number)} digits"
        )
    return (number // RADIX ** decimal_place) % RADIX


def _digits_mirror(number, left, right):
    """Compare digit pairs moving inward from (left, right)."""
    length = digit_count(number)
    while True:
        if left < 0 or right < 0 or left >= length or right >= length:
            raise InvariantViolationError(
                f"digit positions ({left}, {right}) outside [0, {length})"
            )
        if left >= right:
            return True
        if digit_at(number, left) != digit_at(number, right):
            return False
        left += 1
        right -= 1


def is_palindrome(number):
    """True if the decimal digits of number read the same in both directions."""
    number = int(number)
    if number < 0:
        return False
    return _digits_mirror(number, 0, digit_count(number) - 1)


def select_palindromes(numbers):
    """Palindromes in an iterable of integers, in input order."""
    return [int(n) for n in numbers if is_palindrome(n)]
