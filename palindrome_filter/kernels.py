"""
Numba JIT palindrome kernels.

Same arithmetic as digits.py, compiled to native code. Kernels operate on
int64 values (32-bit inputs widened so |INT32_MIN| does not overflow) and
release the GIL, so ThreadBackend workers run them truly in parallel.

Position checks from the reference implementation are not repeated here:
positions are derived from the digit count and cannot leave [0, L).
"""
import numpy as np
from numba import njit, prange

from .constants import RADIX, MAX_DIGITS, POWERS_OF_TEN, DIGIT_THRESHOLDS


# ===================================================================
# Scalar kernels
# ===================================================================

@njit(cache=True, nogil=True)
def digit_count_jit(number):
    """Number of decimal digits of |number| (1..10)."""
    if number < 0:
        number = -number
    for i in range(DIGIT_THRESHOLDS.shape[0]):
        if number >= DIGIT_THRESHOLDS[i]:
            return MAX_DIGITS - i
    return 1


@njit(cache=True, nogil=True)
def digit_at_jit(number, decimal_place):
    """Digit at decimal place (0 = ones) of a non-negative number."""
    return (number // POWERS_OF_TEN[decimal_place]) % RADIX


@njit(cache=True, nogil=True)
def is_palindrome_jit(number):
    """Two-pointer digit comparison; negatives are never palindromes."""
    if number < 0:
        return False
    left = 0
    right = digit_count_jit(number) - 1
    while left < right:
        if digit_at_jit(number, left) != digit_at_jit(number, right):
            return False
        left += 1
        right -= 1
    return True


# ===================================================================
# Array kernels
# ===================================================================

@njit(cache=True, nogil=True)
def palindrome_mask_jit(numbers):
    """Boolean mask over an int64 array, evaluated serially.

    Called once per chunk by each pool worker.
    """
    n = numbers.shape[0]
    mask = np.zeros(n, dtype=np.bool_)
    for i in range(n):
        mask[i] = is_palindrome_jit(numbers[i])
    return mask


@njit(cache=True, parallel=True)
def palindrome_mask_parallel(numbers):
    """Boolean mask over an int64 array, evaluated with prange.

    Each iteration writes only its own mask slot, so no synchronisation
    is needed between Numba threads.
    """
    n = numbers.shape[0]
    mask = np.zeros(n, dtype=np.bool_)
    for i in prange(n):
        mask[i] = is_palindrome_jit(numbers[i])
    return mask
